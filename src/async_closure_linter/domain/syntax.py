"""Parser-independent syntax model walked by the lint rules."""

from dataclasses import dataclass, field
from typing import Optional, Union

from async_closure_linter.domain.type_shapes import TypeShape


@dataclass(frozen=True)
class PropertyBinding:
    """One `name: Type` pair of a property declaration."""

    name: str
    type_shape: Optional[TypeShape] = None


@dataclass(frozen=True)
class PropertyDeclaration:
    """
    A `var`/`let` declaration. A single declaration may bind several names
    (`var a: A, b: B`), each with its own annotation.

    `members` holds type declarations nested anywhere inside the property,
    e.g. in a computed body or an initializer closure.
    """

    bindings: tuple[PropertyBinding, ...]
    offset: int
    members: tuple["SyntaxNode", ...] = ()


@dataclass(frozen=True)
class TypeDeclaration:
    """A struct, class, enum, actor, extension or protocol declaration."""

    kind: str
    name: str
    inherited_types: tuple[str, ...] = ()
    members: tuple["SyntaxNode", ...] = ()

    def inherits_from(self, type_name: str) -> bool:
        """Exact identifier match against the inheritance clause."""
        return any(inherited.strip() == type_name for inherited in self.inherited_types)


@dataclass(frozen=True)
class SourceFile:
    """Root of a parsed source unit."""

    members: tuple["SyntaxNode", ...] = ()
    has_errors: bool = field(default=False, compare=False)


SyntaxNode = Union[TypeDeclaration, PropertyDeclaration]
