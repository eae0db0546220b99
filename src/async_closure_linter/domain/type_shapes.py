"""
Type shapes: the closed set of type-annotation variants the linter understands.

A parser gateway reduces a concrete syntax tree to one of these shapes and the
classifier below decides, without looking at any syntax node, whether the
shape is an async closure that is not isolated to the main actor.
"""

from dataclasses import dataclass
from typing import Optional, Union

from async_closure_linter.domain.constants import MAIN_ACTOR_ATTRIBUTE


@dataclass(frozen=True)
class OptionalType:
    """`T?`"""

    wrapped: "TypeShape"


@dataclass(frozen=True)
class ImplicitlyUnwrappedType:
    """`T!`"""

    wrapped: "TypeShape"


@dataclass(frozen=True)
class TupleElement:
    """One element of a parenthesized type, with its label when it has one."""

    shape: "TypeShape"
    label: Optional[str] = None


@dataclass(frozen=True)
class ParenthesizedType:
    """`(T)` or a tuple `(A, B)`."""

    elements: tuple[TupleElement, ...]

    @property
    def single_element(self) -> Optional["TypeShape"]:
        """The wrapped type when this is plain grouping parentheses."""
        if len(self.elements) == 1 and self.elements[0].label is None:
            return self.elements[0].shape
        return None


@dataclass(frozen=True)
class FunctionType:
    """`(Params) async throws -> Result`"""

    is_async: bool
    is_throwing: bool = False


@dataclass(frozen=True)
class AttributedType:
    """`@A @B T` - attributes are stored without the leading `@`."""

    attributes: tuple[str, ...]
    base: "TypeShape"

    def has_attribute(self, name: str) -> bool:
        return any(attribute.strip() == name for attribute in self.attributes)


@dataclass(frozen=True)
class OtherType:
    """Any type the linter does not look inside (named types, arrays, ...)."""

    text: str = ""


TypeShape = Union[
    OptionalType,
    ImplicitlyUnwrappedType,
    ParenthesizedType,
    FunctionType,
    AttributedType,
    OtherType,
]


class TypeShapeClassifier:
    """Decides whether a declared type is an async closure missing an actor attribute."""

    def __init__(self, actor_attribute: str = MAIN_ACTOR_ATTRIBUTE) -> None:
        self._actor_attribute = actor_attribute

    def is_violation(self, shape: TypeShape) -> bool:
        """
        Strip optional, implicitly-unwrapped and grouping layers, then judge
        the function type underneath.

        `throws` never affects the verdict. Shapes that are not closures are
        never violations.
        """
        if isinstance(shape, (OptionalType, ImplicitlyUnwrappedType)):
            return self.is_violation(shape.wrapped)

        if isinstance(shape, ParenthesizedType):
            inner = shape.single_element
            return inner is not None and self.is_violation(inner)

        # A bare function type has no attribute list of its own.
        if isinstance(shape, FunctionType):
            return shape.is_async

        if isinstance(shape, AttributedType):
            if not isinstance(shape.base, FunctionType) or not shape.base.is_async:
                return False
            return not shape.has_attribute(self._actor_attribute)

        return False
