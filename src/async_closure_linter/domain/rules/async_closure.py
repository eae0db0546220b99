"""Async closure properties in SwiftUI Views must be isolated to the main actor."""

from typing import NamedTuple, Optional

from async_closure_linter.domain.constants import MAIN_ACTOR_ATTRIBUTE, VIEW_PROTOCOL
from async_closure_linter.domain.entities import Violation
from async_closure_linter.domain.syntax import (
    PropertyDeclaration,
    SourceFile,
    SyntaxNode,
    TypeDeclaration,
)
from async_closure_linter.domain.type_shapes import TypeShapeClassifier


class DeclarationScope(NamedTuple):
    """An enclosing type declaration while walking the tree."""

    name: str
    is_view: bool


Scopes = tuple[DeclarationScope, ...]


class AsyncClosureRule:
    """
    Flags `async` closure properties declared inside a View struct that are
    not marked `@MainActor`.

    SwiftUI calls view callbacks on the main thread, but an unmarked async
    closure is not bound to it, so invoking one crashes on some runtimes.
    Only the innermost enclosing declaration decides whether a property is
    checked: a plain struct nested in a View is exempt, a View nested in a
    plain struct is checked.
    """

    code: str = "async-closure-main-actor"
    description: str = "Async closure properties in SwiftUI Views need @MainActor."

    def __init__(
        self,
        view_protocol: str = VIEW_PROTOCOL,
        classifier: Optional[TypeShapeClassifier] = None,
    ) -> None:
        self._view_protocol = view_protocol
        self._classifier = classifier or TypeShapeClassifier(MAIN_ACTOR_ATTRIBUTE)

    def check(self, tree: SourceFile, source: bytes, file_path: str) -> list[Violation]:
        violations: list[Violation] = []
        for node in tree.members:
            self._visit(node, (), source, file_path, violations)
        return violations

    def is_view_declaration(self, node: TypeDeclaration) -> bool:
        return node.kind == "struct" and node.inherits_from(self._view_protocol)

    def _visit(
        self,
        node: SyntaxNode,
        scopes: Scopes,
        source: bytes,
        file_path: str,
        violations: list[Violation],
    ) -> None:
        # Scopes are passed by value, so leaving a declaration pops it.
        if isinstance(node, TypeDeclaration):
            scopes = scopes + (DeclarationScope(node.name, self.is_view_declaration(node)),)
        elif scopes and scopes[-1].is_view:
            violations.extend(self._check_property(node, source, file_path))

        for member in node.members:
            self._visit(member, scopes, source, file_path, violations)

    def _check_property(
        self, node: PropertyDeclaration, source: bytes, file_path: str
    ) -> list[Violation]:
        return [
            Violation.at_offset(source, node.offset, binding.name, file_path)
            for binding in node.bindings
            if binding.type_shape is not None
            and self._classifier.is_violation(binding.type_shape)
        ]
