"""Swift parsing through tree-sitter, reduced to the linter's syntax model."""

from dataclasses import dataclass, field
from typing import Optional

import tree_sitter_swift
from tree_sitter import Language, Node, Parser

from async_closure_linter.domain.constants import ASYNC_KEYWORD
from async_closure_linter.domain.protocols import SwiftParserProtocol
from async_closure_linter.domain.syntax import (
    PropertyBinding,
    PropertyDeclaration,
    SourceFile,
    SyntaxNode,
    TypeDeclaration,
)
from async_closure_linter.domain.type_shapes import (
    AttributedType,
    FunctionType,
    ImplicitlyUnwrappedType,
    OptionalType,
    OtherType,
    ParenthesizedType,
    TupleElement,
    TypeShape,
)

SWIFT_LANGUAGE = Language(tree_sitter_swift.language())

_TYPE_DECLARATIONS = frozenset({"class_declaration", "protocol_declaration"})
_PROPERTY_DECLARATIONS = frozenset({"property_declaration"})
_TRIVIA = frozenset({"comment", "multiline_comment"})
# Children of a type container that are not the type itself.
_NOT_A_TYPE = frozenset({"type_modifiers", "parameter_modifiers", "wildcard_pattern"}) | _TRIVIA


@dataclass
class _Draft:
    """A declaration found during the walk whose members are still being collected."""

    node: Node
    members: list["_Draft"] = field(default_factory=list)


class _TreeReader:
    """Reads one tree-sitter tree against the bytes it was parsed from."""

    def __init__(self, source: bytes) -> None:
        self._source = source

    def text(self, node: Optional[Node]) -> str:
        if node is None:
            return ""
        return self._source[node.start_byte:node.end_byte].decode("utf-8", errors="replace").strip()

    def collect(self, root: Node) -> tuple[SyntaxNode, ...]:
        """
        Depth-first walk keeping only declarations, in document order.

        Iterative so deeply nested expressions cannot exhaust the interpreter
        stack; every other node is transparent and its declarations attach to
        the nearest enclosing declaration.
        """
        top: list[_Draft] = []
        pending: list[tuple[Node, list[_Draft]]] = [(root, top)]
        while pending:
            node, sink = pending.pop()
            if node.type in _TYPE_DECLARATIONS or node.type in _PROPERTY_DECLARATIONS:
                draft = _Draft(node)
                sink.append(draft)
                sink = draft.members
            pending.extend((child, sink) for child in reversed(node.children))
        return tuple(self._freeze(draft) for draft in top)

    def _freeze(self, draft: _Draft) -> SyntaxNode:
        node = draft.node
        members = tuple(self._freeze(member) for member in draft.members)
        if node.type in _PROPERTY_DECLARATIONS:
            return PropertyDeclaration(
                bindings=self.bindings(node), offset=node.start_byte, members=members)
        return TypeDeclaration(
            kind=self.declaration_kind(node),
            name=self.text(node.child_by_field_name("name")),
            inherited_types=self.inherited_types(node),
            members=members,
        )

    def declaration_kind(self, node: Node) -> str:
        if node.type == "protocol_declaration":
            return "protocol"
        kind = node.child_by_field_name("declaration_kind")
        return self.text(kind) if kind is not None else "class"

    def inherited_types(self, node: Node) -> tuple[str, ...]:
        inherited = []
        for child in node.children:
            if child.type != "inheritance_specifier":
                continue
            target = child.child_by_field_name("inherits_from")
            inherited.append(self.text(target if target is not None else child))
        return tuple(inherited)

    def bindings(self, node: Node) -> tuple[PropertyBinding, ...]:
        """Pair each bound name with the annotation that follows it, if any."""
        names = node.children_by_field_name("name") or [
            child for child in node.children if child.type == "pattern"]
        annotations = [child for child in node.children if child.type == "type_annotation"]
        bindings = []
        for index, name in enumerate(names):
            end = names[index + 1].start_byte if index + 1 < len(names) else node.end_byte
            annotation = next(
                (a for a in annotations if name.end_byte <= a.start_byte < end), None)
            shape = self.annotated_shape(annotation)[1] if annotation is not None else None
            bindings.append(PropertyBinding(name=self.text(name), type_shape=shape))
        return tuple(bindings)

    def annotated_shape(self, container: Node) -> tuple[Optional[str], TypeShape]:
        """
        Read `[label:] [@attr ...] Type [!]` out of a type_annotation or a
        tuple_type_item. Returns the element label (if any) and the shape.
        """
        label: Optional[str] = None
        attributes: list[str] = []
        base: Optional[Node] = None
        unwrapped = False
        for child in container.children:
            if child.type == ":":
                label = self.text(base) if base is not None else label
                base = None
            elif child.type == "!":
                unwrapped = True
            elif child.type == "type_modifiers":
                attributes.extend(self.attribute_names(child))
            elif child.is_named and child.type not in _NOT_A_TYPE and base is None:
                base = child

        shape: TypeShape = self.shape(base) if base is not None else OtherType()
        if attributes:
            shape = AttributedType(attributes=tuple(attributes), base=shape)
        if unwrapped:
            shape = ImplicitlyUnwrappedType(wrapped=shape)
        return label, shape

    def attribute_names(self, modifiers: Node) -> list[str]:
        names = []
        for attribute in modifiers.named_children:
            if attribute.type != "attribute":
                continue
            named = [c for c in attribute.named_children if c.type not in _TRIVIA]
            name = self.text(named[0]) if named else self.text(attribute).lstrip("@")
            names.append(name.split("(", 1)[0].strip())
        return names

    def shape(self, node: Node) -> TypeShape:
        if node.type == "optional_type":
            wrapped = node.child_by_field_name("wrapped")
            if wrapped is None:
                wrapped = next((c for c in node.named_children if c.type not in _TRIVIA), None)
            shape = self.shape(wrapped) if wrapped is not None else OtherType()
            for _ in range(max(1, sum(1 for c in node.children if c.type == "?"))):
                shape = OptionalType(wrapped=shape)
            return shape

        if node.type == "function_type":
            return FunctionType(
                is_async=self.is_async_function(node),
                is_throwing=any(child.type == "throws" for child in node.children),
            )

        if node.type == "tuple_type":
            elements = []
            for item in node.named_children:
                if item.type != "tuple_type_item":
                    continue
                label, element = self.annotated_shape(item)
                elements.append(TupleElement(shape=element, label=label))
            return ParenthesizedType(elements=tuple(elements))

        return OtherType(text=self.text(node))

    def is_async_function(self, node: Node) -> bool:
        """
        Inside a type body the grammar takes `@Attr ()` as an attribute with an
        argument list, leaving `async -> T` whose params is a bare `async`
        user_type instead of an `async` token.
        """
        if any(child.type == ASYNC_KEYWORD for child in node.children):
            return True
        params = node.child_by_field_name("params")
        if params is None:
            params = next((c for c in node.named_children if c.type not in _TRIVIA), None)
        if params is None or params.type != "user_type":
            return False
        return self.text(params) == ASYNC_KEYWORD


class TreeSitterSwiftGateway(SwiftParserProtocol):
    """Infrastructure implementation of SwiftParserProtocol using tree-sitter-swift."""

    def __init__(self) -> None:
        self._parser = Parser(SWIFT_LANGUAGE)

    def parse(self, source: bytes) -> SourceFile:
        """Parse UTF-8 source. Malformed input yields a best-effort tree."""
        root = self._parser.parse(source).root_node
        return SourceFile(members=_TreeReader(source).collect(root), has_errors=root.has_error)
