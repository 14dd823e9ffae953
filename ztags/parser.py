"""Parse Zig source with tree-sitter and lower it into a SourceTree."""

from typing import Optional

from .errors import GrammarUnavailableError
from .tree import (
    ContainerDeclaration,
    ContainerField,
    ErrorSetDeclaration,
    ErrorTypeReference,
    FunctionSignature,
    OtherDeclaration,
    OtherExpression,
    SourceTree,
    VariableBinding,
)

FUNCTION_TYPES = frozenset({"function_declaration"})
VARIABLE_TYPES = frozenset({"variable_declaration"})
FIELD_TYPES = frozenset({"container_field"})
CONTAINER_TYPES = frozenset({
    "struct_declaration",
    "union_declaration",
    "enum_declaration",
    "opaque_declaration",
})
ERROR_SET_TYPES = frozenset({"error_set_declaration"})
CONTAINER_KEYWORDS = ("struct", "union", "enum", "opaque")
ERROR_TYPE_NAMES = frozenset({b"anyerror", b"error"})


class ZigParser:
    """Turns Zig source bytes into a SourceTree of declarations."""

    def __init__(self):
        self._parser = None

    def _get_parser(self):
        if self._parser is None:
            try:
                import tree_sitter_zig
                from tree_sitter import Language, Parser
                self._parser = Parser(Language(tree_sitter_zig.language()))
            except Exception as e:
                raise GrammarUnavailableError(
                    f"Failed to load tree-sitter grammar for Zig: {e}\n"
                    "Please try: pip install --force-reinstall 'tree-sitter-zig>=1.1'"
                ) from e
        return self._parser

    def parse(self, source: bytes) -> SourceTree:
        """Parse source bytes into a SourceTree."""
        ts_tree = self._get_parser().parse(source)
        root = ts_tree.root_node
        tree = SourceTree(source=source, has_errors=root.has_error)
        tree.declarations = [self._lower_declaration(tree, child) for child in root.named_children]
        return tree

    def _lower_declaration(self, tree: SourceTree, node):
        node_type = node.type

        if node_type in FUNCTION_TYPES:
            name = self._named(self._function_name(node))
            return FunctionSignature(name_token=self._token(tree, name))

        if node_type in VARIABLE_TYPES:
            name = self._named(self._first_identifier(node))
            if name is None:
                return OtherDeclaration(node_type)
            init = self._initializer(node)
            return VariableBinding(
                name_token=self._token(tree, name),
                init=self._lower_expression(tree, init) if init is not None else None,
            )

        if node_type in FIELD_TYPES:
            name = node.child_by_field_name("name")
            if name is None:
                name = self._first_identifier(node)
            return ContainerField(name_token=self._token(tree, self._named(name)))

        return OtherDeclaration(node_type)

    def _lower_expression(self, tree: SourceTree, node):
        node_type = node.type

        if node_type in CONTAINER_TYPES:
            keyword = next(
                (child for child in node.children if child.type in CONTAINER_KEYWORDS),
                None,
            )
            # Fall back to the node's first byte so the kind token always resolves.
            if keyword is None:
                kind_token = tree.add_token(node.start_byte, node.start_byte)
            else:
                kind_token = self._token(tree, keyword)
            members = tuple(
                self._lower_declaration(tree, child) for child in node.named_children
            )
            return ContainerDeclaration(kind_token=kind_token, members=members)

        if node_type in ERROR_SET_TYPES:
            return ErrorSetDeclaration()

        if tree.source[node.start_byte:node.end_byte] in ERROR_TYPE_NAMES:
            return ErrorTypeReference()

        return OtherExpression(node_type)

    def _token(self, tree: SourceTree, node) -> Optional[int]:
        if node is None:
            return None
        return tree.add_token(node.start_byte, node.end_byte)

    def _named(self, node):
        # Empty container bodies parse as a zero-width field with a zero-width name.
        if node is None or node.start_byte == node.end_byte:
            return None
        return node

    def _function_name(self, node):
        name = node.child_by_field_name("name")
        if name is not None:
            return name
        # Identifiers after the parameter list belong to the return type.
        for child in node.children:
            if child.type == "parameters":
                return None
            if child.type == "identifier":
                return child
        return None

    def _first_identifier(self, node):
        for child in node.named_children:
            if child.type == "identifier":
                return child
        return None

    def _initializer(self, node):
        seen_assign = False
        for child in node.children:
            if child.type == "=":
                seen_assign = True
            elif seen_assign and child.is_named and child.type != "comment":
                return child
        return None


_default_parser: Optional[ZigParser] = None


def get_zig_parser() -> ZigParser:
    """Get or create the shared parser instance."""
    global _default_parser
    if _default_parser is None:
        _default_parser = ZigParser()
    return _default_parser
