"""Walk a SourceTree and write one tag line per named declaration."""

from dataclasses import dataclass
from typing import Optional, TextIO

from ..errors import TagWriteError
from ..logging import get_logger
from ..parser import get_zig_parser
from ..tree import (
    ContainerDeclaration,
    ContainerField,
    FunctionSignature,
    SourceTree,
    VariableBinding,
)
from .escape import escape_pattern
from .kinds import classify
from .record import TagRecord


@dataclass(frozen=True)
class Scope:
    """Enclosing container keyword and dotted path of its named parents."""
    label: str = ""
    path: str = ""

    def nested(self, label: str, name: str) -> "Scope":
        path = f"{self.path}.{name}" if self.path else name
        return Scope(label=label, path=path)


ROOT_SCOPE = Scope()


class TagEmitter:
    """Writes tag records for a single file in declaration order.

    Members of a named container are written before the container's own
    record, and the container's record carries its parent's scope.
    """

    def __init__(self, tree: SourceTree, path: str, output: TextIO):
        self.tree = tree
        self.path = path
        self.output = output
        self.count = 0

    def emit_all(self) -> int:
        """Tag every top-level declaration. Returns the number of records written."""
        for node in self.tree.declarations:
            self.emit(node, ROOT_SCOPE)
        return self.count

    def emit(self, node, scope: Scope = ROOT_SCOPE) -> None:
        name_token: Optional[int] = None

        if isinstance(node, ContainerField):
            name_token = node.name_token
        elif isinstance(node, FunctionSignature):
            name_token = node.name_token
        elif isinstance(node, VariableBinding):
            name_token = node.name_token
            if isinstance(node.init, ContainerDeclaration):
                child_scope = scope.nested(
                    self.tree.token_slice(node.init.kind_token),
                    self.tree.token_slice(name_token),
                )
                for member in node.init.members:
                    self.emit(member, child_scope)

        if name_token is None:
            return

        self.write(self.make_record(node, name_token, scope))

    def make_record(self, node, name_token: int, scope: Scope) -> TagRecord:
        return TagRecord(
            name=self.tree.token_slice(name_token),
            path=self.path,
            pattern=escape_pattern(self.tree.line_text(name_token)),
            kind=classify(self.tree, node),
            scope_label=scope.label,
            scope_path=scope.path,
        )

    def write(self, record: TagRecord) -> None:
        try:
            self.output.write(record.format())
        except (OSError, ValueError) as e:
            raise TagWriteError(f"Failed to write tag '{record.name}': {e}") from e
        self.count += 1


def generate_tags(source: bytes, path: str, output: TextIO, parser=None) -> int:
    """Parse Zig source and write its tags to output.

    Args:
        source: Raw file contents
        path: Path written into each record, as given by the caller
        output: Text stream receiving the tag lines
        parser: Optional ZigParser; the shared instance is used by default

    Returns:
        Number of tag records written

    Raises:
        TagWriteError: If the output stream rejects a write
        GrammarUnavailableError: If the Zig grammar cannot be loaded
    """
    if parser is None:
        parser = get_zig_parser()
    tree = parser.parse(source)
    get_logger().log_parse(path, len(tree.declarations), tree.has_errors)
    return TagEmitter(tree, path, output).emit_all()
