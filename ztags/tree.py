"""Read-only syntax tree consumed by the tag emitter.

The parser lowers its concrete syntax tree into a small closed set of
declaration variants. Names are never stored as text: nodes hold indices
into the owning SourceTree's token table, which resolves them to the
source bytes and to the line they sit on.
"""

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class Location:
    """Position of a token and the byte span of its line."""
    line: int  # zero-based
    column: int
    line_start: int
    line_end: int


@dataclass(frozen=True)
class ContainerDeclaration:
    """A struct/union/enum/opaque body."""
    kind_token: int
    members: tuple = ()


@dataclass(frozen=True)
class ErrorSetDeclaration:
    """An `error{...}` set literal."""


@dataclass(frozen=True)
class ErrorTypeReference:
    """A bare error type such as `anyerror`."""


@dataclass(frozen=True)
class OtherExpression:
    """Any initializer that is not a container or error type."""
    type: str = ""


Expression = Union[ContainerDeclaration, ErrorSetDeclaration, ErrorTypeReference, OtherExpression]


@dataclass(frozen=True)
class FunctionSignature:
    name_token: Optional[int] = None


@dataclass(frozen=True)
class VariableBinding:
    name_token: int
    init: Optional[Expression] = None


@dataclass(frozen=True)
class ContainerField:
    name_token: Optional[int] = None


@dataclass(frozen=True)
class OtherDeclaration:
    """Tests, comptime blocks, comments and anything else without a tag."""
    type: str = ""


SyntaxNode = Union[FunctionSignature, VariableBinding, ContainerField, OtherDeclaration]


@dataclass
class SourceTree:
    """Source buffer, token table and top-level declarations of one file."""
    source: bytes
    declarations: list = field(default_factory=list)
    has_errors: bool = False
    tokens: list[tuple[int, int]] = field(default_factory=list)

    def add_token(self, start: int, end: int) -> int:
        """Register a byte span and return its token index."""
        if not 0 <= start <= end <= len(self.source):
            raise ValueError(f"token span {start}:{end} outside source of {len(self.source)} bytes")
        self.tokens.append((start, end))
        return len(self.tokens) - 1

    def token_slice(self, index: int) -> str:
        start, end = self.tokens[index]
        return self.source[start:end].decode("utf-8", errors="replace")

    def token_location(self, index: int) -> Location:
        start, _ = self.tokens[index]
        line_start = self.source.rfind(b"\n", 0, start) + 1
        line_end = self.source.find(b"\n", start)
        if line_end == -1:
            line_end = len(self.source)
        return Location(
            line=self.source.count(b"\n", 0, start),
            column=start - line_start,
            line_start=line_start,
            line_end=line_end,
        )

    def line_text(self, index: int) -> str:
        """Return the full source line containing a token."""
        location = self.token_location(index)
        return self.source[location.line_start:location.line_end].decode("utf-8", errors="replace")
