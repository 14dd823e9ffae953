"""Tag record formatting."""

from dataclasses import dataclass
from typing import Optional

UNSET_KIND = "\0"


@dataclass(frozen=True)
class TagRecord:
    """One line of an extended ctags file."""
    name: str
    path: str
    pattern: str  # already escaped
    kind: Optional[str] = None
    scope_label: str = ""
    scope_path: str = ""

    def format(self) -> str:
        line = f'{self.name}\t{self.path}\t/^{self.pattern}$/;"\t{self.kind or UNSET_KIND}'
        if self.scope_path:
            line += f"\t{self.scope_label}:{self.scope_path}"
        return line + "\n"
