"""Tag extraction for Zig syntax trees."""

from .emitter import Scope, TagEmitter, generate_tags
from .escape import escape_pattern, unescape_pattern
from .kinds import KIND_NAMES, classify
from .record import TagRecord

__all__ = [
    "KIND_NAMES",
    "Scope",
    "TagEmitter",
    "TagRecord",
    "classify",
    "escape_pattern",
    "generate_tags",
    "unescape_pattern",
]
