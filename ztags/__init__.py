"""ztags - extended ctags generator for Zig source files."""

__version__ = "0.3.0"

from .tags import TagEmitter, generate_tags

__all__ = ["TagEmitter", "generate_tags", "__version__"]
