"""Exception types raised by ztags."""


class ZtagsError(Exception):
    """Base class for all ztags failures."""


class SourceReadError(ZtagsError):
    """The input file could not be read."""


class GrammarUnavailableError(ZtagsError):
    """The tree-sitter Zig grammar could not be loaded."""


class TagWriteError(ZtagsError):
    """Writing a tag record to the output stream failed."""
