"""Escaping of source lines for /^...$/ search patterns."""

_ESCAPED = ("/", "\\")


def escape_pattern(line: str) -> str:
    """Prefix every `/` and `\\` with a backslash. Nothing else changes."""
    if "/" not in line and "\\" not in line:
        return line
    return "".join("\\" + ch if ch in _ESCAPED else ch for ch in line)


def unescape_pattern(text: str) -> str:
    """Inverse of escape_pattern."""
    result = []
    chars = iter(text)
    for ch in chars:
        if ch == "\\":
            nxt = next(chars, None)
            if nxt in _ESCAPED:
                result.append(nxt)
                continue
            result.append(ch)
            if nxt is not None:
                result.append(nxt)
            continue
        result.append(ch)
    return "".join(result)
