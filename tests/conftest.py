"""Shared helpers for building syntax trees by hand."""

import pytest

from ztags.tree import SourceTree


def tok(tree: SourceTree, needle: str, text: str = None) -> int:
    """Register the token `text` found inside the first occurrence of `needle`."""
    text = needle if text is None else text
    start = tree.source.index(needle.encode()) + needle.encode().index(text.encode())
    return tree.add_token(start, start + len(text.encode()))


@pytest.fixture
def make_tree():
    def _make(source: str) -> SourceTree:
        return SourceTree(source=source.encode("utf-8"))
    return _make
