"""Flatten structured section bodies into searchable text."""

from typing import Iterator

from .models import BulletList, CodeBlock, Group, Heading, OrderedList, Paragraph

# Separator between the text of consecutive blocks. A query never matches
# across two blocks unless it contains this separator itself.
BLOCK_SEPARATOR = "\n"


def flatten_text(body) -> str:
    """
    Concatenate every literal string inside ``body`` in document order.

    Accepts raw text, a single block, or any (nested) sequence of blocks.

    Raises
    ------
    TypeError
        If ``body`` contains something that is not text or a known block.
    """
    return BLOCK_SEPARATOR.join(_iter_text(body))


def searchable_text(body) -> str:
    """Case-folded :func:`flatten_text`, the form the search filter matches against."""
    return flatten_text(body).casefold()


def _iter_text(node) -> Iterator[str]:
    if node is None:
        return
    if isinstance(node, str):
        yield node
    elif isinstance(node, (Paragraph, Heading)):
        yield node.text
    elif isinstance(node, (BulletList, OrderedList)):
        yield from node.items
    elif isinstance(node, CodeBlock):
        if node.caption:
            yield node.caption
        yield node.code
    elif isinstance(node, Group):
        if node.title:
            yield node.title
        for child in node.children:
            yield from _iter_text(child)
    elif isinstance(node, (list, tuple)):
        for child in node:
            yield from _iter_text(child)
    else:
        raise TypeError(f"Unsupported body content: {type(node).__name__}")
