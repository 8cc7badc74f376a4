"""
Section records and the structured blocks that make up a section body.

Blocks are plain frozen dataclasses. The renderer decides how each one
looks; the search engine only ever sees their flattened text
(see :mod:`risdocs.catalog.text`).
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(frozen=True)
class Paragraph:
    text: str


@dataclass(frozen=True)
class Heading:
    text: str


@dataclass(frozen=True)
class BulletList:
    items: Tuple[str, ...]


@dataclass(frozen=True)
class OrderedList:
    items: Tuple[str, ...]


@dataclass(frozen=True)
class CodeBlock:
    """Verbatim program or command text, optionally with a caption above it."""

    code: str
    caption: Optional[str] = None


@dataclass(frozen=True)
class Group:
    """A titled run of blocks, e.g. one worked example."""

    children: Tuple["Block", ...]
    title: Optional[str] = None


Block = Union[Paragraph, Heading, BulletList, OrderedList, CodeBlock, Group]

# A section body: raw text, a single block, or an ordered run of blocks.
Body = Union[str, Block, Tuple[Block, ...]]


@dataclass(frozen=True)
class Section:
    """
    One catalog entry.

    Attributes
    ----------
    id : str
        Stable identifier, unique within a catalog.
    title : str
        Navigation label; searched.
    icon : str
        Symbolic icon name (e.g. ``"book"``); never searched.
    body : Body
        Structured content; its literal text is searched.
    """

    id: str
    title: str
    icon: str = "book"
    body: Body = field(default=())
