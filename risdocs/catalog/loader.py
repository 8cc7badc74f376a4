"""Load a catalog from Markdown documents in a directory."""

import logging
import re
from pathlib import Path
from typing import List, Optional, Union

from ..errors import CatalogError
from .catalog import Catalog
from .models import Block, BulletList, CodeBlock, Heading, OrderedList, Paragraph, Section

logger = logging.getLogger(__name__)

ICON_PATTERN = re.compile(r"^<!--\s*icon:\s*([\w-]+)\s*-->$")
ORDERED_ITEM = re.compile(r"^\d+\.\s+")
DEFAULT_ICON = "book"


def load_catalog(docs_dir: Union[str, Path]) -> Catalog:
    """
    Build a catalog from every .md file in ``docs_dir``.

    Files are read in name order; each file becomes one section whose id
    is the file stem.

    Raises
    ------
    CatalogError
        If the directory is missing or holds no Markdown files.
    """
    docs_dir = Path(docs_dir)
    if not docs_dir.is_dir():
        raise CatalogError(f"Docs directory not found: {docs_dir}")

    sections = [
        load_section(md_file) for md_file in sorted(docs_dir.glob("*.md"))
    ]
    if not sections:
        raise CatalogError(f"No Markdown documents in {docs_dir}")

    logger.info("Loaded %d sections from %s", len(sections), docs_dir)
    return Catalog(sections)


def load_section(md_file: Path) -> Section:
    """Read one Markdown file as a section."""
    text = md_file.read_text(encoding="utf-8")
    title, icon, body = _parse_document(text)
    return Section(
        id=md_file.stem,
        title=title or md_file.stem.replace("_", " ").title(),
        icon=icon or DEFAULT_ICON,
        body=body,
    )


def _parse_document(text: str):
    """Split Markdown into (title, icon, blocks)."""
    title: Optional[str] = None
    icon: Optional[str] = None
    blocks: List[Block] = []
    paragraph: List[str] = []
    bullets: List[str] = []
    ordered: List[str] = []
    code: Optional[List[str]] = None

    def flush():
        if paragraph:
            blocks.append(Paragraph(" ".join(paragraph)))
            paragraph.clear()
        if bullets:
            blocks.append(BulletList(tuple(bullets)))
            bullets.clear()
        if ordered:
            blocks.append(OrderedList(tuple(ordered)))
            ordered.clear()

    for line in text.split("\n"):
        stripped = line.strip()

        if code is not None:
            if stripped.startswith("```"):
                blocks.append(CodeBlock("\n".join(code)))
                code = None
            else:
                code.append(line)
            continue

        if stripped.startswith("```"):
            flush()
            code = []
        elif ICON_PATTERN.match(stripped):
            icon = ICON_PATTERN.match(stripped).group(1)
        elif stripped.startswith("# ") and title is None:
            flush()
            title = stripped[2:].strip()
        elif stripped.startswith("#"):
            flush()
            blocks.append(Heading(stripped.lstrip("#").strip()))
        elif stripped.startswith(("- ", "* ")):
            if paragraph or ordered:
                flush()
            bullets.append(stripped[2:].strip())
        elif ORDERED_ITEM.match(stripped):
            if paragraph or bullets:
                flush()
            ordered.append(ORDERED_ITEM.sub("", stripped, count=1))
        elif not stripped:
            flush()
        else:
            if bullets or ordered:
                flush()
            paragraph.append(stripped)

    # Unterminated fence: keep what was collected
    if code is not None:
        blocks.append(CodeBlock("\n".join(code)))
    flush()

    return title, icon, tuple(blocks)
