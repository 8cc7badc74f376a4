"""Tests for the Markdown catalog loader."""

import tempfile
from pathlib import Path

import pytest

from risdocs.catalog import BulletList, CodeBlock, Heading, OrderedList, Paragraph, load_catalog
from risdocs.catalog.loader import DEFAULT_ICON, _parse_document
from risdocs.errors import CatalogError

MEMORY_DOC = """# Memory Management
<!-- icon: cpu -->

Intro paragraph
spanning lines.

## MEM - Memory operations

- MEM READ address
- MEM WRITE address value

1. First
2. Second

```
MEM SIZE
```
"""


# ---------------------------------------------------------------------------
# Document parsing
# ---------------------------------------------------------------------------

class TestParseDocument:
    def test_title_and_icon(self):
        title, icon, _ = _parse_document(MEMORY_DOC)
        assert title == "Memory Management"
        assert icon == "cpu"

    def test_blocks(self):
        _, _, blocks = _parse_document(MEMORY_DOC)
        assert blocks == (
            Paragraph("Intro paragraph spanning lines."),
            Heading("MEM - Memory operations"),
            BulletList(("MEM READ address", "MEM WRITE address value")),
            OrderedList(("First", "Second")),
            CodeBlock("MEM SIZE"),
        )

    def test_code_keeps_markdown_verbatim(self):
        _, _, blocks = _parse_document("```\n# not a heading\n- not a bullet\n```")
        assert blocks == (CodeBlock("# not a heading\n- not a bullet"),)

    def test_unterminated_fence(self):
        _, _, blocks = _parse_document("```\nHLT")
        assert blocks == (CodeBlock("HLT"),)

    def test_no_title(self):
        title, icon, blocks = _parse_document("Just some text")
        assert title is None
        assert icon is None
        assert blocks == (Paragraph("Just some text"),)


# ---------------------------------------------------------------------------
# Directory loading
# ---------------------------------------------------------------------------

class TestLoadCatalog:
    def test_loads_sorted_by_filename(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "b_memory.md").write_text(MEMORY_DOC, encoding="utf-8")
            (Path(tmpdir) / "a_setup_guide.md").write_text("Run it.", encoding="utf-8")
            (Path(tmpdir) / "notes.txt").write_text("ignored", encoding="utf-8")

            catalog = load_catalog(tmpdir)

            assert catalog.ids == ("a_setup_guide", "b_memory")
            assert catalog.get_by_id("b_memory").title == "Memory Management"
            assert catalog.get_by_id("b_memory").icon == "cpu"

    def test_title_falls_back_to_stem(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "setup_guide.md").write_text("Run it.", encoding="utf-8")
            section = load_catalog(tmpdir).get_by_id("setup_guide")
            assert section.title == "Setup Guide"
            assert section.icon == DEFAULT_ICON

    def test_body_is_searchable(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            (Path(tmpdir) / "memory.md").write_text(MEMORY_DOC, encoding="utf-8")
            assert "mem size" in load_catalog(tmpdir).searchable_text("memory")

    def test_empty_dir(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(CatalogError):
                load_catalog(tmpdir)

    def test_nonexistent_dir(self):
        with pytest.raises(CatalogError):
            load_catalog(Path("/nonexistent/path"))
