"""Catalog module -- section records, text flattening and content sources."""

from .models import Section, Paragraph, Heading, BulletList, OrderedList, CodeBlock, Group
from .catalog import Catalog
from .text import flatten_text, searchable_text
from .content import build_default_catalog, DEFAULT_SECTION_ID
from .loader import load_catalog
