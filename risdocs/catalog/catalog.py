"""
Read-only, ordered collection of documentation sections.
"""

import logging
from typing import Dict, Iterable, Iterator, Optional, Tuple

from ..errors import CatalogError
from .models import Section
from .text import searchable_text

logger = logging.getLogger(__name__)


class Catalog:
    """
    Ordered sections indexed by id.

    The catalog is validated once at construction and never changes
    afterwards. Each section's searchable body text is flattened and
    case-folded up front so the search filter never re-walks the blocks.
    """

    def __init__(self, sections: Iterable[Section]):
        self._sections: Tuple[Section, ...] = tuple(sections)
        if not self._sections:
            raise CatalogError("A catalog needs at least one section")

        self._by_id: Dict[str, Section] = {}
        for section in self._sections:
            if not section.id:
                raise CatalogError("Section id must be a non-empty string")
            if section.id in self._by_id:
                raise CatalogError(f"Duplicate section id: {section.id!r}")
            if not section.title or not section.title.strip():
                raise CatalogError(f"Section {section.id!r} has an empty title")
            self._by_id[section.id] = section

        self._body_text: Dict[str, str] = {
            s.id: searchable_text(s.body) for s in self._sections
        }
        logger.debug("Catalog built with %d sections", len(self._sections))

    def get_all(self) -> Tuple[Section, ...]:
        """All sections in catalog order."""
        return self._sections

    def get_by_id(self, section_id: str) -> Optional[Section]:
        """The section with ``section_id``, or None."""
        return self._by_id.get(section_id)

    @property
    def ids(self) -> Tuple[str, ...]:
        return tuple(s.id for s in self._sections)

    def searchable_text(self, section_id: str) -> str:
        """Case-folded flattened body text of a section."""
        return self._body_text[section_id]

    def __contains__(self, section_id) -> bool:
        return section_id in self._by_id

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def __len__(self) -> int:
        return len(self._sections)

    def __repr__(self) -> str:
        return f"Catalog({list(self.ids)!r})"
