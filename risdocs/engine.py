"""
Navigation / Search Engine
==========================

Holds the two pieces of navigation state, the search query and the
selected section, and derives from them what the renderer shows:

* the visibility set: ids of sections whose title or body text contains
  the query, case-insensitively, in catalog order;
* the active section: the catalog entry named by the selection.

Selection and visibility are independent. Narrowing the search never
deselects the active section, and a section hidden by the filter can
stay selected.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .catalog import Catalog, Section
from .errors import InconsistentSelectionError, SectionNotFoundError

logger = logging.getLogger(__name__)


def matches(catalog: Catalog, section: Section, query: str) -> bool:
    """Whether ``section`` passes the substring filter for ``query``."""
    needle = query.casefold()
    return needle in section.title.casefold() or needle in catalog.searchable_text(section.id)


def filter_sections(catalog: Catalog, query: str) -> List[str]:
    """
    Ids of the sections matching ``query``, in catalog order.

    An empty query matches every section.
    """
    return [s.id for s in catalog.get_all() if matches(catalog, s, query)]


class NavigationEngine:
    """
    Query and selection state over a read-only catalog.

    Parameters
    ----------
    catalog : Catalog
        The sections to navigate. Never mutated.
    default_section : str
        Initially selected section id; must exist in ``catalog``.

    Raises
    ------
    SectionNotFoundError
        If ``default_section`` is not in the catalog.
    """

    def __init__(self, catalog: Catalog, default_section: str):
        if default_section not in catalog:
            raise SectionNotFoundError(default_section)
        self._catalog = catalog
        self._query = ""
        self._selection = default_section
        # Keyed on the query string alone; the catalog cannot change.
        self._visibility: Optional[Tuple[str, List[str]]] = None

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def query(self) -> str:
        return self._query

    @property
    def selection(self) -> str:
        return self._selection

    def set_query(self, new_query: str) -> None:
        """Replace the query verbatim. Any string is accepted."""
        if new_query != self._query:
            logger.debug("Query changed: %r -> %r", self._query, new_query)
        self._query = new_query

    def compute_visibility(self) -> List[str]:
        """Ids of sections matching the current query, in catalog order."""
        if self._visibility is None or self._visibility[0] != self._query:
            self._visibility = (self._query, filter_sections(self._catalog, self._query))
        return list(self._visibility[1])

    def is_visible(self, section_id: str) -> bool:
        return section_id in self.compute_visibility()

    def set_selection(self, section_id: str) -> None:
        """
        Select ``section_id``, visible or not.

        Raises
        ------
        SectionNotFoundError
            If the id is not in the catalog. The selection is left unchanged.
        """
        if section_id not in self._catalog:
            raise SectionNotFoundError(section_id)
        if section_id != self._selection:
            logger.debug("Selection changed: %s -> %s", self._selection, section_id)
        self._selection = section_id

    def get_active_section(self) -> Section:
        """
        The catalog entry for the current selection.

        Raises
        ------
        InconsistentSelectionError
            If the selection does not name a catalog section.
        """
        section = self._catalog.get_by_id(self._selection)
        if section is None:
            raise InconsistentSelectionError(
                f"Selection {self._selection!r} is not in the catalog"
            )
        return section

    def snapshot(self) -> Dict[str, object]:
        """Current state, for debugging and session display."""
        return {
            "query": self._query,
            "selection": self._selection,
            "visible": self.compute_visibility(),
        }
