"""
Browser session: maps UI events onto the navigation engine and the theme,
and bundles what the renderer needs to draw one frame.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .catalog import Catalog, Section, build_default_catalog, load_catalog
from .config import CATALOG_DIR, DARK_MODE, DEFAULT_SECTION
from .engine import NavigationEngine
from .errors import SectionNotFoundError
from .theme import ThemePreference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowserView:
    """Everything the renderer reads for one frame."""

    query: str
    visible_sections: Tuple[Section, ...]
    active_section: Section
    theme_is_dark: bool

    @property
    def visible_section_ids(self) -> List[str]:
        return [s.id for s in self.visible_sections]

    @property
    def no_results(self) -> bool:
        return not self.visible_sections

    @property
    def active_is_filtered_out(self) -> bool:
        return self.active_section.id not in self.visible_section_ids


class DocsBrowser:
    """
    One user's browsing session.

    Parameters
    ----------
    catalog : Catalog
        Sections to browse.
    default_section : str
        Initially displayed section id.
    dark : bool
        Initial theme.
    """

    def __init__(self, catalog: Catalog, default_section: str, dark: bool = False):
        self.engine = NavigationEngine(catalog, default_section)
        self.theme = ThemePreference(dark=dark)

    # -- inbound ----------------------------------------------------------

    def on_query_edited(self, text: Optional[str]) -> None:
        self.engine.set_query(text or "")

    def on_section_clicked(self, section_id: str) -> bool:
        """
        Select a section. Returns False, leaving the display unchanged,
        when the id is unknown.
        """
        try:
            self.engine.set_selection(section_id)
        except SectionNotFoundError as e:
            logger.warning("Ignoring selection: %s", e)
            return False
        return True

    def on_theme_toggled(self) -> bool:
        dark = self.theme.toggle()
        logger.debug("Theme switched to %s", self.theme.name)
        return dark

    # -- outbound ---------------------------------------------------------

    @property
    def visible_section_ids(self) -> List[str]:
        return self.engine.compute_visibility()

    def visible_sections(self) -> Tuple[Section, ...]:
        catalog = self.engine.catalog
        return tuple(catalog.get_by_id(i) for i in self.engine.compute_visibility())

    @property
    def active_section(self) -> Section:
        return self.engine.get_active_section()

    @property
    def theme_is_dark(self) -> bool:
        return self.theme.dark

    def is_active(self, section_id: str) -> bool:
        return self.engine.selection == section_id

    def view(self) -> BrowserView:
        return BrowserView(
            query=self.engine.query,
            visible_sections=self.visible_sections(),
            active_section=self.active_section,
            theme_is_dark=self.theme.dark,
        )


def create_browser(
    catalog: Optional[Catalog] = None,
    default_section: Optional[str] = None,
    dark: Optional[bool] = None,
) -> DocsBrowser:
    """
    Build a session from configuration.

    Without an explicit ``catalog`` the Markdown directory named by
    ``RISDOCS_DOCS_DIR`` is loaded, falling back to the built-in catalog.
    When the configured default section is not in the catalog, the first
    section is used instead.
    """
    if catalog is None:
        catalog = load_catalog(CATALOG_DIR) if CATALOG_DIR else build_default_catalog()
    if default_section is None:
        default_section = DEFAULT_SECTION
        if default_section not in catalog:
            logger.warning(
                "Default section %r not in catalog, using %r",
                default_section, catalog.ids[0],
            )
            default_section = catalog.ids[0]
    if dark is None:
        dark = DARK_MODE
    return DocsBrowser(catalog, default_section, dark=dark)
