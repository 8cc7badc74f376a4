"""Exceptions raised by the catalog and the navigation engine."""


class RisDocsError(Exception):
    """Base class for all risdocs errors."""


class CatalogError(RisDocsError, ValueError):
    """The catalog is malformed (empty, duplicate ids, missing titles)."""


class SelectionError(RisDocsError):
    """Base class for selection failures."""


class SectionNotFoundError(SelectionError, KeyError):
    """A selection named a section id that is not in the catalog."""

    def __init__(self, section_id: str):
        self.section_id = section_id
        super().__init__(section_id)

    def __str__(self) -> str:
        return f"Unknown section: {self.section_id!r}"


class InconsistentSelectionError(SelectionError, RuntimeError):
    """The current selection no longer names a catalog section.

    This signals a programming error and is never handled by the browser.
    """
