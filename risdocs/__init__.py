"""RIS Docs -- catalog, search filter and navigation state for the RIS documentation browser."""

__version__ = "0.1.0"
