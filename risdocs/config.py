"""
Configuration settings for the RIS documentation browser.
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Page
APP_NAME = "RIS Docs"
PAGE_TITLE = "RIS Documentation"
SEARCH_PLACEHOLDER = "Search documentation..."

# Navigation defaults (from environment)
DEFAULT_SECTION = os.getenv("RISDOCS_DEFAULT_SECTION", "overview")
DARK_MODE = os.getenv("RISDOCS_DARK_MODE", "").strip().lower() in ("1", "true", "yes", "on")

# Optional Markdown catalog source; empty means the built-in catalog
CATALOG_DIR = os.getenv("RISDOCS_DOCS_DIR", "")

# Logging
LOG_LEVEL = os.getenv("RISDOCS_LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("RISDOCS_LOG_FILE", "")
