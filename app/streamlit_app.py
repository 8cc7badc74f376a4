"""
RIS Documentation Browser
=========================

Single-page Streamlit viewer for the RIS language docs: searchable
sidebar navigation, one section displayed at a time, light/dark theme.

Run with:
    streamlit run app/streamlit_app.py
"""

import streamlit as st
from pathlib import Path
from typing import Iterable
import sys

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from risdocs.browser import DocsBrowser, create_browser
from risdocs.catalog import BulletList, CodeBlock, Group, Heading, OrderedList, Paragraph, Section
from risdocs.config import APP_NAME, LOG_FILE, LOG_LEVEL, PAGE_TITLE, SEARCH_PLACEHOLDER
from risdocs.logging_config import setup_logging

ICONS = {
    "book": "📖",
    "terminal": "💻",
    "cpu": "🧠",
    "hard-drive": "💾",
    "files": "🗂️",
    "settings": "⚙️",
    "alert-circle": "❗",
    "alert-triangle": "⚠️",
    "code": "🛠️",
    "file-code": "📄",
}
FALLBACK_ICON = "📄"


def icon_for(name: str) -> str:
    """Emoji glyph for a section icon name."""
    return ICONS.get(name, FALLBACK_ICON)


def nav_label(section: Section, active: bool) -> str:
    """Sidebar button text; the active entry gets a chevron."""
    label = f"{icon_for(section.icon)}  {section.title}"
    return f"{label}  ›" if active else label


def list_markdown(items: Iterable[str], ordered: bool = False) -> str:
    """Markdown for a bullet or numbered list."""
    lines = []
    for i, item in enumerate(items, start=1):
        marker = f"{i}." if ordered else "-"
        lines.append(f"{marker} {item}")
    return "\n".join(lines)


def render_body(body) -> None:
    """Draw a section body block by block."""
    if isinstance(body, str):
        st.markdown(body)
    elif isinstance(body, Paragraph):
        st.markdown(body.text)
    elif isinstance(body, Heading):
        st.subheader(body.text)
    elif isinstance(body, BulletList):
        st.markdown(list_markdown(body.items))
    elif isinstance(body, OrderedList):
        st.markdown(list_markdown(body.items, ordered=True))
    elif isinstance(body, CodeBlock):
        if body.caption:
            st.caption(body.caption)
        st.code(body.code, language=None)
    elif isinstance(body, Group):
        if body.title:
            st.subheader(body.title)
        render_body(body.children)
    else:
        for block in body:
            render_body(block)


def get_browser() -> DocsBrowser:
    """The browser session for this user, created on first run."""
    if "browser" not in st.session_state:
        st.session_state.browser = create_browser()
    return st.session_state.browser


def render_sidebar(browser: DocsBrowser) -> None:
    view = browser.view()

    with st.sidebar:
        col_title, col_toggle = st.columns([3, 1])
        with col_title:
            st.markdown(f"### {APP_NAME}")
        with col_toggle:
            st.button(
                "☀️" if view.theme_is_dark else "🌙",
                key="theme_toggle",
                help="Toggle dark mode",
                on_click=browser.on_theme_toggled,
            )

        st.text_input(
            "Search",
            key="query",
            placeholder=SEARCH_PLACEHOLDER,
            label_visibility="collapsed",
            on_change=lambda: browser.on_query_edited(st.session_state.query),
        )

        if view.no_results:
            st.caption("No sections match your search.")

        for section in view.visible_sections:
            active = browser.is_active(section.id)
            st.button(
                nav_label(section, active),
                key=f"nav_{section.id}",
                type="primary" if active else "secondary",
                use_container_width=True,
                on_click=browser.on_section_clicked,
                args=(section.id,),
            )


def render_main(browser: DocsBrowser) -> None:
    section = browser.active_section
    st.header(f"{icon_for(section.icon)} {section.title}")
    render_body(section.body)


def main():
    st.set_page_config(
        page_title=PAGE_TITLE,
        page_icon="📖",
        layout="wide",
    )
    setup_logging(LOG_LEVEL, LOG_FILE or None)

    browser = get_browser()
    st.markdown(browser.theme.css(), unsafe_allow_html=True)

    render_sidebar(browser)
    render_main(browser)


if __name__ == "__main__":
    main()
