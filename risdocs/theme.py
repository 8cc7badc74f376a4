"""
Light/dark display preference.

Kept apart from the navigation engine: toggling the theme never reads or
writes the query or the selection.
"""

from typing import Dict

LIGHT_PALETTE = {
    "background": "#f9fafb",
    "sidebar": "#ffffff",
    "border": "#e5e7eb",
    "text": "#111827",
    "muted": "#374151",
    "accent": "#1d4ed8",
    "accent_background": "#eff6ff",
    "code_background": "#f3f4f6",
}

DARK_PALETTE = {
    "background": "#111827",
    "sidebar": "#1f2937",
    "border": "#374151",
    "text": "#ffffff",
    "muted": "#d1d5db",
    "accent": "#93c5fd",
    "accent_background": "#1e3a8a",
    "code_background": "#1f2937",
}


class ThemePreference:
    """A single dark-mode flag with the palette that goes with it."""

    def __init__(self, dark: bool = False):
        self.dark = bool(dark)

    def toggle(self) -> bool:
        """Flip the mode and return the new ``dark`` value."""
        self.dark = not self.dark
        return self.dark

    @property
    def name(self) -> str:
        return "dark" if self.dark else "light"

    @property
    def palette(self) -> Dict[str, str]:
        return dict(DARK_PALETTE if self.dark else LIGHT_PALETTE)

    def css(self) -> str:
        """Stylesheet for the current mode, injected by the Streamlit app."""
        p = self.palette
        return f"""
<style>
    .stApp {{
        background-color: {p['background']};
        color: {p['text']};
    }}
    section[data-testid="stSidebar"] {{
        background-color: {p['sidebar']};
        border-right: 1px solid {p['border']};
    }}
    section[data-testid="stSidebar"] * {{
        color: {p['muted']};
    }}
    .stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp li {{
        color: {p['text']};
    }}
    .stApp pre, .stApp code {{
        background-color: {p['code_background']};
        border-radius: 8px;
    }}
    .risdocs-active {{
        background-color: {p['accent_background']};
        color: {p['accent']};
        border-radius: 8px;
        padding: 0.4rem 0.75rem;
        font-weight: 600;
    }}
</style>
"""

    def __repr__(self) -> str:
        return f"ThemePreference(dark={self.dark})"
