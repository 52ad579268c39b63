import os
from typing import Dict

import streamlit as st


PALETTES: Dict[str, Dict[str, str]] = {
    "dark": {
        "page-bg": "#0f1420",
        "surface": "linear-gradient(180deg, #1b2233 0%, #141a28 100%)",
        "display-bg": "#0b1019",
        "text": "#e6edf7",
        "muted": "#8a9ab5",
        "accent": "#4da3ff",
        "border": "#2a3550",
        "shadow": "rgba(0,0,0,0.45)",
        "button-bg": "#222b40",
        "button-text": "#e6edf7",
        "error": "#ff6b6b",
    },
    "light": {
        "page-bg": "#f4f8ff",
        "surface": "linear-gradient(180deg, #ffffff 0%, #f4f8ff 100%)",
        "display-bg": "#f7fbff",
        "text": "#0b2140",
        "muted": "#51658a",
        "accent": "#0b63d6",
        "border": "#e6eefc",
        "shadow": "rgba(13,38,76,0.08)",
        "button-bg": "#ffffff",
        "button-text": "#0b63d6",
        "error": "#c62828",
    },
}

THEME_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'assets', 'custom_theme.css')


def palette_name(dark: bool) -> str:
    return "dark" if dark else "light"


def toggle_label(dark: bool) -> str:
    return "🌙 Dark Mode" if dark else "☀ Light Mode"


def theme_css(dark: bool) -> str:
    """CSS custom properties for the selected palette."""
    palette = PALETTES[palette_name(dark)]
    props = "\n".join(f"    --calc-{name}: {value};" for name, value in palette.items())
    return f":root {{\n{props}\n}}"


def load_base_css(theme_file: str = THEME_FILE) -> str:
    with open(theme_file, 'r', encoding='utf-8') as f:
        return f.read()


def set_theme(
    dark: bool = True,
    page_title: str = "Advanced Calculator",
    page_icon: str = "🧮",
    layout: str = "centered",
):
    """Configure the Streamlit page & inject the calculator CSS.

    Safe to call at the top of every rerun: Streamlit ignores repeated
    page_config calls, while the CSS is re-injected so a theme toggle takes
    effect immediately.
    """
    try:
        st.set_page_config(
            page_title=page_title,
            page_icon=page_icon,
            layout=layout,
        )
    except Exception:
        # set_page_config can only be called once; ignore if already set.
        pass

    try:
        css = load_base_css()
    except FileNotFoundError:
        st.error(f"Theme file not found at {THEME_FILE}. Please check the file path.")
        css = ""
    st.markdown(f"<style>{theme_css(dark)}\n{css}</style>", unsafe_allow_html=True)
