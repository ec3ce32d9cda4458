"""UI layer — theme, styles and HTML rendering components."""

from .components import (
    build_link,
    disorder_card_html,
    footer_html,
    info_row_html,
    introduction_html,
    render_disorder_card,
    render_footer,
    render_introduction,
)
from .page import Page, compose_page, render_page
from .styles import build_css, inject_styles, theme_variables
from .theme import DARK_THEME, LIGHT_THEME, Theme, resolve_theme

__all__ = [
    "DARK_THEME",
    "LIGHT_THEME",
    "Page",
    "Theme",
    "build_css",
    "build_link",
    "compose_page",
    "disorder_card_html",
    "footer_html",
    "info_row_html",
    "inject_styles",
    "introduction_html",
    "render_disorder_card",
    "render_footer",
    "render_introduction",
    "render_page",
    "resolve_theme",
    "theme_variables",
]
