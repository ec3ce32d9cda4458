"""Global CSS styles for the Neurological Disorders application."""

import streamlit as st

from ..config import (
    BLOCK_SPACING_PX,
    CARD_CORNER_RADIUS_PX,
    HEADER_ICON_SIZE_PX,
    MAX_CONTENT_WIDTH_REM,
    ROW_ICON_WIDTH_PX,
)
from ..models import ThemeColor
from .theme import Theme

_LAYOUT_CSS = (
    "[data-testid='stApp']{background:var(--nd-background)}"
    f"[data-testid='stMainBlockContainer']{{max-width:{MAX_CONTENT_WIDTH_REM}rem!important;"
    "margin:0 auto!important}"
    f".st-key-page_stack{{gap:{BLOCK_SPACING_PX}px!important;text-align:left}}"
    ".intro-block{padding:0 16px}"
    ".intro-title{font-size:1.375rem;font-weight:700;"
    "color:var(--nd-primary-text);margin:0 0 8px}"
    ".intro-text{font-size:0.94rem;color:var(--nd-secondary-text);margin:0}"
    ".disorder-card{background:var(--nd-card-background);"
    f"border-radius:{CARD_CORNER_RADIUS_PX}px;overflow:hidden;"
    "box-shadow:0 4px 8px var(--nd-shadow)}"
    ".card-header{display:flex;align-items:center;gap:8px;padding:16px}"
    f".card-icon{{width:{HEADER_ICON_SIZE_PX}px;height:{HEADER_ICON_SIZE_PX}px;"
    "display:flex;align-items:center;justify-content:center;font-size:1.75rem}"
    ".card-title{font-size:1.06rem;font-weight:700;color:#FFFFFF}"
    ".card-body{display:flex;flex-direction:column;gap:16px;padding:16px}"
    ".card-divider{border:none;border-top:1px solid var(--nd-divider);margin:0}"
    ".info-row{display:flex;align-items:flex-start;gap:12px}"
    f".info-icon{{width:{ROW_ICON_WIDTH_PX}px;flex-shrink:0;text-align:center;"
    "font-size:1.06rem;color:var(--nd-secondary-text)}"
    ".info-text{display:flex;flex-direction:column;gap:2px}"
    ".info-title{font-size:0.75rem;font-weight:700;color:var(--nd-secondary-text)}"
    ".info-description{font-size:0.81rem;color:var(--nd-primary-text)}"
    ".footer-block{display:flex;flex-direction:column;align-items:center;"
    "gap:8px;padding:16px;width:100%}"
    ".footer-disclaimer{font-size:0.75rem;text-align:center;"
    "color:var(--nd-secondary-text)}"
    ".footer-link{font-size:0.69rem;padding-top:4px;color:var(--nd-link)}"
    + "".join(f".tint-{c}{{background:var(--nd-{c})}}" for c in ThemeColor)
)


def theme_variables(theme: Theme) -> str:
    """Custom-property declarations carrying every color of *theme*."""
    values = {
        "background": theme.background,
        "card-background": theme.card_background,
        "primary-text": theme.primary_text,
        "secondary-text": theme.secondary_text,
        "divider": theme.divider,
        "shadow": theme.shadow,
        "link": theme.link,
        **{str(token): hex_ for token, hex_ in theme.palette.items()},
    }
    return "".join(f"--nd-{name}:{value};" for name, value in values.items())


def build_css(theme: Theme, dark_theme: Theme | None = None) -> str:
    """Return the page-wide CSS for *theme*.

    With *dark_theme* the colors switch to that palette whenever the browser
    reports a dark color scheme.
    """
    css = f":root{{{theme_variables(theme)}}}"
    if dark_theme is not None:
        css += (
            "@media (prefers-color-scheme: dark)"
            f"{{:root{{{theme_variables(dark_theme)}}}}}"
        )
    return css + _LAYOUT_CSS


def inject_styles(theme: Theme, dark_theme: Theme | None = None) -> None:
    """Inject the global CSS into the Streamlit page."""
    st.markdown(f"<style>{build_css(theme, dark_theme)}</style>", unsafe_allow_html=True)
