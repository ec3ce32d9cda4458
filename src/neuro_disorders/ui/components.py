"""Self-contained rendering functions for the disorder catalog page.

Each ``*_html`` builder is a pure function of its data. Colors come from CSS
classes and the custom properties set by ``styles.build_css``, so the markup is
the same under every theme. The matching ``render_*`` function owns the
``st.markdown`` call so callers only pass data.
"""

import logging
from html import escape
from urllib.parse import urlsplit

import streamlit as st

from ..config import (
    DISCLAIMER_TEXT,
    INTRO_TEXT,
    INTRO_TITLE,
    KEY_CHARACTERISTIC_TITLE,
    NEURONAL_IMPACT_TITLE,
    NINDS_LINK_HINT,
    NINDS_LINK_TEXT,
)
from ..models import Disorder, Icon

_logger = logging.getLogger(__name__)

# ── Introduction ─────────────────────────────────────────────────────────────


def introduction_html() -> str:
    """Fixed title and explanatory paragraph shown above the cards."""
    return (
        "<div class=\"intro-block\">"
        f"<div class='intro-title'>{escape(INTRO_TITLE)}</div>"
        f"<p class='intro-text'>{escape(INTRO_TEXT)}</p>"
        "</div>"
    )


def render_introduction() -> None:
    st.markdown(introduction_html(), unsafe_allow_html=True)


# ── Info row ─────────────────────────────────────────────────────────────────


def info_row_html(icon: Icon, title: str, description: str) -> str:
    """Icon column beside a de-emphasized title over its description.

    No validation is done: empty strings render as empty elements.
    """
    return (
        "<div class=\"info-row\">"
        f"<span class='info-icon' aria-hidden='true'>{icon.glyph}</span>"
        "<div class='info-text'>"
        f"<span class='info-title'>{escape(title)}</span>"
        f"<span class='info-description'>{escape(description)}</span>"
        "</div></div>"
    )


# ── Disorder card ────────────────────────────────────────────────────────────


def disorder_card_html(disorder: Disorder) -> str:
    """Colored header plus the key-characteristic and neuronal-impact rows."""
    header = (
        f"<div class='card-header tint-{disorder.theme_color}'>"
        f"<span class='card-icon' aria-hidden='true'>{disorder.icon.glyph}</span>"
        f"<span class='card-title'>{escape(disorder.name)}</span>"
        "</div>"
    )
    body = (
        "<div class='card-body'>"
        + info_row_html(Icon.TEXT_BUBBLE, KEY_CHARACTERISTIC_TITLE, disorder.key_characteristic)
        + "<hr class='card-divider'>"
        + info_row_html(Icon.WAVEFORM_ECG, NEURONAL_IMPACT_TITLE, disorder.neuronal_effect)
        + "</div>"
    )
    return (
        f"<div class=\"disorder-card\" role='group' data-identity='{disorder.identity}' "
        f"aria-label=\"{escape(disorder.accessibility_label)}\">"
        f"{header}{body}</div>"
    )


def render_disorder_card(disorder: Disorder) -> None:
    st.markdown(disorder_card_html(disorder), unsafe_allow_html=True)


# ── Footer ───────────────────────────────────────────────────────────────────


def build_link(url: str) -> str | None:
    """Return the footer anchor for *url*, or ``None`` if it cannot be opened."""
    try:
        parts = urlsplit(url)
    except ValueError:
        _logger.warning("Could not parse footer link %r", url)
        return None
    if parts.scheme not in ("http", "https") or not parts.netloc:
        _logger.warning("Omitting footer link with unusable URL %r", url)
        return None
    return (
        f"<a class='footer-link' href=\"{escape(url)}\" target='_blank' "
        f"rel='noopener noreferrer' title=\"{escape(NINDS_LINK_HINT)}\">"
        f"{escape(NINDS_LINK_TEXT)}</a>"
    )


def footer_html(url: str) -> str:
    """Disclaimer and, when *url* is usable, the outbound source link."""
    link = build_link(url) or ""
    return (
        "<div class=\"footer-block\">"
        f"<p class='footer-disclaimer'>{escape(DISCLAIMER_TEXT)}</p>"
        f"{link}"
        "</div>"
    )


def render_footer(url: str) -> None:
    st.markdown(footer_html(url), unsafe_allow_html=True)
