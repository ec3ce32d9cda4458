"""Page composition: introduction, one card per disorder, footer."""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import streamlit as st

from ..config import NINDS_URL
from ..models import Disorder
from .components import (
    disorder_card_html,
    footer_html,
    introduction_html,
    render_disorder_card,
    render_footer,
    render_introduction,
)
from .styles import build_css
from .theme import Theme

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Page:
    styles: str
    introduction: str
    cards: tuple[str, ...]
    footer: str

    @property
    def blocks(self) -> tuple[str, ...]:
        """Visible fragments in top-to-bottom order."""
        return (self.introduction, *self.cards, self.footer)


def compose_page(
    disorders: Iterable[Disorder],
    theme: Theme,
    dark_theme: Theme | None = None,
    link_url: str = NINDS_URL,
) -> Page:
    """Build the full screen for *disorders*, keeping their order."""
    cards = tuple(disorder_card_html(d) for d in disorders)
    _logger.debug("Composed page with %d disorder cards (%s theme)", len(cards), theme.name)
    return Page(
        styles=build_css(theme, dark_theme),
        introduction=introduction_html(),
        cards=cards,
        footer=footer_html(link_url),
    )


def render_page(disorders: Sequence[Disorder], link_url: str = NINDS_URL) -> None:
    """Write the introduction, cards and footer into a single-column container."""
    _logger.debug("Rendering %d disorder cards", len(disorders))
    with st.container(key="page_stack"):
        render_introduction()
        for disorder in disorders:
            render_disorder_card(disorder)
        render_footer(link_url)
