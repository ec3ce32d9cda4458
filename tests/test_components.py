import logging
from html.parser import HTMLParser

import pytest

from neuro_disorders.config import NINDS_LINK_TEXT, NINDS_URL
from neuro_disorders.models import Icon, ThemeColor
from neuro_disorders.ui import (
    build_link,
    disorder_card_html,
    footer_html,
    info_row_html,
    introduction_html,
)


class _RowCollector(HTMLParser):
    """Collects (title, description) pairs from info-row spans in document order."""

    def __init__(self):
        super().__init__()
        self.rows: list[tuple[str, str]] = []
        self._field: str | None = None
        self._title = ""

    def handle_starttag(self, tag, attrs):
        cls = dict(attrs).get("class")
        if cls in ("info-title", "info-description"):
            self._field = cls

    def handle_endtag(self, tag):
        self._field = None

    def handle_data(self, data):
        if self._field == "info-title":
            self._title = data
        elif self._field == "info-description":
            self.rows.append((self._title, data))


def _rows(html: str) -> list[tuple[str, str]]:
    collector = _RowCollector()
    collector.feed(html)
    return collector.rows


def test_info_row_orders_title_before_description():
    html = info_row_html(Icon.TEXT_BUBBLE, "Title", "Longer description")
    assert _rows(html) == [("Title", "Longer description")]
    assert Icon.TEXT_BUBBLE.glyph in html


def test_info_row_styles_title_as_secondary():
    html = info_row_html(Icon.TEXT_BUBBLE, "Title", "Body")
    assert "<span class='info-title'>Title</span>" in html
    assert "<span class='info-description'>Body</span>" in html


def test_info_row_accepts_empty_strings():
    """Empty text renders empty elements instead of failing."""
    html = info_row_html(Icon.TEXT_BUBBLE, "", "")
    assert "<span class='info-title'></span>" in html
    assert html.count('class="info-row"') == 1


def test_card_has_exactly_two_rows_in_order(parkinsons):
    html = disorder_card_html(parkinsons)
    assert _rows(html) == [
        ("Key Characteristic", parkinsons.key_characteristic),
        ("Neuronal Impact", parkinsons.neuronal_effect),
    ]
    body = html[html.index("class='card-body'") :]
    assert body.index("Key Characteristic") < body.index("<hr class='card-divider'>")
    assert body.index("<hr class='card-divider'>") < body.index("Neuronal Impact")
    assert html.count("<hr class='card-divider'>") == 1


def test_card_header_uses_theme_color_class(parkinsons):
    html = disorder_card_html(parkinsons)
    assert f"class='card-header tint-{ThemeColor.PURPLE}'" in html


def test_card_exposes_identity_and_accessibility_label(parkinsons):
    html = disorder_card_html(parkinsons)
    assert f"data-identity='{parkinsons.identity}'" in html
    assert "aria-label=\"Parkinson&#x27;s Disease. Key characteristic:" in html
    assert "dopamine-producing" in html


def test_card_escapes_markup(make_disorder):
    html = disorder_card_html(make_disorder("<b>Bold</b>"))
    assert "<b>Bold</b>" not in html
    assert "&lt;b&gt;Bold&lt;/b&gt;" in html


def test_introduction_text():
    html = introduction_html()
    assert "When Things Go Wrong" in html
    assert "synaptic transmission" in html


def test_build_link_opens_externally():
    link = build_link(NINDS_URL)
    assert link is not None
    assert f'href="{NINDS_URL}"' in link
    assert "target='_blank'" in link
    assert "noopener" in link


@pytest.mark.parametrize("url", ["", "not a url", "ftp://example.com/x", "https://", "http://[::1"])
def test_build_link_rejects_unusable_urls(url):
    assert build_link(url) is None


def test_footer_omits_link_for_empty_url(caplog):
    """A malformed URL drops the link element and keeps the disclaimer."""
    # The app script turns off propagation on the package logger.
    pkg_logger = logging.getLogger("neuro_disorders")
    pkg_logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.WARNING, logger="neuro_disorders"):
            html = footer_html("")
    finally:
        pkg_logger.removeHandler(caplog.handler)
    assert "educational purposes only" in html
    assert "<a " not in html
    assert NINDS_LINK_TEXT not in html
    assert "footer link" in caplog.text


def test_footer_includes_link():
    html = footer_html(NINDS_URL)
    assert html.count("<a ") == 1
    assert "Opens the NINDS website in a browser." in html


def test_render_functions_write_markdown(monkeypatch, parkinsons):
    """Each render_* helper writes its builder's HTML through st.markdown."""
    from neuro_disorders.ui import components

    written = []
    monkeypatch.setattr(
        components.st, "markdown", lambda body, **kwargs: written.append((body, kwargs))
    )
    components.render_introduction()
    components.render_disorder_card(parkinsons)
    components.render_footer(NINDS_URL)
    assert [body for body, _ in written] == [
        introduction_html(),
        disorder_card_html(parkinsons),
        footer_html(NINDS_URL),
    ]
    assert all(kwargs == {"unsafe_allow_html": True} for _, kwargs in written)
