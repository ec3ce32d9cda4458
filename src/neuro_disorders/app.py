"""Neurological Disorders - Streamlit application."""

import logging

import streamlit as st

from neuro_disorders.catalog import get_disorders
from neuro_disorders.config import APP_TITLE, PAGE_TITLE
from neuro_disorders.ui import inject_styles, render_page, resolve_theme

_logger = logging.getLogger("neuro_disorders")
_logger.setLevel(logging.DEBUG)
if not _logger.handlers:
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(message)s"))
    _logger.addHandler(_handler)
_logger.propagate = False

st.set_page_config(page_title=PAGE_TITLE, layout="centered")

theme, dark_theme = resolve_theme(st.get_option("theme.base"))
inject_styles(theme, dark_theme)

st.title(APP_TITLE)

render_page(get_disorders())


def main():
    """Entrypoint for the `neuro-disorders-app` CLI command."""
    import sys

    from streamlit.web.cli import main as st_main

    sys.argv = ["streamlit", "run", __file__, "--server.headless=true"]
    st_main()
