import pytest

from neuro_disorders.catalog import get_disorders
from neuro_disorders.models import Disorder, Icon, ThemeColor
from neuro_disorders.ui import LIGHT_THEME


@pytest.fixture
def theme():
    return LIGHT_THEME


@pytest.fixture
def parkinsons() -> Disorder:
    """The Parkinson's Disease record from the shipped catalog."""
    return next(d for d in get_disorders() if d.name == "Parkinson's Disease")


@pytest.fixture
def make_disorder():
    def _make(name: str = "Test Disorder", **overrides) -> Disorder:
        fields = {
            "name": name,
            "key_characteristic": f"{name} characteristic.",
            "neuronal_effect": f"{name} effect.",
            "icon": Icon.BRAIN_PROFILE,
            "theme_color": ThemeColor.BLUE,
        }
        fields.update(overrides)
        return Disorder(**fields)

    return _make
