"""Light and dark palettes passed explicitly to the style layer."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..models import ThemeColor


@dataclass(frozen=True, eq=False)
class Theme:
    name: str
    background: str
    card_background: str
    primary_text: str
    secondary_text: str
    divider: str
    shadow: str
    link: str
    palette: Mapping[ThemeColor, str]

    def color(self, token: ThemeColor) -> str:
        return self.palette[token]


LIGHT_THEME = Theme(
    name="light",
    background="#F2F2F7",
    card_background="#FFFFFF",
    primary_text="#000000",
    secondary_text="rgba(60,60,67,0.6)",
    divider="rgba(60,60,67,0.29)",
    shadow="rgba(0,0,0,0.1)",
    link="#007AFF",
    palette=MappingProxyType(
        {
            ThemeColor.BLUE: "#007AFF",
            ThemeColor.PURPLE: "#AF52DE",
            ThemeColor.ORANGE: "#FF9500",
            ThemeColor.TEAL: "#30B0C7",
            ThemeColor.GREEN: "#34C759",
        }
    ),
)

DARK_THEME = Theme(
    name="dark",
    background="#000000",
    card_background="#1C1C1E",
    primary_text="#FFFFFF",
    secondary_text="rgba(235,235,245,0.6)",
    divider="rgba(84,84,88,0.6)",
    shadow="rgba(0,0,0,0.1)",
    link="#0A84FF",
    palette=MappingProxyType(
        {
            ThemeColor.BLUE: "#0A84FF",
            ThemeColor.PURPLE: "#BF5AF2",
            ThemeColor.ORANGE: "#FF9F0A",
            ThemeColor.TEAL: "#40C8E0",
            ThemeColor.GREEN: "#30D158",
        }
    ),
)


def resolve_theme(base: str | None) -> tuple[Theme, Theme | None]:
    """Map Streamlit's ``theme.base`` option to ``(theme, dark_override)``.

    An explicit ``"light"`` or ``"dark"`` base pins one palette. When the option
    is unset Streamlit follows the OS setting, so the light palette is paired
    with the dark one for a ``prefers-color-scheme`` override.
    """
    if base == "dark":
        return DARK_THEME, None
    if base == "light":
        return LIGHT_THEME, None
    return LIGHT_THEME, DARK_THEME
