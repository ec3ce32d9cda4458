"""Value types describing a neurological disorder for display."""

import hashlib
from dataclasses import dataclass
from enum import StrEnum


class Icon(StrEnum):
    BRAIN_PROFILE = "brain_profile"
    FIGURE_WALK = "figure_walk"
    BOLT_CLOUD = "bolt_cloud"
    PERSON_QUESTION = "person_question"
    HAND_DRAW = "hand_draw"
    TEXT_BUBBLE = "text_bubble"
    WAVEFORM_ECG = "waveform_ecg"

    @property
    def glyph(self) -> str:
        return _ICON_GLYPHS[self]


_ICON_GLYPHS: dict[Icon, str] = {
    Icon.BRAIN_PROFILE: "\U0001f9e0",
    Icon.FIGURE_WALK: "\U0001f6b6",
    Icon.BOLT_CLOUD: "\U0001f329\ufe0f",
    Icon.PERSON_QUESTION: "\U0001f937",
    Icon.HAND_DRAW: "\u270d\ufe0f",
    Icon.TEXT_BUBBLE: "\U0001f4ac",
    Icon.WAVEFORM_ECG: "\U0001f4c8",
}


class ThemeColor(StrEnum):
    BLUE = "blue"
    PURPLE = "purple"
    ORANGE = "orange"
    TEAL = "teal"
    GREEN = "green"


@dataclass(frozen=True)
class Disorder:
    """A single neurological disorder with its key characteristic and neuronal impact.

    Instances are immutable. ``identity`` is derived from the field values, so
    the same record always keys the same way when rendered in a list.
    """

    name: str
    key_characteristic: str
    neuronal_effect: str
    icon: Icon
    theme_color: ThemeColor

    @property
    def identity(self) -> str:
        digest = hashlib.sha1(usedforsecurity=False)
        for part in (
            self.name,
            self.key_characteristic,
            self.neuronal_effect,
            self.icon,
            self.theme_color,
        ):
            digest.update(part.encode("utf-8"))
            digest.update(b"\x00")
        return digest.hexdigest()

    @property
    def accessibility_label(self) -> str:
        """Single combined description read by assistive technologies."""
        return (
            f"{self.name}. Key characteristic: {self.key_characteristic.rstrip('.')}. "
            f"Neuronal Impact: {self.neuronal_effect}"
        )
