"""Menu widgets: cycling buttons, eases, colours and debug labels."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum

from traffictrainer.geometry import Vec3

BACKGROUND = "101014"
TEXT_COLOR = "ebeded"
TEXT_SIZE = 40.0

BUTTON_NONE = "22222a"
BUTTON_NONE_BORDER = "30303b"
BUTTON_HOVER = "292933"
BUTTON_HOVER_BORDER = "373744"
BUTTON_PRESS = "30303b"
BUTTON_PRESS_BORDER = "3e3e4c"

BUTTON_WIDTH = 20.0
BUTTON_HEIGHT = 5.0

# Scale change per frame of a button's hover ease.
EASE_STEP = 0.0125

Color = tuple[float, float, float, float]


def parse_color(hex_code: str) -> Color:
    """Parse ``RGB``, ``RGBA``, ``RRGGBB`` or ``RRGGBBAA`` (``#`` optional) to floats in [0, 1]."""
    digits = hex_code[1:] if hex_code.startswith("#") else hex_code
    if len(digits) not in (3, 4, 6, 8) or not all(c in string.hexdigits for c in digits):
        raise ValueError(f"invalid hex colour: {hex_code!r}")
    if len(digits) in (3, 4):
        digits = "".join(c * 2 for c in digits)
    if len(digits) == 6:
        digits += "ff"
    r, g, b, a = (int(digits[i : i + 2], 16) / 255.0 for i in range(0, 8, 2))
    return (r, g, b, a)


@dataclass
class CycleButton:
    """A button that steps through a fixed list of labels."""

    strings: list[str]
    current: int = 0

    def __post_init__(self) -> None:
        if not self.strings:
            raise ValueError("a cycle button needs at least one label")

    def get(self) -> str:
        return self.strings[self.current]

    def next(self) -> str:
        """Advance to the next label, wrapping around, and return it."""
        self.current = (self.current + 1) % len(self.strings)
        return self.get()


@dataclass
class Ease:
    """A value that eases between the bounds ``(start, end)``."""

    bounds: tuple[float, float]
    ease: bool = False
    value: float = field(init=False)

    def __post_init__(self) -> None:
        self.value = self.bounds[0]

    def add(self, value: float) -> float:
        self.value = min(self.value + value, self.bounds[1])
        return self.value

    def sub(self, value: float) -> float:
        self.value = max(self.value - value, self.bounds[0])
        return self.value


@dataclass
class XYEase:
    """A pair of values easing independently between their own bounds."""

    x_bounds: tuple[float, float]
    y_bounds: tuple[float, float]
    ease: bool = False
    x: float = field(init=False)
    y: float = field(init=False)

    def __post_init__(self) -> None:
        self.x = self.x_bounds[0]
        self.y = self.y_bounds[0]

    def add(self, value: float) -> tuple[float, float]:
        return self.add_xy(value, value)

    def add_xy(self, x: float, y: float) -> tuple[float, float]:
        self.x = min(self.x + x, self.x_bounds[1])
        self.y = min(self.y + y, self.y_bounds[1])
        return self.x, self.y

    def sub(self, value: float) -> tuple[float, float]:
        return self.sub_xy(value, value)

    def sub_xy(self, x: float, y: float) -> tuple[float, float]:
        self.x = max(self.x - x, self.x_bounds[0])
        self.y = max(self.y - y, self.y_bounds[0])
        return self.x, self.y


class UiFadeEase(Ease):
    """Ease of a widget's opacity."""


class UiScaleEase(Ease):
    """Ease of a widget's scale."""


class UiPositionEase(XYEase):
    """Ease of a widget's position."""


class Interaction(Enum):
    """Pointer interaction with a button."""

    NONE = "None"
    HOVERED = "Hovered"
    PRESSED = "Pressed"


def _default_scale_ease() -> UiScaleEase:
    return UiScaleEase((1.0, 1.1))


@dataclass
class Button:
    """A menu button. Buttons without ``ease`` neither highlight nor grow."""

    text: str = ""
    background: Color = field(default_factory=lambda: parse_color(BUTTON_NONE))
    border: Color = field(default_factory=lambda: parse_color(BUTTON_NONE_BORDER))
    ease: UiScaleEase | None = field(default_factory=_default_scale_ease)
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))


def highlight_button(button: Button, interaction: Interaction) -> None:
    """Recolour ``button`` and set its ease direction for a new interaction."""
    if button.ease is None:
        return
    if interaction is Interaction.NONE:
        button.background = parse_color(BUTTON_NONE)
        button.ease.ease = False
    elif interaction is Interaction.HOVERED:
        button.background = parse_color(BUTTON_HOVER)
        button.ease.ease = True
    else:
        button.background = parse_color(BUTTON_PRESS)


def ease_button(button: Button) -> float | None:
    """Step the button's scale ease one frame and return the new scale."""
    if button.ease is None:
        return None
    ease = button.ease
    scale = ease.add(EASE_STEP) if ease.ease else ease.sub(EASE_STEP)
    button.scale = Vec3(scale, scale, 1.0)
    return scale


@dataclass
class DebugMarker:
    """A labelled debug readout."""

    text: str
    id: int

    def format(self, value: object) -> str:
        return f"{self.text}: {value}"

    def format_f32(self, value: float) -> str:
        """Format ``value`` with two decimals."""
        return self.format(f"{value:.2f}")