"""
ColorLab Color Naming

Coarse human-readable labels for colors, banded on HSL. Achromatic colors get
a gray-scale name; chromatic colors get a hue family plus at most one
lightness/saturation prefix.
"""

from typing import Iterable, List, Tuple

from . import ColorInfo

# Below this saturation a color is named as a shade of gray
ACHROMATIC_S_THRESHOLD = 10

# (exclusive upper lightness bound, name)
ACHROMATIC_BANDS: List[Tuple[int, str]] = [
    (20, "Black"),
    (40, "Dark Gray"),
    (60, "Gray"),
    (80, "Light Gray"),
]

# (inclusive upper hue bound, name); red wraps around both ends of the wheel
HUE_BANDS: List[Tuple[int, str]] = [
    (15, "Red"),
    (45, "Orange"),
    (70, "Yellow"),
    (150, "Green"),
    (210, "Cyan"),
    (250, "Blue"),
    (290, "Purple"),
    (330, "Magenta"),
    (360, "Red"),
]


def _hue_family(h: int) -> str:
    for upper, name in HUE_BANDS:
        if h <= upper:
            return name
    return "Red"


def _prefix(s: int, l: int) -> str:
    # First match wins
    if l < 30:
        return "Dark "
    if l > 70:
        return "Light "
    if s < 40:
        return "Pale "
    if s > 80:
        return "Vivid "
    return ""


def get_color_name(color: ColorInfo) -> str:
    """
    Get a basic name for a color.

    Args:
        color: Color to label; only its HSL is used

    Returns:
        Name such as ``"Gray"``, ``"Vivid Red"`` or ``"Light Blue"``
    """
    h, s, l = color.hsl

    if s < ACHROMATIC_S_THRESHOLD:
        for upper, name in ACHROMATIC_BANDS:
            if l < upper:
                return name
        return "White"

    return _prefix(s, l) + _hue_family(h)


def name_colors(colors: Iterable[ColorInfo]) -> List[ColorInfo]:
    """Return copies of ``colors`` labelled with their basic names."""
    return [color.with_name(get_color_name(color)) for color in colors]
