"""
ColorLab Palette Generation

Derives related colors from a base color with fixed color-wheel rules. Every
rule is a hue rotation or a lightness sweep in HSL; each derived HSL is turned
back into RGB/HEX, and no interpolation happens in RGB space.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from . import HSL, ColorInfo, round_half_up


class PaletteType(str, Enum):
    """Supported palette variants."""
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    MONOCHROMATIC = "monochromatic"
    TETRADIC = "tetradic"


# Hue offsets in degrees applied to the base hue
HUE_OFFSETS: Dict[PaletteType, Tuple[int, ...]] = {
    PaletteType.COMPLEMENTARY: (180,),
    PaletteType.ANALOGOUS: (-30, 0, 30),
    PaletteType.TRIADIC: (0, 120, 240),
    PaletteType.TETRADIC: (0, 90, 180, 270),
}

PALETTE_RULES: Dict[PaletteType, str] = {
    PaletteType.COMPLEMENTARY: "h_rot:+180°; base + complement",
    PaletteType.ANALOGOUS: "h_rot:-30°,0°,+30°",
    PaletteType.TRIADIC: "h_rot:0°,+120°,+240°",
    PaletteType.TETRADIC: "h_rot:0°,+90°,+180°,+270°",
    PaletteType.MONOCHROMATIC: "L:10%→90% linear; H,S fixed",
}

MONOCHROMATIC_L_MIN = 10
MONOCHROMATIC_L_MAX = 90
DEFAULT_MONOCHROMATIC_COUNT = 5


def rotate_hue(h: int, degrees: int) -> int:
    """
    Rotate hue by specified degrees.

    Args:
        h: Original hue in degrees
        degrees: Rotation in degrees (can be negative)

    Returns:
        Rotated hue in [0, 360)
    """
    return (h + degrees) % 360


def _rotated(color: ColorInfo, offsets: Tuple[int, ...]) -> List[ColorInfo]:
    return [
        ColorInfo.from_hsl(color.hsl._replace(h=rotate_hue(color.hsl.h, offset)))
        for offset in offsets
    ]


def get_complementary(color: ColorInfo) -> ColorInfo:
    """Return the color opposite the base on the color wheel (+180°)."""
    return _rotated(color, HUE_OFFSETS[PaletteType.COMPLEMENTARY])[0]


def get_analogous(color: ColorInfo) -> List[ColorInfo]:
    """Return the base hue and its neighbours at -30° and +30°."""
    return _rotated(color, HUE_OFFSETS[PaletteType.ANALOGOUS])


def get_triadic(color: ColorInfo) -> List[ColorInfo]:
    return _rotated(color, HUE_OFFSETS[PaletteType.TRIADIC])


def get_tetradic(color: ColorInfo) -> List[ColorInfo]:
    return _rotated(color, HUE_OFFSETS[PaletteType.TETRADIC])


def get_monochromatic(color: ColorInfo, count: int = DEFAULT_MONOCHROMATIC_COUNT) -> List[ColorInfo]:
    """
    Generate a lightness sweep at the base hue and saturation.

    Args:
        color: Base color
        count: Number of samples, expected in [3, 10]; not re-validated here

    Returns:
        ``count`` colors with lightness stepped linearly from 10% to 90%
    """
    step = (MONOCHROMATIC_L_MAX - MONOCHROMATIC_L_MIN) / (count - 1)
    return [
        ColorInfo.from_hsl(color.hsl._replace(l=round_half_up(MONOCHROMATIC_L_MIN + step * i)))
        for i in range(count)
    ]


def generate_palette(
    base: ColorInfo,
    palette_type: Union[PaletteType, str],
    count: Optional[int] = None
) -> List[ColorInfo]:
    """
    Generate a palette of the requested variant.

    Args:
        base: Base color
        palette_type: Variant as a PaletteType or its string value
        count: Sample count, used by monochromatic only (defaults to 5)

    Returns:
        Derived colors; complementary returns the base followed by its complement

    Raises:
        ValueError: If ``palette_type`` is not a known variant
    """
    palette_type = PaletteType(palette_type)

    if palette_type == PaletteType.COMPLEMENTARY:
        return [base, get_complementary(base)]
    if palette_type == PaletteType.MONOCHROMATIC:
        return get_monochromatic(base, DEFAULT_MONOCHROMATIC_COUNT if count is None else count)
    return _rotated(base, HUE_OFFSETS[palette_type])


def get_palette_types_info() -> List[Dict[str, str]]:
    """Describe each variant and its generation rule for API disclosure."""
    return [
        {"type": palette_type.value, "rule": PALETTE_RULES[palette_type]}
        for palette_type in PaletteType
    ]
