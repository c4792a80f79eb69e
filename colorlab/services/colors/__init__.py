"""
ColorLab Colors Module

Color model for the palette engine: exact conversion between HEX, RGB and HSL
representations, a parser for free-form color text, and random color sampling.
Palette derivation lives in ``palettes`` and naming in ``naming``.
"""

import math
import random
import re
from dataclasses import dataclass, replace
from typing import Any, Dict, NamedTuple, Optional

__version__ = "1.0.0"


class InvalidFormat(ValueError):
    """Raised when color text matches none of the recognized notations."""


class RGB(NamedTuple):
    """Additive color channels, each an integer in [0, 255]."""
    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees [0, 360), saturation and lightness in percent [0, 100]."""
    h: int
    s: int
    l: int


@dataclass(frozen=True)
class ColorInfo:
    """A color carried in all three representations plus an optional label."""
    hex: str
    rgb: RGB
    hsl: HSL
    name: Optional[str] = None

    @classmethod
    def from_rgb(cls, rgb: RGB) -> "ColorInfo":
        rgb = RGB(*rgb)
        return cls(hex=rgb_to_hex(rgb), rgb=rgb, hsl=rgb_to_hsl(rgb))

    @classmethod
    def from_hsl(cls, hsl: HSL) -> "ColorInfo":
        """Build from HSL, keeping the HSL exactly as given."""
        hsl = HSL(*hsl)
        rgb = hsl_to_rgb(hsl)
        return cls(hex=rgb_to_hex(rgb), rgb=rgb, hsl=hsl)

    @classmethod
    def from_hex(cls, hex_color: str) -> "ColorInfo":
        return cls.from_rgb(hex_to_rgb(hex_color))

    def with_name(self, name: str) -> "ColorInfo":
        return replace(self, name=name)

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the wire contract shared with API clients.

        Returns:
            ``{"hex", "rgb": {r, g, b}, "hsl": {h, s, l}}`` plus ``name`` when set
        """
        data = {
            "hex": self.hex,
            "rgb": self.rgb._asdict(),
            "hsl": self.hsl._asdict(),
        }
        if self.name is not None:
            data["name"] = self.name
        return data


HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]+")
BARE_HEX_RE = re.compile(r"[0-9A-Fa-f]{6}")
RGB_RE = re.compile(r"rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)", re.IGNORECASE | re.ASCII)
HSL_RE = re.compile(r"hsl\(\s*(\d+)\s*,\s*(\d+)\s*%\s*,\s*(\d+)\s*%\s*\)", re.IGNORECASE | re.ASCII)

FORMAT_HELP = "Use HEX (#RRGGBB), RGB (rgb(r,g,b)), or HSL (hsl(h,s%,l%))"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def hex_to_rgb(hex_color: str) -> RGB:
    """
    Convert hex color to RGB.

    Args:
        hex_color: ``#RRGGBB``, ``RRGGBB``, ``#RGB`` or ``RGB``, any case

    Returns:
        RGB triple with channels in [0, 255]

    Raises:
        InvalidFormat: If the digits are not hexadecimal or the length is not 3 or 6
    """
    hex_clean = hex_color[1:] if hex_color.startswith("#") else hex_color

    if len(hex_clean) not in (3, 6) or not HEX_DIGITS_RE.fullmatch(hex_clean):
        raise InvalidFormat(f"Invalid hex color format: {hex_color}")

    # Shorthand: each digit duplicated (F00 -> FF0000)
    if len(hex_clean) == 3:
        hex_clean = "".join(char * 2 for char in hex_clean)

    return RGB(*(int(hex_clean[i:i + 2], 16) for i in (0, 2, 4)))


def rgb_to_hex(rgb: RGB) -> str:
    """
    Convert RGB to an upper-case ``#RRGGBB`` string.

    Channels are rounded and then clamped to [0, 255], so out-of-range input
    never yields a malformed hex segment.
    """
    channels = (max(0, min(255, round_half_up(c))) for c in rgb)
    return "#" + "".join(f"{c:02X}" for c in channels)


def rgb_to_hsl(rgb: RGB) -> HSL:
    """
    Convert RGB to HSL.

    Args:
        rgb: Channels in [0, 255]

    Returns:
        HSL with hue in [0, 360) and saturation/lightness in [0, 100], all rounded
    """
    r, g, b = (c / 255 for c in rgb)

    max_c = max(r, g, b)
    min_c = min(r, g, b)
    diff = max_c - min_c

    h = 0.0
    s = 0.0
    l = (max_c + min_c) / 2

    if diff != 0:
        s = diff / (2 - max_c - min_c) if l > 0.5 else diff / (max_c + min_c)

        # Hue in turns, piecewise on the dominant channel
        if max_c == r:
            h = ((g - b) / diff + (6 if g < b else 0)) / 6
        elif max_c == g:
            h = ((b - r) / diff + 2) / 6
        else:
            h = ((r - g) / diff + 4) / 6

    return HSL(
        h=round_half_up(h * 360) % 360,
        s=round_half_up(s * 100),
        l=round_half_up(l * 100),
    )


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(hsl: HSL) -> RGB:
    """
    Convert HSL to RGB.

    Args:
        hsl: Hue in degrees, saturation and lightness in percent

    Returns:
        RGB triple with channels rounded to integers
    """
    h = hsl[0] / 360
    s = hsl[1] / 100
    l = hsl[2] / 100

    if s == 0:
        # Achromatic: every channel equals lightness
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_channel(p, q, h + 1 / 3)
        g = _hue_to_channel(p, q, h)
        b = _hue_to_channel(p, q, h - 1 / 3)

    return RGB(round_half_up(r * 255), round_half_up(g * 255), round_half_up(b * 255))


def parse_color(color: str) -> ColorInfo:
    """
    Parse free-form color text into a fully populated ColorInfo.

    Tried in order: ``#``-prefixed hex, ``rgb(r, g, b)``, ``hsl(h, s%, l%)``,
    then a bare six-digit hex string.

    Args:
        color: Color text; surrounding whitespace is ignored

    Returns:
        ColorInfo with the two missing representations derived from the matched one

    Raises:
        InvalidFormat: If no notation matches or a value is out of range
    """
    color = color.strip()

    if color.startswith("#"):
        return ColorInfo.from_hex(color)

    rgb_match = RGB_RE.fullmatch(color)
    if rgb_match:
        rgb = RGB(*(int(value) for value in rgb_match.groups()))
        if any(channel > 255 for channel in rgb):
            raise InvalidFormat(f"RGB channels must be between 0 and 255: {color}")
        return ColorInfo.from_rgb(rgb)

    hsl_match = HSL_RE.fullmatch(color)
    if hsl_match:
        hsl = HSL(*(int(value) for value in hsl_match.groups()))
        if hsl.h >= 360 or hsl.s > 100 or hsl.l > 100:
            raise InvalidFormat(
                f"HSL hue must be below 360 and percentages at most 100: {color}"
            )
        return ColorInfo.from_hsl(hsl)

    if BARE_HEX_RE.fullmatch(color):
        return parse_color("#" + color)

    raise InvalidFormat(f"Invalid color format. {FORMAT_HELP}")


def generate_random_color(rng: Optional[random.Random] = None) -> ColorInfo:
    """
    Sample a color uniformly over the RGB cube.

    Args:
        rng: Optional random source; the module-level generator is used when omitted
    """
    rng = rng or random
    return ColorInfo.from_rgb(RGB(rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255)))
