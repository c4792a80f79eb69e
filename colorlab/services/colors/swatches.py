"""
ColorLab Swatch Generation

Renders a palette as a PNG strip of solid color chips for UI preview.
"""

import base64
import io
from typing import Any, Dict, List

from PIL import Image

from . import ColorInfo


def create_color_chip(color: ColorInfo, chip_size: int = 40) -> Image.Image:
    """
    Create a single color chip image.

    Args:
        color: Color to render
        chip_size: Size of the square chip in pixels

    Returns:
        PIL Image of the color chip
    """
    return Image.new("RGB", (chip_size, chip_size), tuple(color.rgb))


def create_palette_strip(colors: List[ColorInfo], chip_size: int = 40, spacing: int = 2) -> Image.Image:
    """
    Create a horizontal strip of color chips.

    Args:
        colors: Colors in display order
        chip_size: Size of each chip in pixels
        spacing: Spacing between chips in pixels

    Returns:
        PIL Image of the strip on a white background
    """
    if not colors:
        return Image.new("RGB", (chip_size, chip_size), (255, 255, 255))

    num_chips = len(colors)
    strip_width = num_chips * chip_size + (num_chips - 1) * spacing
    strip = Image.new("RGB", (strip_width, chip_size), (255, 255, 255))

    x_pos = 0
    for color in colors:
        strip.paste(create_color_chip(color, chip_size), (x_pos, 0))
        x_pos += chip_size + spacing

    return strip


def render_palette_swatch(colors: List[ColorInfo], chip_size: int = 40, spacing: int = 2) -> str:
    """
    Render a palette as a base64-encoded PNG strip.

    Returns:
        Base64-encoded PNG image string
    """
    strip = create_palette_strip(colors, chip_size, spacing)

    buffer = io.BytesIO()
    strip.save(buffer, format="PNG")
    return base64.b64encode(buffer.getvalue()).decode("utf-8")


def create_swatch_metadata(colors: List[ColorInfo], chip_size: int, spacing: int) -> Dict[str, Any]:
    """Describe swatch parameters and content alongside the image."""
    return {
        "format": "strip",
        "chip_size_px": chip_size,
        "spacing_px": spacing,
        "total_colors": len(colors),
        "color_mapping": [color.hex for color in colors],
    }
