"""
Color Tools API Orchestrator

Handles the color tool operations behind the /v1/colors endpoints: color info,
palette generation, random colors and format conversion. Validated requests
are passed to the color engine, every returned color is named, and the
results are shaped into response models with a plain-text rendering.
"""

import time
from typing import Callable, List, Optional, TypeVar

from fastapi import HTTPException

from colorlab.config import config
from colorlab.schemas import (
    ColorInfoRequest, ColorModel, ConvertColorRequest, ConvertColorResponse,
    PaletteRequest, PaletteResponse, RandomColorsRequest
)
from colorlab.services.colors import ColorInfo, InvalidFormat, generate_random_color, parse_color
from colorlab.services.colors.naming import get_color_name, name_colors
from colorlab.services.colors.palettes import generate_palette
from colorlab.services.colors.swatches import create_swatch_metadata, render_palette_swatch
from colorlab.utils.ids import generate_request_id
from colorlab.utils.logging import get_logger
from colorlab.utils.metrics import get_metrics

logger = get_logger()

T = TypeVar("T")


def format_hex(color: ColorInfo) -> str:
    return f"HEX: {color.hex}"


def format_rgb(color: ColorInfo) -> str:
    r, g, b = color.rgb
    return f"RGB: rgb({r}, {g}, {b})"


def format_hsl(color: ColorInfo) -> str:
    h, s, l = color.hsl
    return f"HSL: hsl({h}, {s}%, {l}%)"


def _to_models(colors: List[ColorInfo]) -> List[ColorModel]:
    return [ColorModel(**color.to_dict()) for color in colors]


def _list_text(title: str, colors: List[ColorInfo]) -> str:
    lines = [f"{color.hex} - {color.name}" for color in colors]
    return "\n".join([title] + lines)


def _run_tool(operation: str, build: Callable[[], T], palette_type: Optional[str] = None) -> T:
    """
    Run a tool operation with request tracing, metrics and error mapping.

    Args:
        operation: Operation name used in logs and metric keys
        build: Callable producing the response
        palette_type: Optional palette variant recorded with metrics

    Returns:
        Whatever ``build`` returns

    Raises:
        HTTPException: 400 for unparseable color input, 500 for unexpected failures
    """
    request_id = generate_request_id()
    start_time = time.time()
    metrics = get_metrics()

    logger.debug(f"{operation} request {request_id} started", extra={
        "request_id": request_id,
        "palette_type": palette_type
    })

    try:
        response = build()

    except InvalidFormat as e:
        duration_ms = (time.time() - start_time) * 1000
        logger.warning(f"{operation} request {request_id} rejected", extra={
            "request_id": request_id,
            "error": str(e)
        })
        if config.METRICS_ENABLED:
            metrics.record_operation_error(operation, "invalid_format", duration_ms)
        raise HTTPException(status_code=400, detail=str(e))

    except HTTPException:
        # Re-raise HTTP exceptions as-is
        raise

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        logger.error(f"{operation} request {request_id} failed", extra={
            "request_id": request_id,
            "error": str(e),
            "error_time_ms": round(duration_ms, 2)
        })
        if config.METRICS_ENABLED:
            metrics.record_operation_error(operation, type(e).__name__, duration_ms)
        raise HTTPException(
            status_code=500,
            detail=f"Internal error during {operation}"
        )

    duration_ms = (time.time() - start_time) * 1000
    logger.info(f"{operation} request {request_id} completed", extra={
        "request_id": request_id,
        "palette_type": palette_type,
        "total_time_ms": round(duration_ms, 2)
    })
    if config.METRICS_ENABLED:
        metrics.record_operation_success(operation, duration_ms, palette_type)

    return response


def handle_color_info(request: ColorInfoRequest) -> PaletteResponse:
    """Describe a single color in every notation along with its name."""
    def build() -> PaletteResponse:
        color = parse_color(request.color)
        color = color.with_name(get_color_name(color))
        text = "\n".join([
            f"Color: {color.name}",
            format_hex(color),
            format_rgb(color),
            format_hsl(color),
        ])
        return PaletteResponse(colors=_to_models([color]), palette_type="single", text=text)

    return _run_tool("get_color_info", build, palette_type="single")


def handle_generate_palette(request: PaletteRequest) -> PaletteResponse:
    """
    Generate a named palette from a base color.

    Args:
        request: Base color, variant, optional monochromatic count and swatch flag

    Returns:
        PaletteResponse with the derived colors and, if requested, a PNG swatch
    """
    palette_type = request.type.value

    def build() -> PaletteResponse:
        base = parse_color(request.base_color)
        colors = name_colors(generate_palette(base, request.type, request.count))

        swatch = metadata = None
        if request.return_swatch:
            swatch = render_palette_swatch(colors, config.SWATCH_CHIP_SIZE, config.SWATCH_SPACING)
            metadata = create_swatch_metadata(colors, config.SWATCH_CHIP_SIZE, config.SWATCH_SPACING)

        return PaletteResponse(
            colors=_to_models(colors),
            palette_type=palette_type,
            text=_list_text(f"{palette_type} color palette:", colors),
            swatch_png_b64=swatch,
            swatch_metadata=metadata
        )

    return _run_tool("generate_palette", build, palette_type=palette_type)


def handle_random_colors(request: RandomColorsRequest) -> PaletteResponse:
    """Sample ``request.count`` random named colors."""
    def build() -> PaletteResponse:
        colors = name_colors(generate_random_color() for _ in range(request.count))
        return PaletteResponse(
            colors=_to_models(colors),
            palette_type="random",
            text=_list_text("Random colors:", colors)
        )

    return _run_tool("random_colors", build, palette_type="random")


def handle_convert_color(request: ConvertColorRequest) -> ConvertColorResponse:
    """Render a color in the requested notation, or all of them."""
    formatters = {
        "hex": [format_hex],
        "rgb": [format_rgb],
        "hsl": [format_hsl],
        "all": [format_hex, format_rgb, format_hsl],
    }

    def build() -> ConvertColorResponse:
        color = parse_color(request.color)
        color = color.with_name(get_color_name(color))
        text = "\n".join(formatter(color) for formatter in formatters[request.to])
        return ConvertColorResponse(
            color=ColorModel(**color.to_dict()),
            format=request.to,
            text=text
        )

    return _run_tool("convert_color", build)
