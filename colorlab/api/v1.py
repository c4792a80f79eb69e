"""
ColorLab v1 API Routes
Implements the /v1/colors tool endpoints.
"""
from typing import List

from fastapi import APIRouter

from colorlab.schemas import (
    ColorInfoRequest, ConvertColorRequest, ConvertColorResponse, ErrorResponse,
    PaletteRequest, PaletteResponse, PaletteTypeInfo, RandomColorsRequest
)
from colorlab.services.colors.palettes import get_palette_types_info
from colorlab.services.colors.tools_api import (
    handle_color_info, handle_convert_color, handle_generate_palette, handle_random_colors
)

router = APIRouter(prefix="/v1/colors", tags=["Colors"])

# Error bodies for unparseable color text and unexpected failures
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Color text matches no supported notation"},
    500: {"model": ErrorResponse, "description": "Internal error"},
}


@router.post("/info",
             response_model=PaletteResponse,
             responses=ERROR_RESPONSES,
             summary="Color Info",
             description="Get HEX, RGB, HSL values and an approximate name for a color")
def get_color_info(body: ColorInfoRequest) -> PaletteResponse:
    return handle_color_info(body)


@router.post("/palette",
             response_model=PaletteResponse,
             responses=ERROR_RESPONSES,
             summary="Generate Palette",
             description="Generate a color palette based on a base color and palette type")
def generate_palette(body: PaletteRequest) -> PaletteResponse:
    """
    Palette types:

    - **complementary**: base color and its +180° complement
    - **analogous**: hues at -30°, 0°, +30°
    - **triadic**: hues at 0°, 120°, 240°
    - **tetradic**: hues at 0°, 90°, 180°, 270°
    - **monochromatic**: `count` lightness steps from 10% to 90%
    """
    return handle_generate_palette(body)


@router.post("/random",
             response_model=PaletteResponse,
             responses={500: ERROR_RESPONSES[500]},
             summary="Random Colors",
             description="Generate random colors")
def random_colors(body: RandomColorsRequest) -> PaletteResponse:
    return handle_random_colors(body)


@router.post("/convert",
             response_model=ConvertColorResponse,
             responses=ERROR_RESPONSES,
             summary="Convert Color",
             description="Convert a color between different formats (HEX, RGB, HSL)")
def convert_color(body: ConvertColorRequest) -> ConvertColorResponse:
    return handle_convert_color(body)


@router.get("/palette-types", response_model=List[PaletteTypeInfo])
def palette_types() -> List[PaletteTypeInfo]:
    """List supported palette variants and their generation rules."""
    return [PaletteTypeInfo(**info) for info in get_palette_types_info()]
