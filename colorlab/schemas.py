"""
ColorLab API Schemas
Pydantic models for color tool request/response validation.
"""
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, Field

from colorlab.config import Config
from colorlab.services.colors.palettes import PaletteType


class HealthResponse(BaseModel):
    """Health check response."""
    ok: bool = Field(True, description="Service health status")
    version: str = Field(..., description="Service version")
    service: str = Field("colorlab", description="Service name")


class ErrorResponse(BaseModel):
    """Error response."""
    detail: str = Field(..., description="Error message")


# ============================================================================
# COLOR WIRE CONTRACT
# ============================================================================

class RGBModel(BaseModel):
    """RGB channels."""
    r: int = Field(..., ge=0, le=255)
    g: int = Field(..., ge=0, le=255)
    b: int = Field(..., ge=0, le=255)


class HSLModel(BaseModel):
    """HSL values: hue in degrees, saturation and lightness in percent."""
    h: int = Field(..., ge=0, lt=360, description="Hue [0, 360)")
    s: int = Field(..., ge=0, le=100, description="Saturation [0, 100]")
    l: int = Field(..., ge=0, le=100, description="Lightness [0, 100]")


class ColorModel(BaseModel):
    """A color in all three representations."""
    hex: str = Field(
        ...,
        pattern=r"^#[0-9A-F]{6}$",
        description="Hex color code in format #RRGGBB"
    )
    rgb: RGBModel
    hsl: HSLModel
    name: Optional[str] = Field(None, description="Approximate human-readable name")


# ============================================================================
# TOOL REQUESTS
# ============================================================================

class ColorInfoRequest(BaseModel):
    """Request for details about a single color."""
    color: str = Field(
        ...,
        min_length=1,
        description="Color value in HEX (#RRGGBB), RGB (rgb(r,g,b)), or HSL (hsl(h,s%,l%)) format"
    )


class PaletteRequest(BaseModel):
    """Request for a generated palette."""
    base_color: str = Field(..., min_length=1, description="Base color in HEX, RGB, or HSL format")
    type: PaletteType = Field(..., description="Type of palette to generate")
    count: Optional[int] = Field(
        None,
        ge=Config.MONOCHROMATIC_MIN_COUNT,
        le=Config.MONOCHROMATIC_MAX_COUNT,
        description="Number of colors (for monochromatic palette only, 3-10)"
    )
    return_swatch: bool = Field(False, description="Include a PNG swatch strip of the palette")


class RandomColorsRequest(BaseModel):
    """Request for random colors."""
    count: int = Field(
        Config.RANDOM_DEFAULT_COUNT,
        ge=Config.RANDOM_MIN_COUNT,
        le=Config.RANDOM_MAX_COUNT,
        description="Number of random colors to generate (1-10)"
    )


class ConvertColorRequest(BaseModel):
    """Request to convert a color into another notation."""
    color: str = Field(..., min_length=1, description="Color value in any format (HEX, RGB, or HSL)")
    to: Literal["hex", "rgb", "hsl", "all"] = Field("all", description="Target format for conversion")


# ============================================================================
# TOOL RESPONSES
# ============================================================================

class PaletteResponse(BaseModel):
    """Colors produced by a tool together with a plain-text rendering."""
    success: bool = True
    colors: List[ColorModel]
    palette_type: str = Field(..., description="single, random, or a palette variant")
    text: str = Field(..., description="Plain-text summary of the colors")
    swatch_png_b64: Optional[str] = Field(None, description="Base64-encoded PNG strip of the colors")
    swatch_metadata: Optional[Dict[str, Any]] = Field(None, description="Layout of the swatch strip and its chip colors")


class ConvertColorResponse(BaseModel):
    """Result of a color conversion."""
    success: bool = True
    color: ColorModel
    format: str = Field(..., description="Requested target format")
    text: str = Field(..., description="Color rendered in the requested notation")


class PaletteTypeInfo(BaseModel):
    """A palette variant and its generation rule."""
    type: str
    rule: str
