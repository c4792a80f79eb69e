"""
ColorLab Configuration
Manages environment variables and defaults for the color service.
"""
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Configuration class for ColorLab services."""

    # Logging
    LOG_LEVEL: str = os.environ.get("COLORLAB_LOG_LEVEL", "INFO")

    # CORS settings
    ALLOWED_ORIGINS: str = os.environ.get(
        "COLORLAB_ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:5173"
    )

    # Observability
    METRICS_ENABLED: bool = bool(int(os.environ.get("COLORLAB_METRICS_ENABLED", "1")))

    # Swatch rendering
    SWATCH_CHIP_SIZE: int = int(os.environ.get("COLORLAB_SWATCH_CHIP_SIZE", "40"))
    SWATCH_SPACING: int = int(os.environ.get("COLORLAB_SWATCH_SPACING", "2"))

    # Request bounds
    MONOCHROMATIC_MIN_COUNT: int = 3
    MONOCHROMATIC_MAX_COUNT: int = 10
    RANDOM_MIN_COUNT: int = 1
    RANDOM_MAX_COUNT: int = 10
    RANDOM_DEFAULT_COUNT: int = 5

    @classmethod
    def allowed_origins(cls) -> List[str]:
        """Parse the comma-separated CORS origin list."""
        return [origin.strip() for origin in cls.ALLOWED_ORIGINS.split(",") if origin.strip()]


# Global config instance
config = Config()
