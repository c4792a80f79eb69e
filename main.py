from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from colorlab.api.v1 import router as v1_router
from colorlab.config import config
from colorlab.schemas import HealthResponse
from colorlab.services.colors import __version__
from colorlab.utils.logging import get_logger
from colorlab.utils.metrics import get_metrics

logger = get_logger()

app = FastAPI(
    title="ColorLab Backend",
    description="Color conversion, palette generation and naming API",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"]
)

app.include_router(v1_router)

logger.info("ColorLab backend initialized", extra={
    "version": __version__,
    "metrics_enabled": config.METRICS_ENABLED
})


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(ok=True, version=__version__, service="colorlab")


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "ColorLab Backend API",
        "version": __version__,
        "docs": "/docs"
    }


@app.get("/metrics")
def metrics_summary():
    """Get in-process request metrics."""
    if not config.METRICS_ENABLED:
        raise HTTPException(status_code=404, detail="Metrics disabled")
    return get_metrics().get_summary()
