"""API response models."""

from pydantic import BaseModel
from datetime import datetime

from lens_selector import __version__


class ServiceInfoResponse(BaseModel):
    """Root endpoint payload."""

    name: str
    version: str
    description: str
    docs: str
    health: str
    lenses: str


class HealthResponse(BaseModel):
    """System health check response."""

    status: str = "OK"
    version: str = __version__
    timestamp: datetime
    uptime_seconds: float
    lenses_loaded: int
    lenses_folder: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    error: str
    message: str
    status_code: int
    path: str
    timestamp: datetime
