"""Health check endpoint."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from lens_selector.config import Settings, get_settings
from lens_selector.models.responses import HealthResponse
from lens_selector.services.discovery import DiscoveryBatch
from lens_selector.api.dependencies import get_discovery_batch

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
def health_check(
    batch: DiscoveryBatch = Depends(get_discovery_batch),
    settings: Settings = Depends(get_settings),
):
    """Service health with the number of lenses currently discoverable."""
    return HealthResponse(
        timestamp=datetime.now(timezone.utc),
        uptime_seconds=round(time.time() - _start_time, 2),
        lenses_loaded=len(batch.lenses),
        lenses_folder=settings.LENSES_FOLDER,
    )
