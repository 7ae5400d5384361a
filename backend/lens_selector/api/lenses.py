"""Lenses API — list lens names and fetch a lens by name."""

from typing import Any

from fastapi import APIRouter, Depends

import structlog

from lens_selector.models.responses import ErrorResponse
from lens_selector.services.discovery import DiscoveryBatch
from lens_selector.services.lens_service import list_names, lookup_by_name
from lens_selector.api.dependencies import get_discovery_batch

logger = structlog.get_logger()

router = APIRouter(prefix="/lenses")


class LensNotFoundError(LookupError):
    """No valid lens carries the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Lens '{name}' not found")


@router.get("", response_model=list[str])
def get_lens_names(batch: DiscoveryBatch = Depends(get_discovery_batch)):
    """Names of every currently valid lens, sorted."""
    return list_names(batch.lenses)


@router.get(
    "/{name}",
    response_model=dict[str, Any],
    responses={404: {"model": ErrorResponse}},
)
def get_lens(name: str, batch: DiscoveryBatch = Depends(get_discovery_batch)):
    """Full lens definition, including the embedded content payloads."""
    lens = lookup_by_name(batch.lenses, name)
    if lens is None:
        logger.info("lens_not_found", name=name)
        raise LensNotFoundError(name)

    return lens.to_json()
