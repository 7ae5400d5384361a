"""Request-scoped dependencies shared by the routers."""

from fastapi import Depends

import structlog

from lens_selector.config import Settings, get_settings
from lens_selector.services.discovery import DiscoveryBatch, DiscoveryFailure, discover

logger = structlog.get_logger()


def get_discovery_batch(settings: Settings = Depends(get_settings)) -> DiscoveryBatch:
    """Re-scan the lenses folder for this request (live reload).

    A folder that cannot be listed degrades to an empty batch so the API keeps
    answering; the failure is logged.
    """
    try:
        return discover(settings.LENSES_FOLDER)
    except DiscoveryFailure as e:
        logger.error("lens_discovery_degraded", folder=e.directory, error=str(e.cause))
        return DiscoveryBatch()
