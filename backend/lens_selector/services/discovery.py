"""Lens discovery — scans a folder for lens files, parses and validates each one.

Deterministic and stateless: every call re-reads the folder from disk, so
edits to the lens files are picked up on the next request without a restart.
Nothing is cached between calls.
"""

import json
import time
from pathlib import Path
from typing import Optional, Union

import structlog
from pydantic import BaseModel, Field, ValidationError

from lens_selector.models.lens import LensDocument
from lens_selector.validators import validate_lens

logger = structlog.get_logger()

LENS_FILE_SUFFIX = ".json"


class DiscoveryFailure(Exception):
    """The lens folder exists but could not be listed."""

    def __init__(self, directory: Union[str, Path], cause: BaseException):
        self.directory = str(directory)
        self.cause = cause
        super().__init__(f"Failed to list lenses folder '{self.directory}': {cause}")


class DiscoveryBatch(BaseModel):
    """Result of one discovery pass."""

    lenses: list[LensDocument] = Field(default_factory=list)
    validation_errors: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Defects keyed by filename, only for files that were rejected",
    )


def _is_lens_file(entry: Path) -> bool:
    return entry.name.endswith(LENS_FILE_SUFFIX) and not entry.is_dir()


def _load_lens_file(path: Path) -> tuple[Optional[LensDocument], list[str]]:
    """Read, parse and validate a single lens file.

    Returns:
        (lens, []) when the file holds a valid lens, (None, defects) otherwise
    """
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        return None, [f"failed to parse: {e}"]
    except OSError as e:
        return None, [f"failed to read: {e.strerror or e}"]

    try:
        candidate = json.loads(text)
    except (ValueError, RecursionError) as e:
        return None, [f"failed to parse: {e}"]

    result = validate_lens(candidate)
    if not result.is_valid:
        return None, result.errors

    try:
        return LensDocument.model_validate(candidate), []
    except ValidationError as e:
        return None, [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()]


def discover(directory: Union[str, Path]) -> DiscoveryBatch:
    """Discover every valid lens in a folder.

    A missing folder is not an error: it yields an empty batch. Files that
    cannot be read, parsed or validated are reported in `validation_errors`
    and never abort the pass.

    Args:
        directory: Folder holding one JSON lens per file (not recursive)

    Returns:
        DiscoveryBatch with valid lenses in filename order and per-file defects

    Raises:
        DiscoveryFailure: The folder exists but listing it failed
    """
    start_time = time.perf_counter()
    folder = Path(directory)

    if not folder.exists():
        logger.warning("lenses_folder_not_found", folder=str(folder))
        return DiscoveryBatch()

    try:
        entries = sorted(folder.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.error("lens_discovery_failed", folder=str(folder), error=str(e))
        raise DiscoveryFailure(folder, e) from e

    batch = DiscoveryBatch()

    for entry in entries:
        if not _is_lens_file(entry):
            continue

        lens, errors = _load_lens_file(entry)
        if lens is None:
            batch.validation_errors[entry.name] = errors
            logger.warning("lens_file_invalid", file=entry.name, errors=errors)
            continue

        batch.lenses.append(lens)

    logger.info(
        "lenses_discovered",
        folder=str(folder),
        valid=len(batch.lenses),
        invalid=len(batch.validation_errors),
        duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )

    return batch
