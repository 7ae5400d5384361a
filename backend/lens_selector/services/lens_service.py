"""Lens lookups over a discovered batch. Pure functions, no I/O."""

from typing import Iterable, Optional

from lens_selector.models.lens import LensDocument


def lookup_by_name(lenses: Iterable[LensDocument], name: str) -> Optional[LensDocument]:
    """Return the first lens named `name`, or None.

    Names are not deduplicated, so when several files share a name the one
    listed first wins.
    """
    return next((lens for lens in lenses if lens.name == name), None)


def list_names(lenses: Iterable[LensDocument]) -> list[str]:
    """All lens names, sorted lexicographically."""
    return sorted(lens.name for lens in lenses)
