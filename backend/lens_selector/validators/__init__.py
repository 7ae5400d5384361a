"""Lens Validator — deterministic profile checks for lens documents.

Usage:
    from lens_selector.validators import validate_lens

    result = validate_lens(json.loads(text))
    if not result.is_valid:
        # Report result.errors against the source file
"""

from lens_selector.validators.base import BaseValidator
from lens_selector.validators.lens_validator import LensValidator, lens_validator, validate_lens
from lens_selector.validators.models import ValidationResult

__all__ = [
    "BaseValidator",
    "LensValidator",
    "lens_validator",
    "validate_lens",
    "ValidationResult",
]
