"""Lens Validator — checks a parsed document against the lens (FHIR Library) profile."""

from typing import Any

from lens_selector.validators.base import BaseValidator
from lens_selector.validators.models import ValidationResult

# Required resource type literal
LENS_RESOURCE_TYPE = "Library"

# Allowed publication statuses
VALID_STATUSES = ("draft", "active", "retired", "unknown")


class LensValidator(BaseValidator):
    """Validates the structural integrity of a lens document.

    Only the top-level type check short-circuits. Every other rule is
    evaluated so the caller gets the complete defect list in one pass.
    """

    @property
    def name(self) -> str:
        return "LensValidator"

    def validate(self, candidate: Any) -> ValidationResult:
        if not self._is_object(candidate):
            return ValidationResult.build(["not a valid object"])

        errors: list[str] = []

        # 1. Resource type
        if candidate.get("resourceType") != LENS_RESOURCE_TYPE:
            errors.append(f"resourceType must be '{LENS_RESOURCE_TYPE}'")

        # 2. Identity fields
        if not self._is_non_empty_string(candidate.get("name")):
            errors.append("name is required and must be a non-empty string")
        if not self._is_non_empty_string(candidate.get("id")):
            errors.append("id is required and must be a non-empty string")

        # 3. Status (optional)
        if "status" in candidate and candidate["status"] not in VALID_STATUSES:
            errors.append(
                f"status '{candidate['status']}' is invalid, must be one of: {', '.join(VALID_STATUSES)}"
            )

        # 4. Content must be a non-empty array of items carrying string data
        content = candidate.get("content")
        if not self._is_array(content) or len(content) == 0:
            errors.append("content is required and must be a non-empty array")
        else:
            for i, item in enumerate(content):
                if not self._is_object(item) or not isinstance(item.get("data"), str):
                    errors.append(f"content[{i}].data is required and must be a string")

        # 5. Extension (optional)
        if "extension" in candidate and not self._is_array(candidate["extension"]):
            errors.append("extension must be an array")

        # 6. Type
        if candidate.get("type") is None:
            errors.append("type is required")

        return ValidationResult.build(errors)


# Module-level singleton
lens_validator = LensValidator()


def validate_lens(candidate: Any) -> ValidationResult:
    """Validate one parsed value against the lens profile. Never raises."""
    return lens_validator.validate(candidate)
