"""Validation models — the per-candidate outcome of checking a lens against its profile.

All validation is deterministic: same input → same output, no I/O.
"""

from pydantic import BaseModel, Field


class ValidationResult(BaseModel):
    """Outcome of validating one candidate document."""

    is_valid: bool
    errors: list[str] = Field(default_factory=list, description="Every defect found, in check order")

    @classmethod
    def build(cls, errors: list[str]) -> "ValidationResult":
        """Build a result from accumulated defects. Valid means no defects."""
        return cls(is_valid=len(errors) == 0, errors=list(errors))
