"""Base validator — abstract class for profile validators.

Each validator is a standalone, independently testable unit.
"""

from abc import ABC, abstractmethod
from typing import Any

from lens_selector.validators.models import ValidationResult


class BaseValidator(ABC):
    """Abstract base for document validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() never raises, whatever the candidate looks like
        - validate() reports every defect, not just the first one
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @abstractmethod
    def validate(self, candidate: Any) -> ValidationResult:
        """Check a parsed JSON value against the profile.

        Args:
            candidate: Any value produced by json.loads

        Returns:
            ValidationResult with is_valid and the full defect list
        """
        ...

    # ── Helper Methods ──

    @staticmethod
    def _is_non_empty_string(value: Any) -> bool:
        return isinstance(value, str) and value != ""

    @staticmethod
    def _is_array(value: Any) -> bool:
        """JSON arrays decode to lists."""
        return isinstance(value, list)

    @staticmethod
    def _is_object(value: Any) -> bool:
        """JSON objects decode to dicts."""
        return isinstance(value, dict)
