"""Base validator — abstract class implementing the Strategy Pattern.

Each category validator is a standalone, independently testable unit.
New categories are added without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Optional

from identifier_validator.validators.basic import validate_basic
from identifier_validator.validators.models import (
    Advisory,
    AdvisoryCode,
    Category,
    ValidationResult,
)
from identifier_validator.validators.reference_data import ADVISORY_MESSAGES


class BaseValidator(ABC):
    """Abstract base for all category validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() never raises for any string input
        - failures come from validate_basic and are propagated unchanged
        - advisories are only ever attached to valid results
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @property
    @abstractmethod
    def category(self) -> Category:
        ...

    @abstractmethod
    def validate(self, text: str) -> ValidationResult:
        """Validate `text` for this validator's category.

        Args:
            text: Candidate identifier

        Returns:
            ValidationResult carrying either a failure or advisories
        """
        ...

    # ── Helper Methods ──

    def _basic(self, text: str) -> ValidationResult:
        """Run the basic check labelled for this category."""
        return validate_basic(text, self.category.label, self.category)

    def _advisory(
        self,
        code: AdvisoryCode,
        segment: Optional[str] = None,
        segment_index: Optional[int] = None,
    ) -> Advisory:
        """Convenience method to create an Advisory with this category's wording."""
        return Advisory(
            code=code,
            message=ADVISORY_MESSAGES[(self.category, code)],
            segment=segment,
            segment_index=segment_index,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(category={self.category.value!r})"
