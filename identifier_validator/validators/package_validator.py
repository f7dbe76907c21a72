"""Package Validator — dot-separated package names, checked segment by segment.

Splitting is strict: a leading, trailing, or doubled dot yields an empty
segment, and that segment fails like any other empty identifier.
"""

from identifier_validator.validators.base import BaseValidator
from identifier_validator.validators.basic import check_basic, make_failure
from identifier_validator.validators.models import (
    AdvisoryCode,
    Category,
    ErrorCode,
    ValidationResult,
)
from identifier_validator.validators.reference_data import (
    PACKAGE_SEGMENT_LABEL,
    PACKAGE_SEPARATOR,
)


class PackageNameValidator(BaseValidator):
    """Validates package names; fails fast on the first bad segment."""

    @property
    def name(self) -> str:
        return "PackageNameValidator"

    @property
    def category(self) -> Category:
        return Category.PACKAGE

    def validate(self, text: str) -> ValidationResult:
        if not text:
            return ValidationResult.rejected(
                text, self.category, make_failure(ErrorCode.EMPTY_IDENTIFIER, self.category.label)
            )

        segments = text.split(PACKAGE_SEPARATOR)

        # 1. Every segment must be a legal identifier, checked left to right
        for index, segment in enumerate(segments):
            failure = check_basic(segment, PACKAGE_SEGMENT_LABEL)
            if failure is not None:
                failure = failure.model_copy(update={"segment": segment, "segment_index": index})
                return ValidationResult.rejected(text, self.category, failure)

        # 2. Segments are conventionally all lowercase
        advisories = [
            self._advisory(AdvisoryCode.NOT_ALL_LOWERCASE, segment=segment, segment_index=index)
            for index, segment in enumerate(segments)
            if segment != segment.lower()
        ]

        return ValidationResult.success(text, self.category, advisories)
