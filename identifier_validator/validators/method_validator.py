"""Method Validator — camelCase and underscore advisories for method names."""

from identifier_validator.validators.base import BaseValidator
from identifier_validator.validators.models import AdvisoryCode, Category, ValidationResult


class MethodNameValidator(BaseValidator):
    """Validates method names and flags non-camelCase style."""

    @property
    def name(self) -> str:
        return "MethodNameValidator"

    @property
    def category(self) -> Category:
        return Category.METHOD

    def validate(self, text: str) -> ValidationResult:
        result = self._basic(text)
        if not result.valid:
            return result

        advisories = []
        if not text[0].islower():
            advisories.append(self._advisory(AdvisoryCode.UPPER_CASE_START))
        if "_" in text:
            advisories.append(self._advisory(AdvisoryCode.CONTAINS_UNDERSCORE))

        return result.with_advisories(advisories)
