"""Class Validator — PascalCase and underscore advisories for class names."""

from identifier_validator.validators.base import BaseValidator
from identifier_validator.validators.models import AdvisoryCode, Category, ValidationResult


class ClassNameValidator(BaseValidator):
    """Validates class names and flags non-PascalCase style."""

    @property
    def name(self) -> str:
        return "ClassNameValidator"

    @property
    def category(self) -> Category:
        return Category.CLASS

    def validate(self, text: str) -> ValidationResult:
        result = self._basic(text)
        if not result.valid:
            return result

        advisories = []

        # 1. PascalCase: first character should be uppercase
        if not text[0].isupper():
            advisories.append(self._advisory(AdvisoryCode.LOWER_CASE_START))

        # 2. Class names are not snake_case
        if "_" in text:
            advisories.append(self._advisory(AdvisoryCode.CONTAINS_UNDERSCORE))

        return result.with_advisories(advisories)
