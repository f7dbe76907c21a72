"""Variable Validator — camelCase advisory for variable names.

Underscores are accepted without comment: constants and some local naming
styles use them conventionally.
"""

from identifier_validator.validators.base import BaseValidator
from identifier_validator.validators.models import AdvisoryCode, Category, ValidationResult


class VariableNameValidator(BaseValidator):

    @property
    def name(self) -> str:
        return "VariableNameValidator"

    @property
    def category(self) -> Category:
        return Category.VARIABLE

    def validate(self, text: str) -> ValidationResult:
        result = self._basic(text)
        if result.valid and not text[0].islower():
            return result.with_advisories([self._advisory(AdvisoryCode.UPPER_CASE_START)])
        return result
