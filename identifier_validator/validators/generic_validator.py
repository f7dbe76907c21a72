"""Generic Validator — plain identifier check with no style advisories."""

from identifier_validator.validators.base import BaseValidator
from identifier_validator.validators.models import Category, ValidationResult


class GenericIdentifierValidator(BaseValidator):

    @property
    def name(self) -> str:
        return "GenericIdentifierValidator"

    @property
    def category(self) -> Category:
        return Category.GENERIC

    def validate(self, text: str) -> ValidationResult:
        return self._basic(text)
