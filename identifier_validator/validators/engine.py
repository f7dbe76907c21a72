"""Validation Engine — dispatches a category request to its validator and logs the run.

This is the main entry point for callers that pick the category at runtime
(the interactive shell, the command line).

Usage:
    engine = ValidationEngine()
    result = engine.validate(Category.CLASS, "MyClass")
    if not result.valid:
        print(result.failure.message)
"""

import time
from typing import Iterable, Optional, Union

import structlog

from identifier_validator.exceptions import UnknownCategoryError
from identifier_validator.validators.base import BaseValidator
from identifier_validator.validators.models import Category, ValidationResult

# Import all validators
from identifier_validator.validators.class_validator import ClassNameValidator
from identifier_validator.validators.method_validator import MethodNameValidator
from identifier_validator.validators.variable_validator import VariableNameValidator
from identifier_validator.validators.package_validator import PackageNameValidator
from identifier_validator.validators.generic_validator import GenericIdentifierValidator

logger = structlog.get_logger()

CategoryLike = Union[Category, str, int]


class ValidationEngine:
    """Routes each request to the validator registered for its category.

    Design principles:
        - Deterministic: same input → same output
        - Stateless per call: validators hold no per-request state
        - Extensible: register a validator to replace a category's rules
        - Observable: logs every validation run with timing
    """

    def __init__(self, validators: Optional[list[BaseValidator]] = None):
        """Initialize with default validators or custom list.

        Args:
            validators: Optional list of validators. If None, uses all defaults.
        """
        self.validators: dict[Category, BaseValidator] = {}
        for validator in validators or self._default_validators():
            self.register_validator(validator)

    @staticmethod
    def _default_validators() -> list[BaseValidator]:
        """Create the default validators, one per category in menu order."""
        return [
            ClassNameValidator(),
            MethodNameValidator(),
            VariableNameValidator(),
            PackageNameValidator(),
            GenericIdentifierValidator(),
        ]

    def resolve(self, category: CategoryLike) -> BaseValidator:
        """Find the validator for a category, its value, or its menu number.

        Raises:
            UnknownCategoryError: if no registered validator matches
        """
        try:
            resolved = Category.parse(category)
        except ValueError:
            raise UnknownCategoryError(category) from None
        validator = self.validators.get(resolved)
        if validator is None:
            raise UnknownCategoryError(category)
        return validator

    def validate(self, category: CategoryLike, text: str) -> ValidationResult:
        """Validate `text` under `category` and return the result.

        Args:
            category: Category member, value ("class"), or menu number ("1")
            text: Candidate identifier

        Returns:
            ValidationResult from the category's validator
        """
        validator = self.resolve(category)

        start_time = time.perf_counter()
        result = validator.validate(text)
        duration = (time.perf_counter() - start_time) * 1000

        logger.debug(
            "validation_complete",
            validator=validator.name,
            category=validator.category.value,
            valid=result.valid,
            error_code=result.error_code.value if result.error_code else None,
            advisories=len(result.advisories),
            duration_ms=round(duration, 3),
        )

        return result

    def validate_many(self, category: CategoryLike, texts: Iterable[str]) -> list[ValidationResult]:
        """Validate several identifiers under one category, preserving input order."""
        validator = self.resolve(category)
        return [self.validate(validator.category, text) for text in texts]

    def register_validator(self, validator: BaseValidator) -> None:
        """Add a validator, replacing any existing one for the same category."""
        previous = self.validators.get(validator.category)
        self.validators[validator.category] = validator
        if previous is not None and previous is not validator:
            logger.info(
                "validator_replaced",
                category=validator.category.value,
                previous=previous.name,
                current=validator.name,
            )

    @property
    def categories(self) -> list[Category]:
        """Registered categories in menu order."""
        return [c for c in Category if c in self.validators]


# Module-level singleton
validation_engine = ValidationEngine()


# ── Category entry points ──

def validate_class(text: str) -> ValidationResult:
    return validation_engine.validate(Category.CLASS, text)


def validate_method(text: str) -> ValidationResult:
    return validation_engine.validate(Category.METHOD, text)


def validate_variable(text: str) -> ValidationResult:
    return validation_engine.validate(Category.VARIABLE, text)


def validate_package(text: str) -> ValidationResult:
    return validation_engine.validate(Category.PACKAGE, text)


def validate_generic(text: str) -> ValidationResult:
    return validation_engine.validate(Category.GENERIC, text)
