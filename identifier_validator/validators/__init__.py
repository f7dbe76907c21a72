"""Identifier Validator — deterministic validation of Java identifiers by category.

Usage:
    from identifier_validator.validators import validate_class

    result = validate_class("MyClass")
    if result.valid:
        for advisory in result.advisories:
            print(advisory.message)
"""

from identifier_validator.validators.basic import validate_basic
from identifier_validator.validators.base import BaseValidator
from identifier_validator.validators.engine import (
    ValidationEngine,
    validation_engine,
    validate_class,
    validate_generic,
    validate_method,
    validate_package,
    validate_variable,
)
from identifier_validator.validators.models import (
    Advisory,
    AdvisoryCode,
    Category,
    ErrorCode,
    ValidationFailure,
    ValidationResult,
)
from identifier_validator.validators.reference_data import RESERVED_WORDS

__all__ = [
    "BaseValidator",
    "ValidationEngine",
    "validation_engine",
    "validate_basic",
    "validate_class",
    "validate_method",
    "validate_variable",
    "validate_package",
    "validate_generic",
    "Advisory",
    "AdvisoryCode",
    "Category",
    "ErrorCode",
    "ValidationFailure",
    "ValidationResult",
    "RESERVED_WORDS",
]
