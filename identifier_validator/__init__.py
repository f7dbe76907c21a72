"""Java identifier validator with naming-convention advisories."""

import structlog

from identifier_validator.logging_config import configure_library_logging
from identifier_validator.validators import (
    Advisory,
    AdvisoryCode,
    Category,
    ErrorCode,
    RESERVED_WORDS,
    ValidationEngine,
    ValidationFailure,
    ValidationResult,
    validate_basic,
    validate_class,
    validate_generic,
    validate_method,
    validate_package,
    validate_variable,
    validation_engine,
)

__version__ = "0.1.0"

__all__ = [
    "Advisory",
    "AdvisoryCode",
    "Category",
    "ErrorCode",
    "RESERVED_WORDS",
    "ValidationEngine",
    "ValidationFailure",
    "ValidationResult",
    "validate_basic",
    "validate_class",
    "validate_generic",
    "validate_method",
    "validate_package",
    "validate_variable",
    "validation_engine",
]

if not structlog.is_configured():
    configure_library_logging()
