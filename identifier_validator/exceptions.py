"""Exception hierarchy.

Identifier failures are ordinary results, not exceptions. These classes
cover caller mistakes only, such as asking for a category that does not
exist.
"""

from typing import Optional


class IdentifierValidatorError(Exception):
    """Base exception for all identifier-validator errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class UnknownCategoryError(IdentifierValidatorError, ValueError):
    """Raised when a category name or menu number matches no validator."""

    def __init__(self, category: object):
        super().__init__(f"Unknown identifier category: {category!r}", {"category": category})
        self.category = category
