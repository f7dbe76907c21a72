"""Validation models — categories, error and advisory codes, and the result type.

Validation failures are returned as values, never raised: every operation
produces a ValidationResult that either carries a single failure or zero or
more advisories.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, computed_field


class Category(str, Enum):
    """Language-element categories an identifier can be checked against."""

    CLASS = "class"
    METHOD = "method"
    VARIABLE = "variable"
    PACKAGE = "package"
    GENERIC = "generic"

    @property
    def label(self) -> str:
        """Display label used as the subject of failure messages."""
        return CATEGORY_LABELS[self]

    @property
    def kind(self) -> str:
        """Lowercase noun used in success messages ("a valid class name")."""
        return CATEGORY_KINDS[self]

    @property
    def number(self) -> int:
        """Position in the interactive menu."""
        return list(Category).index(self) + 1

    @classmethod
    def parse(cls, value: "Category | str | int") -> "Category":
        """Resolve a category from its enum member, value, name, or menu number.

        Raises:
            ValueError: if nothing matches
        """
        if isinstance(value, Category):
            return value
        text = str(value).strip().lower()
        for member in cls:
            if text in (member.value, member.name.lower(), str(member.number)):
                return member
        raise ValueError(f"Unknown category '{value}'")


CATEGORY_LABELS = {
    Category.CLASS: "Class name",
    Category.METHOD: "Method name",
    Category.VARIABLE: "Variable name",
    Category.PACKAGE: "Package name",
    Category.GENERIC: "Identifier",
}

CATEGORY_KINDS = {
    Category.CLASS: "class name",
    Category.METHOD: "method name",
    Category.VARIABLE: "variable name",
    Category.PACKAGE: "package name",
    Category.GENERIC: "generic identifier",
}


class ErrorCode(str, Enum):
    """Hard failures. Only validate_basic (and the empty package check) produce these."""

    EMPTY_IDENTIFIER = "EMPTY_IDENTIFIER"
    INVALID_START_CHARACTER = "INVALID_START_CHARACTER"
    INVALID_CONTINUATION_CHARACTER = "INVALID_CONTINUATION_CHARACTER"
    RESERVED_WORD = "RESERVED_WORD"


class AdvisoryCode(str, Enum):
    """Naming-convention advisories attached to successful results."""

    LOWER_CASE_START = "LOWER_CASE_START"      # class name not PascalCase
    UPPER_CASE_START = "UPPER_CASE_START"      # method/variable not camelCase
    CONTAINS_UNDERSCORE = "CONTAINS_UNDERSCORE"
    NOT_ALL_LOWERCASE = "NOT_ALL_LOWERCASE"    # package segment


class ValidationFailure(BaseModel):
    """The single reason an identifier was rejected."""

    code: ErrorCode
    message: str
    position: Optional[int] = None        # Index of the offending character
    character: Optional[str] = None       # The offending character itself
    segment: Optional[str] = None         # Package segment that failed
    segment_index: Optional[int] = None

    model_config = {"frozen": True}


class Advisory(BaseModel):
    """A non-fatal style observation."""

    code: AdvisoryCode
    message: str
    segment: Optional[str] = None
    segment_index: Optional[int] = None

    model_config = {"frozen": True}


class ValidationResult(BaseModel):
    """Outcome of one validation call.

    Invalid results carry a failure and never any advisories.
    """

    identifier: str
    category: Category
    failure: Optional[ValidationFailure] = None
    advisories: list[Advisory] = []

    model_config = {"frozen": True}

    @computed_field
    @property
    def valid(self) -> bool:
        return self.failure is None

    @property
    def error_code(self) -> Optional[ErrorCode]:
        return self.failure.code if self.failure else None

    @property
    def advisory_codes(self) -> list[AdvisoryCode]:
        return [a.code for a in self.advisories]

    @classmethod
    def success(
        cls,
        identifier: str,
        category: Category,
        advisories: Optional[list[Advisory]] = None,
    ) -> "ValidationResult":
        return cls(identifier=identifier, category=category, advisories=advisories or [])

    @classmethod
    def rejected(
        cls,
        identifier: str,
        category: Category,
        failure: ValidationFailure,
    ) -> "ValidationResult":
        return cls(identifier=identifier, category=category, failure=failure)

    def with_advisories(self, advisories: list[Advisory]) -> "ValidationResult":
        """Return a copy with extra advisories appended. Invalid results are returned as-is."""
        if not self.valid or not advisories:
            return self
        return self.model_copy(update={"advisories": [*self.advisories, *advisories]})
