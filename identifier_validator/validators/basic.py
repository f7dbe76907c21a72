"""Basic identifier check — the sole source of hard validation failures.

Checks run in a fixed order and the first one that fails wins:

    1. empty text
    2. first character is not an identifier start
    3. a later character is not an identifier part
    4. exact (case-sensitive) reserved word
"""

from typing import Optional

from identifier_validator.validators.chars import first_invalid_part, is_identifier_start
from identifier_validator.validators.models import (
    Category,
    ErrorCode,
    ValidationFailure,
    ValidationResult,
)
from identifier_validator.validators.reference_data import FAILURE_MESSAGES, RESERVED_WORDS


def make_failure(
    code: ErrorCode,
    label: str,
    position: Optional[int] = None,
    character: Optional[str] = None,
) -> ValidationFailure:
    """Build a ValidationFailure with its standard message for the given label."""
    return ValidationFailure(
        code=code,
        message=FAILURE_MESSAGES[code].format(label=label),
        position=position,
        character=character,
    )


def check_basic(text: str, label: str) -> Optional[ValidationFailure]:
    """Return the first failure for `text`, or None when it is a legal identifier."""
    if not text:
        return make_failure(ErrorCode.EMPTY_IDENTIFIER, label)

    if not is_identifier_start(text[0]):
        return make_failure(ErrorCode.INVALID_START_CHARACTER, label, position=0, character=text[0])

    bad = first_invalid_part(text)
    if bad >= 0:
        return make_failure(
            ErrorCode.INVALID_CONTINUATION_CHARACTER, label, position=bad, character=text[bad]
        )

    if text in RESERVED_WORDS:
        return make_failure(ErrorCode.RESERVED_WORD, label)

    return None


def validate_basic(
    text: str,
    label: str,
    category: Category = Category.GENERIC,
) -> ValidationResult:
    """Validate `text` as a plain identifier.

    Args:
        text: Candidate identifier, possibly empty
        label: Display label used as the subject of the failure message
        category: Category recorded on the result

    Returns:
        Valid result with no advisories, or an invalid result with one failure
    """
    failure = check_basic(text, label)
    if failure is not None:
        return ValidationResult.rejected(text, category, failure)
    return ValidationResult.success(text, category)
