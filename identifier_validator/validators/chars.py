"""Identifier character classes.

Java identifier grammar, by Unicode general category:

    - Start: letters (Lu Ll Lt Lm Lo), letter numbers (Nl), currency
      symbols (Sc, e.g. '$'), connector punctuation (Pc, e.g. '_')
    - Part: any start character, decimal digits (Nd), combining marks
      (Mn Mc), and ignorable characters (Cf plus a few control ranges)

All functions here are pure and safe for concurrent use.
"""

import unicodedata

from identifier_validator.validators.reference_data import (
    IDENTIFIER_PART_CATEGORIES,
    IDENTIFIER_START_CATEGORIES,
    IGNORABLE_CONTROL_RANGES,
)

__all__ = [
    "is_identifier_ignorable",
    "is_identifier_part",
    "is_identifier_start",
    "first_invalid_part",
]


def is_identifier_start(ch: str) -> bool:
    """Check if a character may begin an identifier.

    Example:
        >>> is_identifier_start('a')
        True
        >>> is_identifier_start('$')
        True
        >>> is_identifier_start('1')
        False
    """
    return len(ch) == 1 and unicodedata.category(ch) in IDENTIFIER_START_CATEGORIES


def is_identifier_ignorable(ch: str) -> bool:
    if len(ch) != 1:
        return False
    code = ord(ch)
    if any(lo <= code <= hi for lo, hi in IGNORABLE_CONTROL_RANGES):
        return True
    return unicodedata.category(ch) == "Cf"


def is_identifier_part(ch: str) -> bool:
    """Check if a character may appear after the first position.

    Example:
        >>> is_identifier_part('7')
        True
        >>> is_identifier_part('-')
        False
    """
    if len(ch) != 1:
        return False
    return unicodedata.category(ch) in IDENTIFIER_PART_CATEGORIES or is_identifier_ignorable(ch)


def first_invalid_part(text: str) -> int:
    """Index of the first non-part character after position 0, or -1 if none."""
    for i in range(1, len(text)):
        if not is_identifier_part(text[i]):
            return i
    return -1
