"""Reference data — Java reserved words, identifier character classes, message text.

This is the fixed language knowledge that makes validation deterministic.
Nothing here is mutated after import.
"""

from identifier_validator.validators.models import AdvisoryCode, Category, ErrorCode

# ──────────────────────────────────────────────────────────────────────
# RESERVED WORDS (keywords plus the literals true/false/null)
# ──────────────────────────────────────────────────────────────────────

JAVA_KEYWORDS: frozenset[str] = frozenset({
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new", "package",
    "private", "protected", "public", "return", "short", "static", "strictfp",
    "super", "switch", "synchronized", "this", "throw", "throws", "transient",
    "try", "void", "volatile", "while",
})

JAVA_LITERALS: frozenset[str] = frozenset({"true", "false", "null"})

RESERVED_WORDS: frozenset[str] = JAVA_KEYWORDS | JAVA_LITERALS


# ──────────────────────────────────────────────────────────────────────
# IDENTIFIER CHARACTER CLASSES (Unicode general categories)
# ──────────────────────────────────────────────────────────────────────

# Letters, letter numbers, currency symbols ($) and connector punctuation (_)
IDENTIFIER_START_CATEGORIES: frozenset[str] = frozenset({
    "Lu", "Ll", "Lt", "Lm", "Lo", "Nl",
    "Sc",
    "Pc",
})

# Everything that may start an identifier, plus digits and combining marks
IDENTIFIER_PART_CATEGORIES: frozenset[str] = IDENTIFIER_START_CATEGORIES | frozenset({
    "Nd",
    "Mn", "Mc",
})

# Control characters that are ignorable inside an identifier (format characters, Cf, are too)
IGNORABLE_CONTROL_RANGES: tuple[tuple[int, int], ...] = (
    (0x00, 0x08),
    (0x0E, 0x1B),
    (0x7F, 0x9F),
)

PACKAGE_SEPARATOR = "."
PACKAGE_SEGMENT_LABEL = "Package segment"


# ──────────────────────────────────────────────────────────────────────
# MESSAGES
# ──────────────────────────────────────────────────────────────────────

FAILURE_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.EMPTY_IDENTIFIER: "{label} cannot be empty",
    ErrorCode.INVALID_START_CHARACTER: (
        "{label} must start with a letter, underscore (_), or dollar sign ($)"
    ),
    ErrorCode.INVALID_CONTINUATION_CHARACTER: (
        "{label} can only contain letters, numbers, underscores (_), or dollar signs ($)"
    ),
    ErrorCode.RESERVED_WORD: "{label} cannot be a Java keyword",
}

# Keyed by (category, code); the same code reads differently per category
ADVISORY_MESSAGES: dict[tuple[Category, AdvisoryCode], str] = {
    (Category.CLASS, AdvisoryCode.LOWER_CASE_START): (
        "Class names should start with an uppercase letter (PascalCase convention)"
    ),
    (Category.CLASS, AdvisoryCode.CONTAINS_UNDERSCORE): (
        "Class names typically don't contain underscores"
    ),
    (Category.METHOD, AdvisoryCode.UPPER_CASE_START): (
        "Method names should start with a lowercase letter (camelCase convention)"
    ),
    (Category.METHOD, AdvisoryCode.CONTAINS_UNDERSCORE): (
        "Method names typically don't contain underscores"
    ),
    (Category.VARIABLE, AdvisoryCode.UPPER_CASE_START): (
        "Variable names should start with a lowercase letter (camelCase convention)"
    ),
    (Category.PACKAGE, AdvisoryCode.NOT_ALL_LOWERCASE): "Package segments should be lowercase",
}
