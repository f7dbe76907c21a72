"""
Unit tests for the five category entry points.
"""

import pytest

from identifier_validator.validators import (
    AdvisoryCode,
    Category,
    ErrorCode,
    validate_class,
    validate_generic,
    validate_method,
    validate_package,
    validate_variable,
)

ENTRY_POINTS = [validate_class, validate_method, validate_variable, validate_package, validate_generic]


class TestClassNames:
    """Test cases for validate_class."""

    def test_pascal_case_has_no_advisories(self):
        result = validate_class("Foo")
        assert result.valid
        assert result.advisories == []
        assert result.category == Category.CLASS

    def test_lowercase_start(self):
        result = validate_class("foo")
        assert result.valid
        assert result.advisory_codes == [AdvisoryCode.LOWER_CASE_START]
        assert result.advisories[0].message == (
            "Class names should start with an uppercase letter (PascalCase convention)"
        )

    def test_underscore_with_uppercase_start(self):
        result = validate_class("My_Class")
        assert result.advisory_codes == [AdvisoryCode.CONTAINS_UNDERSCORE]
        assert result.advisories[0].message == "Class names typically don't contain underscores"

    def test_both_advisories_in_order(self):
        result = validate_class("_Foo")
        assert result.advisory_codes == [
            AdvisoryCode.LOWER_CASE_START,
            AdvisoryCode.CONTAINS_UNDERSCORE,
        ]

    def test_dollar_start_is_not_uppercase(self):
        assert validate_class("$Proxy").advisory_codes == [AdvisoryCode.LOWER_CASE_START]

    def test_failure_uses_class_label(self):
        result = validate_class("9Lives")
        assert result.error_code == ErrorCode.INVALID_START_CHARACTER
        assert result.failure.message.startswith("Class name ")
        assert result.advisories == []

    def test_reserved_word(self):
        result = validate_class("class")
        assert result.error_code == ErrorCode.RESERVED_WORD
        assert result.failure.message == "Class name cannot be a Java keyword"


class TestMethodNames:
    """Test cases for validate_method."""

    def test_camel_case_has_no_advisories(self):
        result = validate_method("doWork")
        assert result.valid
        assert result.advisories == []

    def test_uppercase_start(self):
        result = validate_method("DoWork")
        assert result.advisory_codes == [AdvisoryCode.UPPER_CASE_START]
        assert result.advisories[0].message == (
            "Method names should start with a lowercase letter (camelCase convention)"
        )

    def test_underscore(self):
        result = validate_method("do_work")
        assert result.advisory_codes == [AdvisoryCode.CONTAINS_UNDERSCORE]
        assert result.advisories[0].message == "Method names typically don't contain underscores"

    def test_both_advisories(self):
        assert validate_method("Do_Work").advisory_codes == [
            AdvisoryCode.UPPER_CASE_START,
            AdvisoryCode.CONTAINS_UNDERSCORE,
        ]

    def test_failure_uses_method_label(self):
        result = validate_method("do work")
        assert result.error_code == ErrorCode.INVALID_CONTINUATION_CHARACTER
        assert result.failure.message.startswith("Method name ")


class TestVariableNames:
    """Test cases for validate_variable."""

    def test_camel_case_has_no_advisories(self):
        assert validate_variable("count").advisories == []

    def test_underscores_are_not_flagged(self):
        result = validate_variable("max_size")
        assert result.valid
        assert result.advisories == []

    def test_uppercase_start_only(self):
        result = validate_variable("MAX_SIZE")
        assert result.advisory_codes == [AdvisoryCode.UPPER_CASE_START]
        assert result.advisories[0].message == (
            "Variable names should start with a lowercase letter (camelCase convention)"
        )

    def test_failure_uses_variable_label(self):
        result = validate_variable("int")
        assert result.failure.message == "Variable name cannot be a Java keyword"


class TestGenericIdentifiers:
    """Test cases for validate_generic."""

    def test_no_advisories_regardless_of_style(self):
        for text in ["Foo", "foo", "FOO_BAR", "_x", "$"]:
            result = validate_generic(text)
            assert result.valid
            assert result.advisories == []

    def test_reserved_word(self):
        result = validate_generic("class")
        assert result.error_code == ErrorCode.RESERVED_WORD
        assert result.failure.message == "Identifier cannot be a Java keyword"


class TestCommonProperties:
    """Properties shared by every entry point."""

    @pytest.mark.parametrize("validate", ENTRY_POINTS)
    def test_empty_string_fails(self, validate):
        result = validate("")
        assert not result.valid
        assert result.error_code == ErrorCode.EMPTY_IDENTIFIER

    @pytest.mark.parametrize("validate", ENTRY_POINTS)
    @pytest.mark.parametrize("word", ["class", "true", "null", "while"])
    def test_reserved_words_fail_in_every_category(self, validate, word):
        assert validate(word).error_code == ErrorCode.RESERVED_WORD

    @pytest.mark.parametrize("validate", ENTRY_POINTS)
    @pytest.mark.parametrize("text", ["Foo", "foo_bar", "1x", "a.b", "My_Class", ""])
    def test_idempotent(self, validate, text):
        assert validate(text) == validate(text)

    @pytest.mark.parametrize("validate", ENTRY_POINTS)
    def test_invalid_results_never_carry_advisories(self, validate):
        result = validate("Bad-Name")
        assert not result.valid
        assert result.advisories == []
