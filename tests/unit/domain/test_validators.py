"""
Unit tests for field rules and the FieldsValidator runner.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional

import pytest

from budget_tracker.domain.validators import (
    FieldsValidator,
    each_instance,
    is_datetime,
    is_enum,
    is_in,
    is_instance,
    is_int,
    is_not_empty_object,
    is_number,
    is_number_string,
    is_string,
    length,
    max_length,
    max_value,
    min_value,
    not_empty,
    not_older_than,
    optional,
    predicate,
)


class Color(str, Enum):
    RED = "red"
    BLUE = "blue"


@dataclass(frozen=True)
class Wrapper:
    value: Optional[str] = None


def passes(rule, value, data=None):
    return rule.check(value, data or {})


class TestRules:
    """Test individual rule predicates."""

    @pytest.mark.parametrize("value,expected", [
        (None, False), ("", False), ("a", True), (0, True), ([], True),
    ])
    def test_not_empty(self, value, expected):
        """Test only None and the empty string are empty."""
        assert passes(not_empty(), value) is expected

    def test_is_string(self):
        """Test only str passes."""
        assert passes(is_string(), "a")
        assert not passes(is_string(), 5)

    def test_max_length(self):
        """Test the limit is inclusive."""
        assert passes(max_length(3), "abc")
        assert not passes(max_length(3), "abcd")
        assert not passes(max_length(3), 123)

    def test_length_range(self):
        """Test length bounds are inclusive."""
        rule = length(2, 4)
        assert not passes(rule, "a")
        assert passes(rule, "ab")
        assert passes(rule, "abcd")
        assert not passes(rule, "abcde")
        assert not passes(rule, None)

    def test_length_custom_message(self):
        """Test a custom message replaces the default."""
        assert length(10, 10, message="x must be 10 characters").message_for("x") == "x must be 10 characters"

    def test_is_datetime(self):
        """Test only datetimes pass."""
        assert passes(is_datetime(), datetime(2023, 1, 1))
        assert not passes(is_datetime(), "2023-01-01")

    @pytest.mark.parametrize("value,expected", [
        (1, True), (2023, True), (1.5, False), (True, False), ("1", False), (None, False),
    ])
    def test_is_int(self, value, expected):
        """Test integers pass and booleans do not."""
        assert passes(is_int(), value) is expected

    def test_min_and_max_value(self):
        """Test bounds are inclusive and non-numbers fail."""
        assert passes(min_value(2020), 2020)
        assert not passes(min_value(2020), 2019)
        assert passes(max_value(3000), 3000)
        assert not passes(max_value(3000), 3001)
        assert not passes(min_value(0), None)
        assert not passes(max_value(10), "5")

    @pytest.mark.parametrize("value,expected", [
        (10, True),
        (10.5, True),
        (10.55, True),
        (10.555, False),
        (Decimal("1.20"), True),
        (float("nan"), False),
        (float("inf"), False),
        ("10", False),
        (True, False),
    ])
    def test_is_number_with_decimal_places(self, value, expected):
        """Test decimal places are limited and non-finite numbers fail."""
        assert passes(is_number(max_decimal_places=2), value) is expected

    def test_is_enum_accepts_member_or_raw_value(self):
        """Test members and raw values both pass."""
        assert passes(is_enum(Color), Color.RED)
        assert passes(is_enum(Color), "blue")
        assert not passes(is_enum(Color), "green")
        assert not passes(is_enum(Color), None)

    def test_is_in_message_lists_raw_values(self):
        """Test the message names the allowed values."""
        rule = is_in(Color)
        assert passes(rule, "red")
        assert passes(rule, Color.BLUE)
        assert not passes(rule, "green")
        assert rule.message_for("color") == "color must be one of the following values: red, blue"

    def test_is_instance(self):
        """Test the message names the class."""
        rule = is_instance(Wrapper)
        assert passes(rule, Wrapper("a"))
        assert not passes(rule, "a")
        assert rule.message_for("w") == "w must be an instance of Wrapper"

    def test_each_instance(self):
        """Test every list element is checked."""
        rule = each_instance(Wrapper)
        assert passes(rule, [])
        assert passes(rule, [Wrapper("a"), Wrapper("b")])
        assert not passes(rule, [Wrapper("a"), "b"])
        assert not passes(rule, None)
        assert rule.message_for("items") == "each value in items must be an instance of Wrapper"

    def test_is_not_empty_object(self):
        """Test objects need at least one non-None value."""
        rule = is_not_empty_object()
        assert passes(rule, {"a": 1})
        assert not passes(rule, {"a": None})
        assert not passes(rule, {})
        assert passes(rule, Wrapper("a"))
        assert not passes(rule, Wrapper())
        assert not passes(rule, "a")
        assert not passes(rule, None)

    @pytest.mark.parametrize("value,expected", [
        ("1234567890", True), ("+12", True), ("-1.5", True), (".5", True),
        ("12a", False), ("", False), ("1.", False), (1234567890, False),
    ])
    def test_is_number_string(self, value, expected):
        """Test numeric strings pass."""
        assert passes(is_number_string(), value) is expected

    def test_not_older_than(self):
        """Test the value is compared with another field."""
        rule = not_older_than("start", "end cannot be older than start")
        start = datetime(2023, 1, 1, tzinfo=timezone.utc)
        assert passes(rule, start, {"start": start})
        assert not passes(rule, datetime(2022, 1, 1, tzinfo=timezone.utc), {"start": start})
        assert not passes(rule, "fake", {"start": start})
        assert not passes(rule, start, {})
        assert not passes(rule, datetime(2024, 1, 1), {"start": start})

    def test_predicate_receives_data(self):
        """Test custom checks see the whole data map."""
        rule = predicate(lambda value, data: value == data["other"], "{field} must match other")
        assert passes(rule, 1, {"other": 1})
        assert not passes(rule, 1, {"other": 2})
        assert rule.message_for("x") == "x must match other"


class SampleValidator(FieldsValidator):
    rules = {
        'name': [not_empty(), is_string(), max_length(5)],
        'code': [optional(), is_string(), length(3, 3, message='code must be 3 characters')],
    }


class TestFieldsValidator:
    """Test aggregation of rule failures."""

    def test_valid_data(self):
        """Test valid data is kept and errors are cleared."""
        validator = SampleValidator()
        data = {'name': 'abc', 'code': 'XYZ'}
        assert validator.validate(data) is True
        assert validator.errors is None
        assert validator.validated_data == data

    def test_collects_every_failure_in_order(self):
        """Test every failed rule is reported in declaration order."""
        validator = SampleValidator()
        assert validator.validate({'name': None, 'code': 7}) is False
        assert validator.errors == {
            'name': [
                'name should not be empty',
                'name must be a string',
                'name must be shorter than or equal to 5 characters',
            ],
            'code': ['code must be a string', 'code must be 3 characters'],
        }
        assert validator.validated_data is None

    def test_optional_field_skipped_when_none(self):
        """Test optional fields are only checked when present."""
        validator = SampleValidator()
        assert validator.validate({'name': 'abc'}) is True
        assert validator.validate({'name': 'abc', 'code': None}) is True

    def test_optional_field_checked_when_present(self):
        """Test an empty string is not skipped."""
        validator = SampleValidator()
        assert validator.validate({'name': 'abc', 'code': ''}) is False
        assert validator.errors == {'code': ['code must be 3 characters']}

    def test_revalidation_resets_state(self):
        """Test a later success clears previous errors."""
        validator = SampleValidator()
        validator.validate({'name': ''})
        assert validator.errors
        validator.validate({'name': 'ok'})
        assert validator.errors is None
