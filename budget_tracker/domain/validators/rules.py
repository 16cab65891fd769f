"""
Composable field rules.

Each builder returns a FieldRule holding a predicate and a message
template. Templates use ``{field}`` for the field name so the same rule
can be shared across fields and entities.
"""
import math
import re
from dataclasses import dataclass, fields, is_dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, Iterable, Mapping, Optional, Type


Check = Callable[[Any, Mapping[str, Any]], bool]


@dataclass(frozen=True)
class FieldRule:
    """A single named constraint on one field."""
    check: Check
    message: str
    is_optional: bool = False

    def message_for(self, field_name: str) -> str:
        """Render the message for a concrete field."""
        return self.message.format(field=field_name)


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return isinstance(value, float) and math.isfinite(value)


def _decimal_places(value: Any) -> int:
    exponent = Decimal(str(value)).normalize().as_tuple().exponent
    return -exponent if isinstance(exponent, int) and exponent < 0 else 0


def optional() -> FieldRule:
    """Skip every other rule of the field when its value is None."""
    return FieldRule(check=lambda value, data: True, message='', is_optional=True)


def not_empty() -> FieldRule:
    return FieldRule(
        check=lambda value, data: value is not None and value != '',
        message='{field} should not be empty',
    )


def is_string() -> FieldRule:
    return FieldRule(
        check=lambda value, data: isinstance(value, str),
        message='{field} must be a string',
    )


def max_length(limit: int) -> FieldRule:
    return FieldRule(
        check=lambda value, data: isinstance(value, str) and len(value) <= limit,
        message=f'{{field}} must be shorter than or equal to {limit} characters',
    )


def length(minimum: int, maximum: Optional[int] = None, message: Optional[str] = None) -> FieldRule:
    """String length within [minimum, maximum]."""
    def check(value: Any, data: Mapping[str, Any]) -> bool:
        if not isinstance(value, str):
            return False
        if len(value) < minimum:
            return False
        return maximum is None or len(value) <= maximum

    default = f'{{field}} must be longer than or equal to {minimum} characters'
    if maximum is not None:
        default = (
            f'{{field}} must be longer than or equal to {minimum} '
            f'and shorter than or equal to {maximum} characters'
        )
    return FieldRule(check=check, message=message or default)


def is_datetime() -> FieldRule:
    return FieldRule(
        check=lambda value, data: isinstance(value, datetime),
        message='{field} must be a Date instance',
    )


def is_int() -> FieldRule:
    return FieldRule(
        check=lambda value, data: isinstance(value, int) and not isinstance(value, bool),
        message='{field} must be an integer number',
    )


def min_value(minimum: Any) -> FieldRule:
    return FieldRule(
        check=lambda value, data: _is_number(value) and value >= minimum,
        message=f'{{field}} must not be less than {minimum}',
    )


def max_value(maximum: Any) -> FieldRule:
    return FieldRule(
        check=lambda value, data: _is_number(value) and value <= maximum,
        message=f'{{field}} must not be greater than {maximum}',
    )


def is_number(max_decimal_places: Optional[int] = None, message: Optional[str] = None) -> FieldRule:
    """Finite number, optionally limited in decimal places."""
    def check(value: Any, data: Mapping[str, Any]) -> bool:
        if not _is_number(value):
            return False
        if max_decimal_places is None:
            return True
        try:
            return _decimal_places(value) <= max_decimal_places
        except InvalidOperation:
            return False

    return FieldRule(
        check=check,
        message=message or '{field} must be a number conforming to the specified constraints',
    )


def is_enum(enum_cls: Type[Enum]) -> FieldRule:
    """Value is a member of the enum, or one of its raw values."""
    def check(value: Any, data: Mapping[str, Any]) -> bool:
        try:
            enum_cls(value)
        except (ValueError, TypeError):
            return False
        return True

    return FieldRule(check=check, message='{field} must be a valid enum value')


def is_in(allowed: Iterable[Any]) -> FieldRule:
    allowed = [a.value if isinstance(a, Enum) else a for a in allowed]
    return FieldRule(
        check=lambda value, data: value in allowed,
        message='{field} must be one of the following values: ' + ', '.join(str(a) for a in allowed),
    )


def is_instance(cls: type) -> FieldRule:
    return FieldRule(
        check=lambda value, data: isinstance(value, cls),
        message=f'{{field}} must be an instance of {cls.__name__}',
    )


def each_instance(cls: type) -> FieldRule:
    """Every element of a list or tuple is an instance of ``cls``."""
    def check(value: Any, data: Mapping[str, Any]) -> bool:
        if isinstance(value, (list, tuple)):
            return all(isinstance(item, cls) for item in value)
        return isinstance(value, cls)

    return FieldRule(check=check, message=f'each value in {{field}} must be an instance of {cls.__name__}')


def is_not_empty_object() -> FieldRule:
    """Mapping or object with at least one non-None attribute."""
    def check(value: Any, data: Mapping[str, Any]) -> bool:
        if isinstance(value, Mapping):
            return any(v is not None for v in value.values())
        if is_dataclass(value) and not isinstance(value, type):
            return any(getattr(value, f.name) is not None for f in fields(value))
        return False

    return FieldRule(check=check, message='{field} must be a non-empty object')


NUMBER_STRING_REGEX = re.compile(r'^[+-]?([0-9]*[.])?[0-9]+$')


def is_number_string() -> FieldRule:
    return FieldRule(
        check=lambda value, data: isinstance(value, str) and bool(NUMBER_STRING_REGEX.match(value)),
        message='{field} must be a number string',
    )


def not_older_than(other_field: str, message: str) -> FieldRule:
    """Cross-field rule: the value is a datetime no earlier than another field."""
    def check(value: Any, data: Mapping[str, Any]) -> bool:
        other = data.get(other_field)
        if not isinstance(value, datetime) or not isinstance(other, datetime):
            return False
        try:
            return value >= other
        except TypeError:
            # naive compared with aware
            return False

    return FieldRule(check=check, message=message)


def predicate(check: Check, message: str) -> FieldRule:
    """Wrap a custom check. ``check`` receives the value and the whole data map."""
    return FieldRule(check=check, message=message)
