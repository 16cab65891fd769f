# Domain Validators - Declarative field rules and the runner that applies them

from .rules import (
    FieldRule,
    optional,
    not_empty,
    is_string,
    max_length,
    length,
    is_datetime,
    is_int,
    min_value,
    max_value,
    is_number,
    is_enum,
    is_in,
    is_instance,
    each_instance,
    is_not_empty_object,
    is_number_string,
    not_older_than,
    predicate,
)
from .fields_validator import FieldsValidator

__all__ = [
    'FieldRule',
    'FieldsValidator',
    'optional',
    'not_empty',
    'is_string',
    'max_length',
    'length',
    'is_datetime',
    'is_int',
    'min_value',
    'max_value',
    'is_number',
    'is_enum',
    'is_in',
    'is_instance',
    'each_instance',
    'is_not_empty_object',
    'is_number_string',
    'not_older_than',
    'predicate',
]
