# Domain Exceptions
from .domain_exceptions import (
    FieldsError,
    DomainException,
    InvalidIdError,
    NotFoundError,
    ValidationException,
    EntityValidationError,
    AuditFieldsValidationError,
    LoadEntityError,
    BusinessRuleViolationException,
    InvalidExpenseError,
)

__all__ = [
    'FieldsError',
    'DomainException',
    'InvalidIdError',
    'NotFoundError',
    'ValidationException',
    'EntityValidationError',
    'AuditFieldsValidationError',
    'LoadEntityError',
    'BusinessRuleViolationException',
    'InvalidExpenseError',
]
