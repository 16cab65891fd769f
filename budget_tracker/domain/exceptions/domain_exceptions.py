"""
Domain Exceptions - Custom exceptions for domain-specific errors.
"""
from typing import Any, Dict, List, Optional


# Field name mapped to the ordered list of violated rule messages
FieldsError = Dict[str, List[str]]


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    All domain exceptions should inherit from this class to allow
    for consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            'error': self.code,
            'message': self.message,
            'details': self.details
        }


class InvalidIdError(DomainException):
    """Raised when an identifier is not a valid UUID."""

    def __init__(self, value: Any = None, message: str = "ID must be a valid UUID"):
        self.value = value
        super().__init__(
            message=message,
            code='INVALID_ID',
            details={'value': str(value) if value is not None else None}
        )


class NotFoundError(DomainException):
    """Raised when a requested entity cannot be found."""

    def __init__(
        self,
        entity_id: Any,
        entity_type: str = 'Entity',
        message: Optional[str] = None
    ):
        self.entity_type = entity_type
        self.entity_id = str(entity_id)
        super().__init__(
            message=message or f"{entity_type} not found using ID {self.entity_id}",
            code='ENTITY_NOT_FOUND',
            details={'entity_type': entity_type, 'entity_id': self.entity_id}
        )


class ValidationException(DomainException):
    """
    Raised when domain validation fails.

    Can contain multiple validation errors for different fields.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        errors: Optional[FieldsError] = None,
        code: str = 'VALIDATION_ERROR'
    ):
        self.errors = errors or {}
        super().__init__(
            message=message,
            code=code,
            details={'validation_errors': self.errors}
        )

    @property
    def error(self) -> FieldsError:
        """Field name to messages map."""
        return self.errors

    def add_error(self, field: str, error: str) -> None:
        """Add a validation error for a specific field."""
        if field not in self.errors:
            self.errors[field] = []
        self.errors[field].append(error)
        self.details['validation_errors'] = self.errors


class EntityValidationError(ValidationException):
    """Raised when an entity is built or changed with invalid props."""

    def __init__(self, errors: FieldsError, message: str = "Entity Validation Error"):
        super().__init__(message=message, errors=errors, code='ENTITY_VALIDATION_ERROR')


class AuditFieldsValidationError(ValidationException):
    """Raised when audit fields fail validation."""

    def __init__(self, errors: FieldsError, message: str = "AuditFields are not valid"):
        super().__init__(message=message, errors=errors, code='AUDIT_FIELDS_VALIDATION_ERROR')


class LoadEntityError(ValidationException):
    """
    Raised when a stored row cannot be turned back into an entity.

    Carries the same field map as the EntityValidationError it replaces,
    so callers can tell bad data at rest from bad input.
    """

    def __init__(self, errors: FieldsError, message: str = "An entity could not be loaded"):
        super().__init__(message=message, errors=errors, code='LOAD_ENTITY_ERROR')


class BusinessRuleViolationException(DomainException):
    """
    Raised when a business rule is violated.

    Used for domain invariant violations that are not simple validations.
    """

    def __init__(
        self,
        rule: str,
        message: Optional[str] = None
    ):
        self.rule = rule
        super().__init__(
            message=message or f"Business rule violated: {rule}",
            code='BUSINESS_RULE_VIOLATION',
            details={'rule': rule}
        )


class InvalidExpenseError(BusinessRuleViolationException):
    """Raised when an expense mutation breaks a purchase document rule."""

    def __init__(self, message: str):
        super().__init__(rule='expense_purchase_documents', message=message)
