"""
Audit fields value object: who created and last updated an entity, and when.
"""
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Dict, Mapping

from ..exceptions import AuditFieldsValidationError
from ..validators import (
    FieldsValidator,
    is_datetime,
    is_string,
    max_length,
    not_empty,
    not_older_than,
)


def utc_now() -> datetime:
    """Return current UTC timestamp."""
    return datetime.now(timezone.utc)


class AuditFieldsValidator(FieldsValidator):
    """Rules for the four audit fields."""

    rules = {
        'created_by': [not_empty(), is_string(), max_length(255)],
        'created_at': [not_empty(), is_datetime()],
        'updated_by': [not_empty(), is_string(), max_length(255)],
        'updated_at': [
            not_empty(),
            not_older_than('created_at', 'updated_at cannot be older than created_at'),
            is_datetime(),
        ],
    }


@dataclass(frozen=True)
class AuditFields:
    """
    Audit trail value object.

    Missing values are derived on construction: created_at defaults to
    now, updated_by to created_by and updated_at to created_at. Naive
    datetimes are taken as UTC. An instance is never changed; use
    ``stamp`` to record a new update.
    """
    created_by: Any = None
    created_at: Any = None
    updated_by: Any = None
    updated_at: Any = None

    def __post_init__(self) -> None:
        """Apply defaults, then validate."""
        if self.created_at is None:
            object.__setattr__(self, 'created_at', utc_now())
        if self.updated_by is None:
            object.__setattr__(self, 'updated_by', self.created_by)
        if self.updated_at is None:
            object.__setattr__(self, 'updated_at', self.created_at)

        for name in ('created_at', 'updated_at'):
            value = getattr(self, name)
            if isinstance(value, datetime) and value.tzinfo is None:
                object.__setattr__(self, name, value.replace(tzinfo=timezone.utc))

        self.validate(self.value)

    @staticmethod
    def validate(value: Mapping[str, Any]) -> None:
        """
        Validate raw audit values.

        Raises:
            AuditFieldsValidationError: With every violated rule per field
        """
        validator = AuditFieldsValidator()
        if not validator.validate(value):
            raise AuditFieldsValidationError(validator.errors)

    @property
    def value(self) -> Dict[str, Any]:
        """Plain dict of the four fields."""
        return {
            'created_by': self.created_by,
            'created_at': self.created_at,
            'updated_by': self.updated_by,
            'updated_at': self.updated_at,
        }

    def stamp(self, updated_by: str) -> 'AuditFields':
        """Return a copy recording an update by ``updated_by`` now."""
        return replace(self, updated_by=updated_by, updated_at=utc_now())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'AuditFields':
        """Create from a mapping that may hold extra keys."""
        return cls(
            created_by=data.get('created_by'),
            created_at=data.get('created_at'),
            updated_by=data.get('updated_by'),
            updated_at=data.get('updated_at'),
        )
