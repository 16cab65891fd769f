"""
SQLAlchemy base model and common mixins.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional, Type

from sqlalchemy import Column, DateTime, MetaData, String
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.types import TypeDecorator


# Naming convention for database constraints
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """SQLAlchemy declarative base class."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware datetime stored as UTC.

    Naive values are taken as UTC on the way in, and values read back
    without tzinfo (SQLite) get UTC attached.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: Optional[datetime], dialect: Any) -> Optional[datetime]:
        if value is None:
            return value
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    def process_result_value(self, value: Optional[datetime], dialect: Any) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


class UUIDMixin:
    """Mixin that adds a UUID string primary key."""

    id = Column(String(36), primary_key=True, nullable=False)


class AuditColumnsMixin:
    """Mixin that adds the four audit columns."""

    created_by = Column(String(255), nullable=False)
    created_at = Column(UTCDateTime(), nullable=False, index=True)
    updated_by = Column(String(255), nullable=False)
    updated_at = Column(UTCDateTime(), nullable=False)

    def audit_fields(self) -> Dict[str, Any]:
        """Audit columns as a plain dict."""
        return {
            'created_by': self.created_by,
            'created_at': self.created_at,
            'updated_by': self.updated_by,
            'updated_at': self.updated_at,
        }


def enum_or_raw(enum_cls: Type[Enum], value: Any) -> Any:
    """Map a stored value to its enum member, keeping unknown values for validation."""
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        return value


def id_or_none(id_cls: type, value: Optional[str]) -> Any:
    """Wrap a stored id in its value object, None when the column is empty."""
    return id_cls(value) if value else None
