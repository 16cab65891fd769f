# Domain Value Objects - Immutable objects defined by their attributes

from .unique_entity_id import (
    UniqueEntityId,
    TeamId,
    BudgetId,
    SupplierId,
    TeamMemberId,
)
from .audit_fields import AuditFields, AuditFieldsValidator, utc_now

__all__ = [
    # Identifiers
    'UniqueEntityId',
    'TeamId',
    'BudgetId',
    'SupplierId',
    'TeamMemberId',
    # Audit
    'AuditFields',
    'AuditFieldsValidator',
    'utc_now',
]
