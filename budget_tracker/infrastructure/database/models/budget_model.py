"""
SQLAlchemy model for Budget entity.
"""
from sqlalchemy import Column, String

from .base import AuditColumnsMixin, Base, UUIDMixin
from ....domain.entities.budget import Budget
from ....domain.exceptions import EntityValidationError, LoadEntityError


class BudgetModel(Base, UUIDMixin, AuditColumnsMixin):
    """SQLAlchemy model for budgets table."""

    __tablename__ = 'budgets'

    name = Column(String(255), nullable=False, index=True)

    def to_domain(self) -> Budget:
        """Convert to domain entity."""
        try:
            return Budget(
                props={'name': self.name},
                audit_fields=self.audit_fields(),
                entity_id=self.id
            )
        except EntityValidationError as e:
            raise LoadEntityError(e.error) from e

    @classmethod
    def from_domain(cls, budget: Budget) -> 'BudgetModel':
        """Create from domain entity."""
        data = budget.to_dict()
        return cls(
            id=data['id'],
            name=data['name'],
            created_by=data['created_by'],
            created_at=data['created_at'],
            updated_by=data['updated_by'],
            updated_at=data['updated_at']
        )

    def update_from_domain(self, budget: Budget) -> None:
        """Update from domain entity."""
        self.name = budget.name
        self.updated_by = budget.updated_by
        self.updated_at = budget.updated_at
