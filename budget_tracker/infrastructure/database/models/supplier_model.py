"""
SQLAlchemy model for Supplier entity.
"""
from sqlalchemy import Column, String

from .base import AuditColumnsMixin, Base, UUIDMixin
from ....domain.entities.supplier import Supplier
from ....domain.exceptions import EntityValidationError, LoadEntityError


class SupplierModel(Base, UUIDMixin, AuditColumnsMixin):
    """SQLAlchemy model for suppliers table."""

    __tablename__ = 'suppliers'

    name = Column(String(255), nullable=False, index=True)

    def to_domain(self) -> Supplier:
        """Convert to domain entity."""
        try:
            return Supplier(
                props={'name': self.name},
                audit_fields=self.audit_fields(),
                entity_id=self.id
            )
        except EntityValidationError as e:
            raise LoadEntityError(e.error) from e

    @classmethod
    def from_domain(cls, supplier: Supplier) -> 'SupplierModel':
        """Create from domain entity."""
        data = supplier.to_dict()
        return cls(
            id=data['id'],
            name=data['name'],
            created_by=data['created_by'],
            created_at=data['created_at'],
            updated_by=data['updated_by'],
            updated_at=data['updated_at']
        )

    def update_from_domain(self, supplier: Supplier) -> None:
        """Update from domain entity."""
        self.name = supplier.name
        self.updated_by = supplier.updated_by
        self.updated_at = supplier.updated_at
