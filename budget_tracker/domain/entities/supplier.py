"""
Supplier domain entity.
"""
from typing import Optional

from .base import Entity
from ..validators import FieldsValidator, is_string, max_length, not_empty


class SupplierValidator(FieldsValidator):
    rules = {
        'name': [not_empty(), is_string(), max_length(255)],
    }


class Supplier(Entity):
    """Vendor an expense can be bought from."""

    validator_class = SupplierValidator

    @property
    def name(self) -> str:
        return self._props['name']

    def change(self, updated_by: str, name: Optional[str] = None) -> None:
        """Rename the supplier. None keeps the current name."""
        changes = {}
        if name is not None:
            changes['name'] = name
        self._apply(changes, updated_by)

    @classmethod
    def create(cls, name: str, created_by: str, supplier_id: Optional[str] = None) -> 'Supplier':
        """Factory method to create a new supplier."""
        return cls(
            props={'name': name},
            audit_fields={'created_by': created_by},
            entity_id=supplier_id
        )
