"""
Budget domain entity.
"""
from typing import Optional

from .base import Entity
from ..validators import FieldsValidator, is_string, max_length, not_empty


class BudgetValidator(FieldsValidator):
    rules = {
        'name': [not_empty(), is_string(), max_length(255)],
    }


class Budget(Entity):
    """A named budget that expenses are charged against."""

    validator_class = BudgetValidator

    @property
    def name(self) -> str:
        return self._props['name']

    def change(self, updated_by: str, name: Optional[str] = None) -> None:
        """
        Rename the budget.

        Args:
            updated_by: Actor recorded in the audit fields
            name: New name, None keeps the current one
        """
        changes = {}
        if name is not None:
            changes['name'] = name
        self._apply(changes, updated_by)

    @classmethod
    def create(cls, name: str, created_by: str, budget_id: Optional[str] = None) -> 'Budget':
        """Factory method to create a new budget."""
        return cls(
            props={'name': name},
            audit_fields={'created_by': created_by},
            entity_id=budget_id
        )
