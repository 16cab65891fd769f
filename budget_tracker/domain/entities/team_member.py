"""
Team member domain entity.
"""
from typing import Optional

from .base import Entity
from ..validators import FieldsValidator, is_string, max_length, not_empty


class TeamMemberValidator(FieldsValidator):
    rules = {
        'name': [not_empty(), is_string(), max_length(255)],
    }


class TeamMember(Entity):
    """Person who can hold a role in a team."""

    validator_class = TeamMemberValidator

    @property
    def name(self) -> str:
        return self._props['name']

    def change(self, updated_by: str, name: Optional[str] = None) -> None:
        changes = {}
        if name is not None:
            changes['name'] = name
        self._apply(changes, updated_by)

    @classmethod
    def create(cls, name: str, created_by: str, team_member_id: Optional[str] = None) -> 'TeamMember':
        """Factory method to create a new team member."""
        return cls(
            props={'name': name},
            audit_fields={'created_by': created_by},
            entity_id=team_member_id
        )
