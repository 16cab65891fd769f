"""
Team domain entity and its roles.
"""
from enum import Enum
from typing import Any, List, Mapping, Optional, Sequence

from .base import Entity
from ..validators import (
    FieldsValidator,
    each_instance,
    is_enum,
    is_instance,
    is_not_empty_object,
    is_string,
    max_length,
    not_empty,
    optional,
    predicate,
)
from ..value_objects import TeamMemberId


class RoleName(str, Enum):
    """Roles every team must staff."""
    MANAGER = "manager"
    ANALYST = "analyst"
    DEPUTY = "deputy"


def _raw(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class TeamRoleValidator(FieldsValidator):
    rules = {
        'name': [not_empty(), is_enum(RoleName)],
        'team_member_id': [optional(), is_instance(TeamMemberId), is_not_empty_object()],
    }


class TeamRole(Entity):
    """A role inside a team, optionally held by a team member."""

    validator_class = TeamRoleValidator

    @property
    def name(self) -> RoleName:
        return self._props['name']

    @property
    def team_member_id(self) -> Optional[TeamMemberId]:
        return self._props.get('team_member_id')

    @classmethod
    def create(
        cls,
        name: RoleName,
        created_by: str,
        team_member_id: Optional[TeamMemberId] = None,
        role_id: Optional[str] = None
    ) -> 'TeamRole':
        """Factory method to create a new team role."""
        return cls(
            props={'name': name, 'team_member_id': team_member_id},
            audit_fields={'created_by': created_by},
            entity_id=role_id
        )


def _has_every_role(value: Any, data: Mapping[str, Any]) -> bool:
    if not isinstance(value, (list, tuple)):
        return False
    present = [_raw(getattr(role, 'name', None)) for role in value]
    return all(role.value in present for role in RoleName)


def _has_no_duplicates(value: Any, data: Mapping[str, Any]) -> bool:
    if not isinstance(value, (list, tuple)):
        return True
    seen = set()
    for role in value:
        if not isinstance(role, TeamRole):
            return True
        member = role.team_member_id.value if role.team_member_id else None
        key = (_raw(role.name), member)
        if key in seen:
            return False
        seen.add(key)
    return True


class TeamValidator(FieldsValidator):
    rules = {
        'name': [not_empty(), is_string(), max_length(255)],
        'roles': [
            predicate(_has_every_role, 'roles are invalid'),
            each_instance(TeamRole),
            not_empty(),
            predicate(_has_no_duplicates, 'duplicated roles with the same team member'),
        ],
    }


class Team(Entity):
    """
    Team aggregate.

    A team must staff every RoleName at least once, and no team member
    may hold the same role twice.
    """

    validator_class = TeamValidator

    @property
    def name(self) -> str:
        return self._props['name']

    @property
    def roles(self) -> List[TeamRole]:
        return list(self._props['roles'])

    def change(
        self,
        updated_by: str,
        name: Optional[str] = None,
        roles: Optional[Sequence[TeamRole]] = None
    ) -> None:
        """
        Rename the team and/or replace its roles.

        Args:
            updated_by: Actor recorded in the audit fields
            name: New name, None keeps the current one
            roles: New role list, None keeps the current one
        """
        changes = {}
        if name is not None:
            changes['name'] = name
        if roles is not None:
            changes['roles'] = list(roles)
        self._apply(changes, updated_by)

    @classmethod
    def create(
        cls,
        name: str,
        roles: Sequence[TeamRole],
        created_by: str,
        team_id: Optional[str] = None
    ) -> 'Team':
        """Factory method to create a new team."""
        return cls(
            props={'name': name, 'roles': list(roles)},
            audit_fields={'created_by': created_by},
            entity_id=team_id
        )
