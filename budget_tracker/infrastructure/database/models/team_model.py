"""
SQLAlchemy models for Team aggregate.
"""
from typing import Any, Dict

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from .base import AuditColumnsMixin, Base, UUIDMixin, enum_or_raw, id_or_none
from ....domain.entities.team import RoleName, Team, TeamRole
from ....domain.exceptions import EntityValidationError, LoadEntityError
from ....domain.value_objects import TeamMemberId


class TeamRoleModel(Base, UUIDMixin, AuditColumnsMixin):
    """SQLAlchemy model for team_roles table."""

    __tablename__ = 'team_roles'

    team_id = Column(
        String(36),
        ForeignKey('teams.id', ondelete='CASCADE'),
        nullable=False,
        index=True
    )
    name = Column(String(20), nullable=False)
    team_member_id = Column(
        String(36),
        ForeignKey('team_members.id', ondelete='SET NULL'),
        nullable=True,
        index=True
    )
    # Keeps roles in the order the team was given them
    position = Column(Integer, nullable=False, default=0)

    team = relationship('TeamModel', back_populates='roles')

    def to_domain(self) -> TeamRole:
        """Convert to domain entity."""
        try:
            return TeamRole(
                props={
                    'name': enum_or_raw(RoleName, self.name),
                    'team_member_id': id_or_none(TeamMemberId, self.team_member_id),
                },
                audit_fields=self.audit_fields(),
                entity_id=self.id
            )
        except EntityValidationError as e:
            raise LoadEntityError(e.error) from e

    @staticmethod
    def row_from_domain(role: TeamRole, team_id: str, position: int) -> Dict[str, Any]:
        """Build a plain row for bulk inserts."""
        data = role.to_dict()
        return {
            'id': data['id'],
            'team_id': team_id,
            'name': data['name'],
            'team_member_id': data['team_member_id'],
            'position': position,
            'created_by': data['created_by'],
            'created_at': data['created_at'],
            'updated_by': data['updated_by'],
            'updated_at': data['updated_at'],
        }

    @classmethod
    def from_domain(cls, role: TeamRole, team_id: str, position: int = 0) -> 'TeamRoleModel':
        """Create from domain entity."""
        return cls(**cls.row_from_domain(role, team_id, position))


class TeamModel(Base, UUIDMixin, AuditColumnsMixin):
    """SQLAlchemy model for teams table."""

    __tablename__ = 'teams'

    name = Column(String(255), nullable=False, index=True)

    roles = relationship(
        'TeamRoleModel',
        back_populates='team',
        cascade='all, delete-orphan',
        lazy='selectin',
        order_by='TeamRoleModel.position'
    )

    def to_domain(self) -> Team:
        """Convert to domain entity."""
        roles = [role.to_domain() for role in self.roles]
        try:
            return Team(
                props={'name': self.name, 'roles': roles},
                audit_fields=self.audit_fields(),
                entity_id=self.id
            )
        except EntityValidationError as e:
            raise LoadEntityError(e.error) from e

    @classmethod
    def from_domain(cls, team: Team) -> 'TeamModel':
        """Create from domain entity, roles included."""
        data = team.to_dict()
        model = cls(
            id=data['id'],
            name=data['name'],
            created_by=data['created_by'],
            created_at=data['created_at'],
            updated_by=data['updated_by'],
            updated_at=data['updated_at']
        )
        model.roles = [
            TeamRoleModel.from_domain(role, team.id, position)
            for position, role in enumerate(team.roles)
        ]
        return model

    @staticmethod
    def values_from_domain(team: Team) -> Dict[str, Any]:
        """Column values for an UPDATE of the team row."""
        return {
            'name': team.name,
            'updated_by': team.updated_by,
            'updated_at': team.updated_at,
        }
