"""
SQLAlchemy model for TeamMember entity.
"""
from sqlalchemy import Column, String

from .base import AuditColumnsMixin, Base, UUIDMixin
from ....domain.entities.team_member import TeamMember
from ....domain.exceptions import EntityValidationError, LoadEntityError


class TeamMemberModel(Base, UUIDMixin, AuditColumnsMixin):
    """SQLAlchemy model for team_members table."""

    __tablename__ = 'team_members'

    name = Column(String(255), nullable=False, index=True)

    def to_domain(self) -> TeamMember:
        """Convert to domain entity."""
        try:
            return TeamMember(
                props={'name': self.name},
                audit_fields=self.audit_fields(),
                entity_id=self.id
            )
        except EntityValidationError as e:
            raise LoadEntityError(e.error) from e

    @classmethod
    def from_domain(cls, member: TeamMember) -> 'TeamMemberModel':
        """Create from domain entity."""
        data = member.to_dict()
        return cls(
            id=data['id'],
            name=data['name'],
            created_by=data['created_by'],
            created_at=data['created_at'],
            updated_by=data['updated_by'],
            updated_at=data['updated_at']
        )

    def update_from_domain(self, member: TeamMember) -> None:
        """Update from domain entity."""
        self.name = member.name
        self.updated_by = member.updated_by
        self.updated_at = member.updated_at
