"""
SQLAlchemy implementation of TeamMemberRepository.
"""
from .base_repository import SQLAlchemyNamedRepository
from ....application.interfaces.repositories import TeamMemberRepository
from ....domain.entities.team_member import TeamMember
from ..models.team_member_model import TeamMemberModel


class SQLAlchemyTeamMemberRepository(SQLAlchemyNamedRepository[TeamMember, TeamMemberModel], TeamMemberRepository):
    """SQLAlchemy implementation of team member repository."""

    model_class = TeamMemberModel
