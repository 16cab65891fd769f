"""
SQLAlchemy implementation of TeamRepository.
"""
from typing import Any, Dict, List

from .base_repository import SQLAlchemyAggregateRepository
from ....application.interfaces.repositories import TeamRepository
from ....domain.entities.team import Team
from ..models.team_model import TeamModel, TeamRoleModel


class SQLAlchemyTeamRepository(SQLAlchemyAggregateRepository[Team, TeamModel], TeamRepository):
    """SQLAlchemy implementation of team repository. Roles live in team_roles."""

    model_class = TeamModel
    child_model_class = TeamRoleModel
    child_foreign_key = 'team_id'

    def _child_rows(self, entity: Team) -> List[Dict[str, Any]]:
        return [
            TeamRoleModel.row_from_domain(role, entity.id, position)
            for position, role in enumerate(entity.roles)
        ]
