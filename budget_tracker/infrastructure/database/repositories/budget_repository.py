"""
SQLAlchemy implementation of BudgetRepository.
"""
from .base_repository import SQLAlchemyNamedRepository
from ....application.interfaces.repositories import BudgetRepository
from ....domain.entities.budget import Budget
from ..models.budget_model import BudgetModel


class SQLAlchemyBudgetRepository(SQLAlchemyNamedRepository[Budget, BudgetModel], BudgetRepository):
    """SQLAlchemy implementation of budget repository."""

    model_class = BudgetModel
