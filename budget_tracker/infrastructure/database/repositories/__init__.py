"""
SQLAlchemy repository implementations.
"""
from .base_repository import SQLAlchemyAggregateRepository, SQLAlchemyNamedRepository
from .budget_repository import SQLAlchemyBudgetRepository
from .supplier_repository import SQLAlchemySupplierRepository
from .team_member_repository import SQLAlchemyTeamMemberRepository
from .team_repository import SQLAlchemyTeamRepository
from .expense_repository import SQLAlchemyExpenseRepository

__all__ = [
    'SQLAlchemyNamedRepository',
    'SQLAlchemyAggregateRepository',
    'SQLAlchemyBudgetRepository',
    'SQLAlchemySupplierRepository',
    'SQLAlchemyTeamMemberRepository',
    'SQLAlchemyTeamRepository',
    'SQLAlchemyExpenseRepository',
]
