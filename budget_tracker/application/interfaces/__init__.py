# Application Interfaces - Ports implemented by the infrastructure layer

from .search import SearchParams, SearchResult
from .repositories import (
    Repository,
    SearchableRepository,
    NamedEntityRepository,
    BudgetRepository,
    SupplierRepository,
    TeamMemberRepository,
    TeamRepository,
    ExpenseRepository,
)
from .unit_of_work import UnitOfWork

__all__ = [
    'SearchParams',
    'SearchResult',
    'Repository',
    'SearchableRepository',
    'NamedEntityRepository',
    'BudgetRepository',
    'SupplierRepository',
    'TeamMemberRepository',
    'TeamRepository',
    'ExpenseRepository',
    'UnitOfWork',
]
