"""
Repository interfaces (ports) for domain entities.

These interfaces define the contract for persistence operations
without specifying the implementation details.
"""
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, List, TypeVar, Union

from ...domain.entities import Budget, Expense, Supplier, Team, TeamMember
from ...domain.entities.base import Entity
from ...domain.value_objects import UniqueEntityId
from .search import SearchParams, SearchResult


# Generic type for entities
E = TypeVar('E', bound=Entity)

EntityIdLike = Union[str, UniqueEntityId]


class Repository(ABC, Generic[E]):
    """
    Base repository interface.

    Defines common CRUD operations for all repositories.
    """

    @abstractmethod
    async def insert(self, entity: E) -> None:
        """
        Persist a new entity.

        Args:
            entity: Entity to store
        """
        pass

    @abstractmethod
    async def find_by_id(self, entity_id: EntityIdLike) -> E:
        """
        Get entity by ID.

        Args:
            entity_id: Entity id as string or UniqueEntityId

        Returns:
            The stored entity

        Raises:
            NotFoundError: If no entity has this id
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[E]:
        """Get every stored entity."""
        pass

    @abstractmethod
    async def update(self, entity: E) -> None:
        """
        Overwrite an existing entity.

        Raises:
            NotFoundError: If the entity was never stored
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: EntityIdLike) -> None:
        """
        Delete entity by ID.

        Raises:
            NotFoundError: If no entity has this id
        """
        pass


class SearchableRepository(Repository[E]):
    """
    Repository with filtered, sorted and paginated search.

    ``filter`` matches the name case-insensitively. ``sort`` applies only
    to fields listed in ``sortable_fields``; otherwise results are ordered
    by created_at, newest first.
    """

    sortable_fields: ClassVar[List[str]] = []

    @abstractmethod
    async def search(self, params: SearchParams) -> SearchResult[E]:
        """
        Search entities.

        Args:
            params: Normalised page, sort and filter input

        Returns:
            One page of matching entities and the filtered total
        """
        pass


class NamedEntityRepository(SearchableRepository[E]):
    """Searchable repository for entities identified by a name."""

    @abstractmethod
    async def exists(self, name: str) -> bool:
        """Check if an entity with this exact name is stored."""
        pass


class BudgetRepository(NamedEntityRepository[Budget]):
    """Repository interface for Budget entities."""
    pass


class SupplierRepository(NamedEntityRepository[Supplier]):
    """Repository interface for Supplier entities."""
    pass


class TeamMemberRepository(NamedEntityRepository[TeamMember]):
    """Repository interface for TeamMember entities."""
    pass


class TeamRepository(NamedEntityRepository[Team]):
    """Repository interface for Team aggregates and their roles."""
    pass


class ExpenseRepository(NamedEntityRepository[Expense]):
    """Repository interface for Expense aggregates and their invoices."""
    pass
