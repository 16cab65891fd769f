"""
SQLAlchemy Unit of Work implementation.
"""
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ...application.interfaces.unit_of_work import UnitOfWork
from .repositories.budget_repository import SQLAlchemyBudgetRepository
from .repositories.supplier_repository import SQLAlchemySupplierRepository
from .repositories.team_member_repository import SQLAlchemyTeamMemberRepository
from .repositories.team_repository import SQLAlchemyTeamRepository
from .repositories.expense_repository import SQLAlchemyExpenseRepository


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work pattern.

    Manages database transactions and provides access to repositories.
    All repositories share the unit's session.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize Unit of Work.

        Args:
            session_factory: Factory for creating async database sessions
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None
        self._reset_repositories()

    def _reset_repositories(self) -> None:
        self._budgets: Optional[SQLAlchemyBudgetRepository] = None
        self._suppliers: Optional[SQLAlchemySupplierRepository] = None
        self._team_members: Optional[SQLAlchemyTeamMemberRepository] = None
        self._teams: Optional[SQLAlchemyTeamRepository] = None
        self._expenses: Optional[SQLAlchemyExpenseRepository] = None

    async def __aenter__(self) -> "SQLAlchemyUnitOfWork":
        """Enter async context - create session."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit async context - rollback on error, close session."""
        if exc_type is not None:
            await self.rollback()
        await self.close()

    @property
    def session(self) -> AsyncSession:
        """Get the active session."""
        if self._session is None:
            raise RuntimeError("Unit of work not started. Use 'async with' context.")
        return self._session

    @property
    def budgets(self) -> SQLAlchemyBudgetRepository:
        """Get budget repository."""
        if self._budgets is None:
            self._budgets = SQLAlchemyBudgetRepository(self.session)
        return self._budgets

    @property
    def suppliers(self) -> SQLAlchemySupplierRepository:
        """Get supplier repository."""
        if self._suppliers is None:
            self._suppliers = SQLAlchemySupplierRepository(self.session)
        return self._suppliers

    @property
    def team_members(self) -> SQLAlchemyTeamMemberRepository:
        """Get team member repository."""
        if self._team_members is None:
            self._team_members = SQLAlchemyTeamMemberRepository(self.session)
        return self._team_members

    @property
    def teams(self) -> SQLAlchemyTeamRepository:
        """Get team repository."""
        if self._teams is None:
            self._teams = SQLAlchemyTeamRepository(self.session)
        return self._teams

    @property
    def expenses(self) -> SQLAlchemyExpenseRepository:
        """Get expense repository."""
        if self._expenses is None:
            self._expenses = SQLAlchemyExpenseRepository(self.session)
        return self._expenses

    async def commit(self) -> None:
        """Commit current transaction."""
        if self._session:
            await self._session.commit()

    async def rollback(self) -> None:
        """Rollback current transaction."""
        if self._session:
            await self._session.rollback()

    async def close(self) -> None:
        """Close the session."""
        if self._session:
            await self._session.close()
            self._session = None
            # Reset repository references
            self._reset_repositories()
