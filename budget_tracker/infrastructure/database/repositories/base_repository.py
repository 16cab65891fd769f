"""
Generic SQLAlchemy repository with CRUD and paginated search.
"""
import logging
from typing import Any, ClassVar, Dict, Generic, List, Type, TypeVar

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ....application.interfaces.repositories import EntityIdLike, NamedEntityRepository
from ....application.interfaces.search import SearchParams, SearchResult
from ....domain.entities.base import Entity
from ....domain.exceptions import NotFoundError
from ..models.base import Base

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=Entity)
M = TypeVar('M', bound=Base)


class SQLAlchemyNamedRepository(NamedEntityRepository[E], Generic[E, M]):
    """
    SQLAlchemy implementation shared by every named entity.

    Subclasses set ``model_class`` to an ORM model exposing ``name`` and
    ``created_at`` columns plus ``to_domain``, ``from_domain`` and
    ``update_from_domain``.
    """

    model_class: ClassVar[Type[Base]]
    sortable_fields: ClassVar[List[str]] = ['name', 'created_at']

    def __init__(self, session: AsyncSession):
        self._session = session

    async def exists(self, name: str) -> bool:
        """Check if an entity with this exact name is stored."""
        result = await self._session.execute(
            select(func.count()).select_from(self.model_class).where(
                self.model_class.name == name
            )
        )
        count = result.scalar()
        return count > 0

    async def insert(self, entity: E) -> None:
        """Persist a new entity."""
        self._session.add(self.model_class.from_domain(entity))
        await self._session.flush()
        logger.info(f"Inserted {type(entity).__name__} {entity.id}")

    async def find_by_id(self, entity_id: EntityIdLike) -> E:
        """Get entity by ID, raising NotFoundError when missing."""
        model = await self._get(entity_id)
        return model.to_domain()

    async def find_all(self) -> List[E]:
        """Get every entity, newest first."""
        result = await self._session.execute(
            select(self.model_class)
            .order_by(self.model_class.created_at.desc())
            .execution_options(populate_existing=True)
        )
        return [m.to_domain() for m in result.scalars().all()]

    async def update(self, entity: E) -> None:
        """Overwrite an existing entity."""
        model = await self._get(entity.id)
        model.update_from_domain(entity)
        await self._session.flush()
        logger.info(f"Updated {type(entity).__name__} {entity.id}")

    async def delete(self, entity_id: EntityIdLike) -> None:
        """Delete entity by ID."""
        model = await self._get(entity_id)
        await self._session.delete(model)
        await self._session.flush()
        logger.info(f"Deleted {self.model_class.__name__} {entity_id}")

    async def search(self, params: SearchParams) -> SearchResult[E]:
        """
        Filter by name, sort and paginate.

        Args:
            params: Normalised search parameters

        Returns:
            SearchResult with the requested page and the filtered total
        """
        query = select(self.model_class)
        count_query = select(func.count()).select_from(self.model_class)

        if params.filter:
            condition = self.model_class.name.icontains(params.filter, autoescape=True)
            query = query.where(condition)
            count_query = count_query.where(condition)

        if params.sort and params.sort in self.sortable_fields:
            column = getattr(self.model_class, params.sort)
            query = query.order_by(column.desc() if params.sort_dir == 'desc' else column.asc())
        else:
            query = query.order_by(self.model_class.created_at.desc())

        query = (
            query.offset(params.offset)
            .limit(params.per_page)
            .execution_options(populate_existing=True)
        )

        total = (await self._session.execute(count_query)).scalar_one()
        result = await self._session.execute(query)
        items = [m.to_domain() for m in result.scalars().all()]

        logger.debug(
            f"Searched {self.model_class.__tablename__}: page={params.page} "
            f"per_page={params.per_page} filter={params.filter!r} total={total}"
        )

        return SearchResult(
            items=items,
            total=total,
            current_page=params.page,
            per_page=params.per_page,
            sort=params.sort,
            sort_dir=params.sort_dir,
            filter=params.filter,
        )

    async def _get(self, entity_id: EntityIdLike) -> M:
        """Load the row for an id, raising NotFoundError when missing."""
        entity_id = str(entity_id)
        result = await self._session.execute(
            select(self.model_class)
            .where(self.model_class.id == entity_id)
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        if model is None:
            raise NotFoundError(entity_id)
        return model


class SQLAlchemyAggregateRepository(SQLAlchemyNamedRepository[E, M]):
    """
    Repository for an aggregate whose children live in their own table.

    Updates replace the children wholesale: delete the old rows, bulk
    insert the new ones, then update the parent row, all inside one
    savepoint. A database error rolls back to the savepoint only, so
    earlier work in the same session survives, and is re-raised. The
    outer transaction belongs to the caller.

    Subclasses set ``child_model_class`` and ``child_foreign_key`` and
    implement ``_child_rows``.
    """

    child_model_class: ClassVar[Type[Base]]
    child_foreign_key: ClassVar[str]

    def _child_rows(self, entity: E) -> List[Dict[str, Any]]:
        """Plain rows for the aggregate's children."""
        raise NotImplementedError

    async def update(self, entity: E) -> None:
        """Overwrite the parent row and replace its children."""
        await self._get(entity.id)
        child_key = getattr(self.child_model_class, self.child_foreign_key)
        rows = self._child_rows(entity)

        try:
            async with self._session.begin_nested():
                await self._session.execute(
                    delete(self.child_model_class)
                    .where(child_key == entity.id)
                    .execution_options(synchronize_session=False)
                )

                if rows:
                    await self._session.execute(insert(self.child_model_class), rows)

                await self._session.execute(
                    update(self.model_class)
                    .where(self.model_class.id == entity.id)
                    .values(**self.model_class.values_from_domain(entity))
                    .execution_options(synchronize_session=False)
                )
        except SQLAlchemyError as e:
            logger.error(f"Failed to update {type(entity).__name__} {entity.id}: {e}")
            raise

        logger.info(f"Updated {type(entity).__name__} {entity.id} with {len(rows)} children")

    async def delete(self, entity_id: EntityIdLike) -> None:
        """Delete the children, then the parent row."""
        entity_id = str(entity_id)
        model = await self._get(entity_id)
        child_key = getattr(self.child_model_class, self.child_foreign_key)

        try:
            async with self._session.begin_nested():
                await self._session.execute(
                    delete(self.child_model_class)
                    .where(child_key == entity_id)
                    .execution_options(synchronize_session=False)
                )
                await self._session.execute(
                    delete(self.model_class)
                    .where(self.model_class.id == entity_id)
                    .execution_options(synchronize_session=False)
                )
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete {self.model_class.__name__} {entity_id}: {e}")
            raise

        self._session.expunge(model)
        logger.info(f"Deleted {self.model_class.__name__} {entity_id}")
