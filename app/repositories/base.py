"""
Typed repository over SQLAlchemy declarative models.

Each entity service owns one ``Repository[Model]``. The repository issues
exactly one statement per call and commits writes, rolling the session back
when the commit fails so the caller sees the original database error.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar
import logging
import uuid

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    """Single-table data access for one model class"""

    def __init__(self, db: AsyncSession, model: Type[ModelT]):
        self.db = db
        self.model = model

    async def _commit(self) -> None:
        try:
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

    async def add(self, **values: Any) -> ModelT:
        """Insert one row and return it refreshed from the database"""
        instance = self.model(**values)
        self.db.add(instance)
        await self._commit()
        await self.db.refresh(instance)
        return instance

    async def get(self, entity_id: uuid.UUID, *options: Any) -> Optional[ModelT]:
        """Point lookup by primary key; loader options are applied as given"""
        stmt = select(self.model).where(self.model.id == entity_id)
        if options:
            stmt = stmt.options(*options)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list(self, *criteria: Any, order_by: Sequence[Any] = ()) -> List[ModelT]:
        """Select all rows matching every criterion"""
        stmt = select(self.model).where(*criteria).order_by(*order_by)
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def update_values(self, instance: ModelT, **values: Any) -> ModelT:
        """Apply column values to a loaded row and commit"""
        for key, value in values.items():
            setattr(instance, key, value)
        await self._commit()
        await self.db.refresh(instance)
        return instance
