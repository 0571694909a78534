"""
Shared repository base for the catalog tables.

Every catalog table (tags, release profiles, auto-tags) is keyed by an
autoincrementing integer ``id``, so lookups by id live here once. Database
failures are re-raised as ``RepositoryError`` carrying the model name.
"""

from __future__ import annotations

from typing import Any, Generic, NoReturn, Optional, TypeVar, Union

from sqlalchemy import Executable, Result, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tagwarden.db.models import Base
from tagwarden.exceptions import RepositoryError

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType")
UpdateSchemaType = TypeVar("UpdateSchemaType")


class BaseSQLAlchemyRepository(
    Generic[ModelType, CreateSchemaType, UpdateSchemaType]
):
    """
    CRUD over one integer-keyed catalog model.

    Subclasses pass their model to ``__init__`` and add the set-based reads
    housekeeping needs, running them through ``_execute`` so failures are
    wrapped consistently.
    """

    def __init__(self, model: type[ModelType]):
        self.model = model
        self.entity_type = model.__name__

    def _raise(self, operation: str, action: str, error: SQLAlchemyError) -> NoReturn:
        raise RepositoryError(
            f"Failed to {action}: {error}",
            operation=operation,
            entity_type=self.entity_type,
            original_error=error,
        ) from error

    async def _execute(
        self,
        session: AsyncSession,
        statement: Executable,
        *,
        operation: str,
        action: str,
    ) -> Result[Any]:
        try:
            return await session.execute(statement)
        except SQLAlchemyError as e:
            self._raise(operation, action, e)

    async def create(
        self, session: AsyncSession, *, obj_in: Union[CreateSchemaType, dict[str, Any]]
    ) -> ModelType:
        """Insert a new row and return it with its assigned id."""
        if isinstance(obj_in, dict):
            obj_data = obj_in
        else:
            obj_data = obj_in.model_dump()  # type: ignore[attr-defined]

        db_obj = self.model(**obj_data)
        session.add(db_obj)
        try:
            await session.flush()
        except SQLAlchemyError as e:
            self._raise("insert", f"create {self.entity_type}", e)
        await session.refresh(db_obj)
        return db_obj

    async def get(self, session: AsyncSession, id: int) -> Optional[ModelType]:
        """Get a row by its integer id."""
        result = await self._execute(
            session,
            select(self.model).where(self.model.id == id),  # type: ignore[attr-defined]
            operation="select",
            action=f"read {self.entity_type} {id}",
        )
        return result.scalar_one_or_none()

    async def exists(self, session: AsyncSession, id: int) -> bool:
        result = await self._execute(
            session,
            select(self.model.id).where(self.model.id == id),  # type: ignore[attr-defined]
            operation="select",
            action=f"check {self.entity_type} {id}",
        )
        return result.first() is not None

    async def get_multi(
        self, session: AsyncSession, *, skip: int = 0, limit: int = 100
    ) -> list[ModelType]:
        """Get a page of rows ordered by id."""
        result = await self._execute(
            session,
            select(self.model)
            .order_by(self.model.id)  # type: ignore[attr-defined]
            .offset(skip)
            .limit(limit),
            operation="select",
            action=f"list {self.entity_type} rows",
        )
        return list(result.scalars().all())

    async def update(
        self,
        session: AsyncSession,
        *,
        db_obj: ModelType,
        obj_in: Union[UpdateSchemaType, dict[str, Any]],
    ) -> ModelType:
        """Apply the fields that were set on ``obj_in``; unknown keys are ignored."""
        if isinstance(obj_in, dict):
            update_data = obj_in
        else:
            update_data = obj_in.model_dump(exclude_unset=True)  # type: ignore[attr-defined]

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        session.add(db_obj)
        try:
            await session.flush()
        except SQLAlchemyError as e:
            self._raise("update", f"update {self.entity_type}", e)
        await session.refresh(db_obj)
        return db_obj

    async def delete(self, session: AsyncSession, *, id: int) -> Optional[ModelType]:
        """Delete one row by id, returning it, or ``None`` if it was absent."""
        db_obj = await self.get(session, id)
        if db_obj is not None:
            await session.delete(db_obj)
            try:
                await session.flush()
            except SQLAlchemyError as e:
                self._raise("delete", f"delete {self.entity_type} {id}", e)
        return db_obj

    async def count(self, session: AsyncSession) -> int:
        result = await self._execute(
            session,
            select(func.count()).select_from(self.model),
            operation="select",
            action=f"count {self.entity_type} rows",
        )
        return result.scalar() or 0
