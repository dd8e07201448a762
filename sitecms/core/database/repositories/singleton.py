"""
Singleton-row repository.

Singleton tables hold exactly one row under a fixed primary key. The row is
created lazily on first read; concurrent first reads are resolved by the
primary key constraint, and the losing insert re-reads the winner's row.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, Type

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..base import utc_now
from .base import EntityType

SINGLETON_ID = "singleton"


class SingletonRepository(Generic[EntityType]):
    """Read-or-create and update access to a singleton table."""

    def __init__(self, session: AsyncSession, model: Type[EntityType], defaults: Dict[str, Any]) -> None:
        self.session = session
        self.model = model
        self.defaults = defaults

    async def get_or_create(self) -> EntityType:
        """Return the singleton row, creating it with the defaults if missing."""
        entity = await self.session.get(self.model, SINGLETON_ID)
        if entity is not None:
            return entity

        entity = self.model(id=SINGLETON_ID, **self.defaults)
        self.session.add(entity)
        try:
            await self.session.commit()
        except IntegrityError:
            # Another request created the row first
            await self.session.rollback()
            entity = await self.session.get(self.model, SINGLETON_ID, populate_existing=True)
            if entity is None:
                raise
            return entity
        await self.session.refresh(entity)
        return entity

    async def update(self, changes: Dict[str, Any]) -> EntityType:
        """Apply field changes to the singleton row (last write wins).

        Args:
            changes: Mapping of entity field name to new value; unknown keys are ignored
        """
        entity = await self.get_or_create()
        for key, value in changes.items():
            if key != "id" and hasattr(entity, key):
                setattr(entity, key, value)
        entity.updated_at = utc_now()
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity
