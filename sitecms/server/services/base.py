"""
Shared service behaviour for CRUD entities.

``EntityService`` wraps a repository and adds what every content type needs:
404 handling, paginated listing and, for entities that carry an uploaded
file, replacing and removing that file in step with the database row.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Tuple

from fastapi import UploadFile
from pydantic import BaseModel

from sitecms.core.database.repositories.base import AsyncSqlRepository, EntityType
from sitecms.core.logging_config import get_logger
from sitecms.core.models.io.common import Pagination
from sitecms.server.exception_handlers.errors import NotFoundError

from .uploads import UploadCategory, UploadManager

logger = get_logger(__name__)


class EntityService(Generic[EntityType]):
    """CRUD service over one repository.

    Subclasses set ``label`` (used in messages) and, when the entity owns an
    uploaded file, ``file_field`` and ``upload_category``.
    """

    label: str = "Item"
    file_field: Optional[str] = None
    upload_category: Optional[UploadCategory] = None

    def __init__(self, repository: AsyncSqlRepository[EntityType], uploads: Optional[UploadManager] = None) -> None:
        self.repository = repository
        self.uploads = uploads

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"

    async def list_page(
        self, page: int, page_size: int, filters: Optional[Dict[str, Any]] = None
    ) -> Tuple[List[EntityType], Pagination]:
        items, total = await self.repository.paginate(page, page_size, filters)
        return items, Pagination.build(page, page_size, total)

    async def get(self, entity_id: str) -> EntityType:
        """Fetch by id.

        Raises:
            NotFoundError: No row with that id.
        """
        entity = await self.repository.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.not_found_message)
        return entity

    async def create(self, payload: BaseModel, upload: Optional[UploadFile] = None, **extra: Any) -> EntityType:
        """Create a row from a validated payload, storing ``upload`` first if given.

        The stored file is removed again if the insert fails.
        """
        values = payload.model_dump()
        values.update(extra)
        stored_url = await self._store(upload)
        if stored_url is not None:
            values[self.file_field] = stored_url
        try:
            entity = await self.repository.create(self.repository.model(**values))
        except Exception:
            await self._discard(stored_url)
            raise
        logger.info(f"Created {self.label.lower()} {entity.id}")
        return entity

    async def update(
        self, entity_id: str, payload: BaseModel, upload: Optional[UploadFile] = None, **extra: Any
    ) -> EntityType:
        """Apply the fields present in ``payload``; a new upload replaces the old file.

        The previous file is deleted only after the row was updated successfully.
        """
        entity = await self.get(entity_id)
        changes = {key: value for key, value in payload.model_dump(exclude_unset=True).items() if value is not None}
        changes.update(extra)

        stored_url = await self._store(upload)
        previous_url = getattr(entity, self.file_field) if self.file_field else None
        if stored_url is not None:
            changes[self.file_field] = stored_url

        for key, value in changes.items():
            setattr(entity, key, value)
        try:
            entity = await self.repository.update(entity)
        except Exception:
            await self._discard(stored_url)
            raise

        if stored_url is not None and previous_url and previous_url != stored_url:
            await self._discard(previous_url)
        logger.info(f"Updated {self.label.lower()} {entity_id}")
        return entity

    async def delete(self, entity_id: str) -> None:
        """Delete the row and its stored file.

        Raises:
            NotFoundError: No row with that id.
        """
        entity = await self.get(entity_id)
        file_url = getattr(entity, self.file_field) if self.file_field else None
        await self.repository.delete(entity_id)
        await self._discard(file_url)
        logger.info(f"Deleted {self.label.lower()} {entity_id}")

    async def _store(self, upload: Optional[UploadFile]) -> Optional[str]:
        if upload is None or not upload.filename:
            return None
        if self.uploads is None or self.upload_category is None or self.file_field is None:
            raise RuntimeError(f"{type(self).__name__} does not accept file uploads")
        stored = await self.uploads.save(self.upload_category, upload)
        return stored.url

    async def _discard(self, url: Optional[str]) -> None:
        if url and self.uploads is not None:
            await self.uploads.delete_url(url)


class CuratedEntityService(EntityService[EntityType]):
    """Entity service for tables with homepage curation (featured / display order)."""

    async def list_featured(self, limit: int) -> List[EntityType]:
        return await self.repository.list_featured(limit)
