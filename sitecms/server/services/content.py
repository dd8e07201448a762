"""
Services for cases, news, documents and contact messages.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import UploadFile
from pydantic import BaseModel

from sitecms.core.database.entities.content import Case, Document, Message, MessageStatus, News
from sitecms.core.database.repositories.content import (
    CaseRepository,
    DocumentRepository,
    MessageRepository,
    NewsRepository,
)
from sitecms.core.models.io.content import MessageCreate
from sitecms.server.exception_handlers.errors import BadRequestError

from .base import CuratedEntityService, EntityService
from .uploads import UploadCategory, UploadManager


class CaseService(CuratedEntityService[Case]):
    label = "Case"
    file_field = "image"
    upload_category = UploadCategory.CASES

    def __init__(self, repository: CaseRepository, uploads: UploadManager) -> None:
        super().__init__(repository, uploads)


class NewsService(CuratedEntityService[News]):
    label = "News"
    file_field = "image"
    upload_category = UploadCategory.NEWS

    def __init__(self, repository: NewsRepository, uploads: UploadManager) -> None:
        super().__init__(repository, uploads)


class DocumentService(EntityService[Document]):
    label = "Document"
    file_field = "file"
    upload_category = UploadCategory.DOCUMENTS

    def __init__(self, repository: DocumentRepository, uploads: UploadManager) -> None:
        super().__init__(repository, uploads)

    async def create(self, payload: BaseModel, upload: Optional[UploadFile] = None, **extra: Any) -> Document:
        """Documents always carry a file; ``content`` is no longer edited and stays empty."""
        if upload is None or not upload.filename:
            raise BadRequestError("File is required")
        return await super().create(payload, upload, content="", **extra)


class MessageService(EntityService[Message]):
    label = "Message"

    def __init__(self, repository: MessageRepository) -> None:
        super().__init__(repository)

    async def submit(self, payload: MessageCreate) -> Message:
        """Store a public contact-form submission as unread."""
        return await self.create(payload, status=MessageStatus.UNREAD.value)

    async def set_status(self, entity_id: str, status: MessageStatus) -> Message:
        message = await self.get(entity_id)
        message.status = MessageStatus(status).value
        return await self.repository.update(message)
