"""
Repositories for cases, news, documents and messages.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from ..entities.content import Case, Document, Message, News
from .base import AsyncSqlRepository, CuratedRepository


class CaseRepository(CuratedRepository[Case]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Case)


class NewsRepository(CuratedRepository[News]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, News)


class DocumentRepository(AsyncSqlRepository[Document]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Document)


class MessageRepository(AsyncSqlRepository[Message]):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Message)
