"""
Data access layer organized by table.

Every repository wraps an ``AsyncSession`` and exposes async CRUD methods;
commits happen inside the repository so that services stay transaction-free.
"""

from .base import AsyncBaseRepository, AsyncSqlRepository, CuratedRepository, QueryBuilder
from .catalog import ProductCategoryRepository, ProductRepository
from .content import CaseRepository, DocumentRepository, MessageRepository, NewsRepository
from .gallery import GalleryRepository
from .home import HeroSlideRepository
from .singleton import SINGLETON_ID, SingletonRepository
from .users import UserRepository

__all__ = [
    "AsyncBaseRepository",
    "AsyncSqlRepository",
    "CaseRepository",
    "CuratedRepository",
    "DocumentRepository",
    "GalleryRepository",
    "HeroSlideRepository",
    "MessageRepository",
    "NewsRepository",
    "ProductCategoryRepository",
    "ProductRepository",
    "QueryBuilder",
    "SINGLETON_ID",
    "SingletonRepository",
    "UserRepository",
]
