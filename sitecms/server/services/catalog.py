"""
Product catalog services.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import UploadFile
from pydantic import BaseModel

from sitecms.core.database.entities.catalog import Product, ProductCategory
from sitecms.core.database.repositories.catalog import ProductCategoryRepository, ProductRepository
from sitecms.core.logging_config import get_logger
from sitecms.server.exception_handlers.errors import BadRequestError, NotFoundError

from .base import CuratedEntityService, EntityService
from .uploads import UploadCategory, UploadManager

logger = get_logger(__name__)


class ProductCategoryService(EntityService[ProductCategory]):
    label = "Category"

    def __init__(self, repository: ProductCategoryRepository) -> None:
        super().__init__(repository)

    async def delete(self, entity_id: str) -> None:
        """Delete a category and, with it, all of its products."""
        removed = await self.repository.delete_with_products(entity_id)
        if removed is None:
            raise NotFoundError(self.not_found_message)
        logger.info(f"Deleted category {entity_id} and {removed} product(s)")


class ProductService(CuratedEntityService[Product]):
    label = "Product"
    file_field = "image"
    upload_category = UploadCategory.PRODUCTS

    def __init__(
        self, repository: ProductRepository, categories: ProductCategoryRepository, uploads: UploadManager
    ) -> None:
        super().__init__(repository, uploads)
        self.categories = categories

    async def _require_category(self, category_id: Optional[str]) -> None:
        if category_id is not None and await self.categories.get_by_id(category_id) is None:
            raise BadRequestError("Category not found")

    async def create(self, payload: BaseModel, upload: Optional[UploadFile] = None, **extra: Any) -> Product:
        await self._require_category(getattr(payload, "category_id", None))
        return await super().create(payload, upload, **extra)

    async def update(self, entity_id: str, payload: BaseModel, upload: Optional[UploadFile] = None, **extra: Any) -> Product:
        await self._require_category(getattr(payload, "category_id", None))
        return await super().update(entity_id, payload, upload, **extra)
