"""
Product and product category repositories.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import delete as sa_delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..entities.catalog import Product, ProductCategory
from .base import AsyncSqlRepository, CuratedRepository


class ProductRepository(CuratedRepository[Product]):
    """Repository for products. Every read eagerly loads the category."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, Product)

    def base_query(self):
        # populate_existing refreshes the category of instances already in the identity map
        return (
            super()
            .base_query()
            .options(selectinload(Product.category))
            .execution_options(populate_existing=True)
        )

    async def create(self, entity: Product) -> Product:
        await super().create(entity)
        return await self.get_by_id(entity.id)

    async def update(self, entity: Product) -> Product:
        await super().update(entity)
        return await self.get_by_id(entity.id)


class ProductCategoryRepository(AsyncSqlRepository[ProductCategory]):
    """Repository for product categories."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(session, ProductCategory)

    async def delete_with_products(self, category_id: str) -> Optional[int]:
        """Delete a category together with all of its products in one transaction.

        Args:
            category_id: Category primary key

        Returns:
            Number of products removed, or None when the category does not exist
        """
        category = await self.session.get(ProductCategory, category_id)
        if category is None:
            return None
        result = await self.session.execute(sa_delete(Product).where(Product.category_id == category_id))
        await self.session.delete(category)
        await self.session.commit()
        return result.rowcount or 0
