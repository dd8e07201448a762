"""
Product catalog entities.

Products belong to exactly one category. Category deletion removes the
category's products (handled in ``ProductCategoryService.delete``).
"""

from typing import Optional

from sqlalchemy import Text
from sqlmodel import Field, Relationship

from ..base import TimestampedEntity


class ProductCategory(TimestampedEntity, table=True):
    """Product category.

    Table: product_categories
    """

    __tablename__ = "product_categories"
    __table_args__ = ({"extend_existing": True},)

    name: str = Field(max_length=255, description="Category display name")


class Product(TimestampedEntity, table=True):
    """Catalog product.

    Table: products
    """

    __tablename__ = "products"
    __table_args__ = ({"extend_existing": True},)

    name: str = Field(max_length=255, description="Product name")
    model: Optional[str] = Field(default=None, max_length=255, description="Model number")
    description: Optional[str] = Field(default=None, sa_type=Text, description="Short description")
    content: Optional[str] = Field(default=None, sa_type=Text, description="Markdown body")
    price: Optional[float] = Field(default=None, description="Optional list price")
    image: Optional[str] = Field(default=None, max_length=512, description="Uploaded image URL")
    featured: bool = Field(default=False, description="Shown on the homepage")
    display_order: int = Field(default=0, description="Homepage ordering (ascending)")

    category_id: str = Field(foreign_key="product_categories.id", index=True, max_length=64)
    category: Optional[ProductCategory] = Relationship()

    def __repr__(self) -> str:
        return f"Product(id={self.id}, name={self.name})"
