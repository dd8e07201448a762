"""Initial schema for sitecms

Revision ID: 20261019_000000
Revises: None
Create Date: 2026-10-19 00:00:00.000000

Creates every content table of the site CMS:
- users (admin accounts)
- product catalog (product_categories, products)
- content (cases, news, documents, messages, gallery, hero_slides)
- singleton pages and settings (home_about, page_about, site_info, site_meta)

Demo content is not part of the migration; run ``sitecms-seed`` for that.

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import List, Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> List[sa.Column]:
    return [
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def _curation_columns() -> List[sa.Column]:
    return [
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
    ]


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        "users",
        *_base_columns(),
        sa.Column("username", sa.String(128), nullable=False),
        sa.Column("password", sa.String(64), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "product_categories",
        *_base_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "products",
        *_base_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("model", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("price", sa.Float(), nullable=True),
        sa.Column("image", sa.String(512), nullable=True),
        *_curation_columns(),
        sa.Column("category_id", sa.String(64), nullable=False),
        sa.ForeignKeyConstraint(["category_id"], ["product_categories.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_products_category_id", "products", ["category_id"])

    op.create_table(
        "cases",
        *_base_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("image", sa.String(512), nullable=True),
        sa.Column("company", sa.String(255), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        sa.Column("industry", sa.String(255), nullable=True),
        *_curation_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "news",
        *_base_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("excerpt", sa.Text(), nullable=True),
        sa.Column("category", sa.String(128), nullable=True),
        sa.Column("author", sa.String(128), nullable=True),
        sa.Column("date", sa.String(32), nullable=True),
        sa.Column("image", sa.String(512), nullable=True),
        *_curation_columns(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "documents",
        *_base_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("file", sa.String(512), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "messages",
        *_base_columns(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(64), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default="unread"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_messages_status", "messages", ["status"])

    op.create_table(
        "gallery",
        *_base_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("image", sa.String(512), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "hero_slides",
        *_base_columns(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("subtitle", sa.String(512), nullable=False),
        sa.Column("image", sa.String(512), nullable=True),
        sa.Column("link", sa.String(512), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "home_about",
        *_base_columns(),
        sa.Column("title", sa.String(255), nullable=False, server_default=""),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.Column("image", sa.String(512), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "page_about",
        *_base_columns(),
        sa.Column("content", sa.Text(), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "site_info",
        *_base_columns(),
        sa.Column("phone", sa.String(64), nullable=True),
        sa.Column("whatsapp", sa.String(64), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("address", sa.String(512), nullable=True),
        sa.Column("company_name", sa.String(255), nullable=True),
        sa.Column("company_description", sa.Text(), nullable=True),
        sa.Column("company_logo", sa.String(512), nullable=True),
        sa.Column("facebook", sa.String(512), nullable=True),
        sa.Column("instagram", sa.String(512), nullable=True),
        sa.Column("twitter", sa.String(512), nullable=True),
        sa.Column("youtube", sa.String(512), nullable=True),
        sa.Column("tiktok", sa.String(512), nullable=True),
        sa.Column("linkedin", sa.String(512), nullable=True),
        sa.Column("icp", sa.String(128), nullable=True),
        sa.Column("security_code", sa.String(128), nullable=True),
        sa.Column("baidu_map_ak", sa.String(255), nullable=True),
        sa.Column("office_address_name", sa.String(255), nullable=True),
        sa.Column("office_address_detail", sa.String(512), nullable=True),
        sa.Column("office_address_lng", sa.Float(), nullable=True),
        sa.Column("office_address_lat", sa.Float(), nullable=True),
        sa.Column("office_phone", sa.String(64), nullable=True),
        sa.Column("office_email", sa.String(255), nullable=True),
        sa.Column("theme", sa.String(32), nullable=False, server_default="light"),
        sa.Column("language", sa.String(16), nullable=False, server_default="zh-CN"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "site_meta",
        *_base_columns(),
        sa.Column("title", sa.String(255), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("keywords", sa.String(512), nullable=True),
        sa.Column("author", sa.String(255), nullable=True),
        sa.Column("favicon", sa.String(512), nullable=True),
        sa.Column("og_image", sa.String(512), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    tables_with_created_at = [
        "users",
        "product_categories",
        "products",
        "cases",
        "news",
        "documents",
        "messages",
        "gallery",
        "hero_slides",
        "home_about",
        "page_about",
        "site_info",
        "site_meta",
    ]
    for table in tables_with_created_at:
        op.create_index(f"ix_{table}_created_at", table, ["created_at"])


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("site_meta")
    op.drop_table("site_info")
    op.drop_table("page_about")
    op.drop_table("home_about")
    op.drop_table("hero_slides")
    op.drop_table("gallery")
    op.drop_table("messages")
    op.drop_table("documents")
    op.drop_table("news")
    op.drop_table("cases")
    op.drop_table("products")
    op.drop_table("product_categories")
    op.drop_table("users")
