"""Initial catalog schema - brands, categories, items

Revision ID: 001_initial
Revises: None
Create Date: 2025-10-27
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = "catalog"


def upgrade() -> None:
    op.execute(f"CREATE SCHEMA IF NOT EXISTS {SCHEMA}")

    # --- Brands ---
    op.create_table(
        "CatalogBrands",
        sa.Column("Id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("Brand", sa.String(100), nullable=False, unique=True),
        schema=SCHEMA,
    )

    # --- Categories ---
    # NULLS NOT DISTINCT (PostgreSQL 15+) so root categories cannot share a name.
    op.create_table(
        "CatalogCategories",
        sa.Column("Id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("Category", sa.String(100), nullable=False),
        sa.Column("ParentId", sa.Integer, sa.ForeignKey(f"{SCHEMA}.CatalogCategories.Id"), nullable=True),
        sa.UniqueConstraint(
            "Category", "ParentId", name="uq_catalog_category_name_parent", postgresql_nulls_not_distinct=True
        ),
        schema=SCHEMA,
    )
    op.create_index("ix_catalog_CatalogCategories_ParentId", "CatalogCategories", ["ParentId"], schema=SCHEMA)

    # --- Items ---
    op.create_table(
        "CatalogItems",
        sa.Column("Slug", sa.String(150), primary_key=True),
        sa.Column("Name", sa.String(100), nullable=False),
        sa.Column("Description", sa.String(5000), nullable=False, server_default=""),
        sa.Column("Price", sa.Numeric(15, 2), nullable=False, server_default="0"),
        sa.Column("AvailableStock", sa.Integer, nullable=False, server_default="0"),
        sa.Column("MaxStockThreshold", sa.Integer, nullable=False),
        sa.Column("Medias", sa.JSON),
        sa.Column(
            "CatalogBrandId",
            sa.Integer,
            sa.ForeignKey(f"{SCHEMA}.CatalogBrands.Id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "CatalogCategoryId",
            sa.Integer,
            sa.ForeignKey(f"{SCHEMA}.CatalogCategories.Id", ondelete="CASCADE"),
            nullable=False,
        ),
        schema=SCHEMA,
    )
    op.create_index("ix_catalog_CatalogItems_CatalogBrandId", "CatalogItems", ["CatalogBrandId"], schema=SCHEMA)
    op.create_index(
        "ix_catalog_CatalogItems_CatalogCategoryId", "CatalogItems", ["CatalogCategoryId"], schema=SCHEMA
    )


def downgrade() -> None:
    op.drop_table("CatalogItems", schema=SCHEMA)
    op.drop_table("CatalogCategories", schema=SCHEMA)
    op.drop_table("CatalogBrands", schema=SCHEMA)
