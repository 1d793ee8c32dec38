"""Category model - self-referencing tree of categories."""

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.base import Base, CATALOG_SCHEMA


class CatalogCategory(Base):
    __tablename__ = "CatalogCategories"
    __table_args__ = (
        # Root categories have a NULL parent; NULLS NOT DISTINCT keeps their names unique too.
        UniqueConstraint(
            "Category", "ParentId", name="uq_catalog_category_name_parent", postgresql_nulls_not_distinct=True
        ),
    )

    _id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    _name: Mapped[str] = mapped_column("Category", String(100), nullable=False)
    _parent_id: Mapped[int | None] = mapped_column(
        "ParentId", Integer, ForeignKey(f"{CATALOG_SCHEMA}.CatalogCategories.Id"), nullable=True, index=True
    )

    # Relationships
    parent = relationship("CatalogCategory", remote_side=[_id], back_populates="children")
    children = relationship("CatalogCategory", back_populates="parent")
    items = relationship(
        "CatalogItem", back_populates="category", cascade="all, delete-orphan", passive_deletes=True
    )

    @hybrid_property
    def id(self) -> int:
        return self._id

    @hybrid_property
    def name(self) -> str:
        return self._name

    @hybrid_property
    def parent_id(self) -> int | None:
        return self._parent_id

    @classmethod
    def create(cls, name: str, parent_id: int | None = None) -> "CatalogCategory":
        return cls(_name=name, _parent_id=parent_id)

    def rename(self, new_name: str) -> None:
        self._name = new_name

    def __repr__(self) -> str:
        return f"<CatalogCategory {self._id}: {self._name}>"
