"""Catalog item model."""

from decimal import Decimal

from sqlalchemy import ForeignKey, Integer, JSON, Numeric, String
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.core.slug import to_slug
from catalog.db.base import Base, CATALOG_SCHEMA


class CatalogItem(Base):
    __tablename__ = "CatalogItems"

    _slug: Mapped[str] = mapped_column("Slug", String(150), primary_key=True)
    _name: Mapped[str] = mapped_column("Name", String(100), nullable=False)
    _description: Mapped[str] = mapped_column("Description", String(5000), nullable=False, default="")
    _price: Mapped[Decimal] = mapped_column("Price", Numeric(15, 2), nullable=False, default=Decimal("0"))
    _available_stock: Mapped[int] = mapped_column("AvailableStock", Integer, nullable=False, default=0)
    _max_stock_threshold: Mapped[int] = mapped_column("MaxStockThreshold", Integer, nullable=False)
    # Ordered list of {"FileName": ..., "Url": ...}
    _medias: Mapped[list[dict] | None] = mapped_column("Medias", JSON, default=list)

    # Foreign keys
    _brand_id: Mapped[int] = mapped_column(
        "CatalogBrandId",
        Integer,
        ForeignKey(f"{CATALOG_SCHEMA}.CatalogBrands.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    _category_id: Mapped[int] = mapped_column(
        "CatalogCategoryId",
        Integer,
        ForeignKey(f"{CATALOG_SCHEMA}.CatalogCategories.Id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    brand = relationship("CatalogBrand", back_populates="items")
    category = relationship("CatalogCategory", back_populates="items")

    @hybrid_property
    def slug(self) -> str:
        return self._slug

    @hybrid_property
    def name(self) -> str:
        return self._name

    @hybrid_property
    def brand_id(self) -> int:
        return self._brand_id

    @hybrid_property
    def category_id(self) -> int:
        return self._category_id

    @property
    def description(self) -> str:
        return self._description

    @property
    def price(self) -> Decimal:
        return self._price if self._price is not None else Decimal("0")

    @property
    def available_stock(self) -> int:
        return self._available_stock or 0

    @property
    def max_stock_threshold(self) -> int:
        return self._max_stock_threshold

    @property
    def medias(self) -> list[dict]:
        return list(self._medias or [])

    @property
    def brand_name(self) -> str | None:
        return self.brand.name if self.brand is not None else None

    @property
    def category_name(self) -> str | None:
        return self.category.name if self.category is not None else None

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        max_stock_threshold: int,
        brand_id: int,
        category_id: int,
    ) -> "CatalogItem":
        """Build a new item. The slug is derived here and never recomputed."""
        return cls(
            _slug=to_slug(name),
            _name=name,
            _description=description,
            _price=Decimal("0"),
            _available_stock=0,
            _max_stock_threshold=max_stock_threshold,
            _medias=[],
            _brand_id=brand_id,
            _category_id=category_id,
        )

    def update(self, description: str, brand_id: int, category_id: int) -> None:
        self._description = description
        self._brand_id = brand_id
        self._category_id = category_id

    def set_max_stock_threshold(self, value: int) -> None:
        self._max_stock_threshold = value

    def __repr__(self) -> str:
        return f"<CatalogItem {self._slug}>"
