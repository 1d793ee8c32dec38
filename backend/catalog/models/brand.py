"""Brand model."""

from sqlalchemy import Integer, String
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, mapped_column, relationship

from catalog.db.base import Base


class CatalogBrand(Base):
    __tablename__ = "CatalogBrands"

    _id: Mapped[int] = mapped_column("Id", Integer, primary_key=True, autoincrement=True)
    _name: Mapped[str] = mapped_column("Brand", String(100), unique=True, nullable=False)

    items = relationship(
        "CatalogItem", back_populates="brand", cascade="all, delete-orphan", passive_deletes=True
    )

    @hybrid_property
    def id(self) -> int:
        return self._id

    @hybrid_property
    def name(self) -> str:
        return self._name

    @classmethod
    def create(cls, name: str) -> "CatalogBrand":
        return cls(_name=name)

    def rename(self, new_name: str) -> None:
        self._name = new_name

    def __repr__(self) -> str:
        return f"<CatalogBrand {self._id}: {self._name}>"
