"""Category model and the film/category association table."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column

from mockbuster.models.base import Base

film_category = Table(
    "film_category",
    Base.metadata,
    Column("film_id", Integer, ForeignKey("film.film_id"), primary_key=True),
    Column("category_id", Integer, ForeignKey("category.category_id"), primary_key=True),
    Column("last_update", DateTime, nullable=False),
)


class Category(Base):
    """Film genre, e.g. "Action" or "Documentary"."""

    __tablename__ = "category"

    category_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(25), nullable=False)
    last_update: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"<Category(category_id={self.category_id}, name={self.name!r})>"
