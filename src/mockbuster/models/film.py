"""Film model mapped onto the dvdrental ``film`` table."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, SmallInteger, String, Text
from sqlalchemy.dialects.postgresql import ARRAY, ENUM
from sqlalchemy.orm import Mapped, mapped_column

from mockbuster.models.base import Base

RATINGS = ("G", "PG", "PG-13", "R", "NC-17")

# Existing PostgreSQL enum; never created or dropped from here
mpaa_rating = ENUM(*RATINGS, name="mpaa_rating", create_type=False)


class Film(Base):
    """
    Film model.

    Reference data seeded with the database. The API only reads from it.
    ``special_features`` is a PostgreSQL ``text[]`` column.
    """

    __tablename__ = "film"

    film_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    release_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    language_id: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    rental_duration: Mapped[int] = mapped_column(SmallInteger, nullable=False, default=3)
    rental_rate: Mapped[Decimal] = mapped_column(Numeric(4, 2), nullable=False)
    length: Mapped[int | None] = mapped_column(SmallInteger, nullable=True)
    replacement_cost: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False)
    rating: Mapped[str | None] = mapped_column(mpaa_rating, nullable=True)
    last_update: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    special_features: Mapped[list[str] | None] = mapped_column(ARRAY(Text), nullable=True)

    def __repr__(self) -> str:
        return f"<Film(film_id={self.film_id}, title={self.title!r}, rating={self.rating!r})>"
