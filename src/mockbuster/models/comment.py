"""Customer comments left on films."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column

from mockbuster.models.base import Base


class FilmComment(Base):
    """
    Comment model.

    The only table owned by this service; created by the initial
    Alembic revision. Rows are inserted by the API and never updated.
    """

    __tablename__ = "film_comments"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    film_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("film.film_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    customer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    comment: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return (
            f"<FilmComment(id={self.id}, film_id={self.film_id}, "
            f"customer_name={self.customer_name!r})>"
        )
