"""Actor model and the film/actor association table."""

from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column

from mockbuster.models.base import Base

film_actor = Table(
    "film_actor",
    Base.metadata,
    Column("actor_id", Integer, ForeignKey("actor.actor_id"), primary_key=True),
    Column("film_id", Integer, ForeignKey("film.film_id"), primary_key=True),
    Column("last_update", DateTime, nullable=False),
)


class Actor(Base):
    __tablename__ = "actor"

    actor_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(45), nullable=False)
    last_name: Mapped[str] = mapped_column(String(45), nullable=False, index=True)
    last_update: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    def __repr__(self) -> str:
        return f"<Actor(actor_id={self.actor_id}, last_name={self.last_name!r})>"
