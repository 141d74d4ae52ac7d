"""SQLAlchemy ORM models."""

from mockbuster.models.actor import Actor, film_actor
from mockbuster.models.base import Base
from mockbuster.models.category import Category, film_category
from mockbuster.models.comment import FilmComment
from mockbuster.models.film import Film

__all__ = [
    "Actor",
    "Base",
    "Category",
    "Film",
    "FilmComment",
    "film_actor",
    "film_category",
]
