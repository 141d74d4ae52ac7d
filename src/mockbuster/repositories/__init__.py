"""Repository layer: SQL construction and row mapping."""

from mockbuster.repositories.comment_repository import CommentRepository
from mockbuster.repositories.film_repository import FilmRepository
from mockbuster.repositories.interfaces import (
    CommentRepositoryInterface,
    FilmRepositoryInterface,
)

__all__ = [
    "CommentRepository",
    "CommentRepositoryInterface",
    "FilmRepository",
    "FilmRepositoryInterface",
]
