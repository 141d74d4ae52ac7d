"""Service layer: input validation and business rules."""

from mockbuster.services.comment_service import CommentService
from mockbuster.services.film_service import FilmService
from mockbuster.services.interfaces import CommentServiceInterface, FilmServiceInterface

__all__ = [
    "CommentService",
    "CommentServiceInterface",
    "FilmService",
    "FilmServiceInterface",
]
