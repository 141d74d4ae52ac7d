"""FastAPI dependency providers wiring repositories into services.

Each request gets one database session shared by its repositories.
Tests replace these providers through ``app.dependency_overrides``.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mockbuster.database import get_db
from mockbuster.repositories import (
    CommentRepository,
    CommentRepositoryInterface,
    FilmRepository,
    FilmRepositoryInterface,
)
from mockbuster.services import (
    CommentService,
    CommentServiceInterface,
    FilmService,
    FilmServiceInterface,
)


def get_film_repository(db: AsyncSession = Depends(get_db)) -> FilmRepositoryInterface:
    return FilmRepository(db)


def get_comment_repository(db: AsyncSession = Depends(get_db)) -> CommentRepositoryInterface:
    return CommentRepository(db)


def get_film_service(
    film_repo: FilmRepositoryInterface = Depends(get_film_repository),
) -> FilmServiceInterface:
    return FilmService(film_repo)


def get_comment_service(
    comment_repo: CommentRepositoryInterface = Depends(get_comment_repository),
    film_repo: FilmRepositoryInterface = Depends(get_film_repository),
) -> CommentServiceInterface:
    return CommentService(comment_repo, film_repo)
