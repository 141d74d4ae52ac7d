"""Shared test fixtures."""

from collections.abc import AsyncIterator
from datetime import datetime, timedelta

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from mockbuster.api.errors import register_exception_handlers
from mockbuster.api.routes import comments, films, root
from mockbuster.errors import FilmNotFoundError
from mockbuster.repositories import CommentRepositoryInterface, FilmRepositoryInterface
from mockbuster.schemas import (
    CategoryResponse,
    CommentRequest,
    CommentResponse,
    FilmFilters,
    FilmListResponse,
    FilmResponse,
)

# ---------------------------------------------------------------------------
# In-memory repositories
# ---------------------------------------------------------------------------


class InMemoryFilmRepository(FilmRepositoryInterface):
    """Film repository backed by a dict, mirroring the SQL filter semantics."""

    def __init__(
        self,
        films: list[FilmResponse] | None = None,
        categories: list[CategoryResponse] | None = None,
    ) -> None:
        self.films = {film.film_id: film for film in films or []}
        self.categories = categories or []
        self.error: Exception | None = None
        self.calls: list[str] = []

    def _check_error(self) -> None:
        if self.error is not None:
            raise self.error

    async def get_films(self, filters: FilmFilters) -> FilmListResponse:
        self.calls.append("get_films")
        self._check_error()
        filters = filters.with_default_pagination()

        matches = [
            film
            for film in sorted(self.films.values(), key=lambda f: f.title)
            if (not filters.title or filters.title.lower() in film.title.lower())
            and (not filters.rating or film.rating == filters.rating)
            and (
                not filters.category
                or any(filters.category.lower() in c.lower() for c in film.categories)
            )
        ]
        page = matches[filters.offset : filters.offset + filters.limit]
        return FilmListResponse(
            films=page, total=len(matches), page=filters.page, limit=filters.limit
        )

    async def get_film_by_id(self, film_id: int) -> FilmResponse:
        self.calls.append("get_film_by_id")
        self._check_error()
        if film_id not in self.films:
            raise FilmNotFoundError()
        return self.films[film_id]

    async def get_categories(self) -> list[CategoryResponse]:
        self.calls.append("get_categories")
        self._check_error()
        return sorted(self.categories, key=lambda c: c.name)


class InMemoryCommentRepository(CommentRepositoryInterface):
    """Comment repository that validates film ids against a film repository."""

    def __init__(self, film_repo: InMemoryFilmRepository) -> None:
        self.film_repo = film_repo
        self.comments: list[CommentResponse] = []
        self.error: Exception | None = None

    async def add_comment(self, film_id: int, request: CommentRequest) -> CommentResponse:
        if self.error is not None:
            raise self.error
        if film_id not in self.film_repo.films:
            raise FilmNotFoundError()

        # One minute apart so newest-first ordering is deterministic
        created_at = datetime(2024, 1, 1) + timedelta(
            minutes=len(self.comments)
        )
        comment = CommentResponse(
            id=len(self.comments) + 1,
            film_id=film_id,
            customer_name=request.customer_name,
            comment=request.comment,
            created_at=created_at,
        )
        self.comments.append(comment)
        return comment

    async def get_comments_by_film_id(self, film_id: int) -> list[CommentResponse]:
        if self.error is not None:
            raise self.error
        if film_id not in self.film_repo.films:
            raise FilmNotFoundError()
        matching = [c for c in self.comments if c.film_id == film_id]
        return sorted(matching, key=lambda c: c.created_at, reverse=True)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def make_film(
    film_id: int = 1,
    title: str = "Test Film 1",
    rating: str | None = "PG",
    categories: list[str] | None = None,
) -> FilmResponse:
    return FilmResponse(
        film_id=film_id,
        title=title,
        description="A test film",
        release_year=2006,
        language_id=1,
        rental_duration=3,
        rental_rate=4.99,
        length=90,
        replacement_cost=19.99,
        rating=rating,
        last_update=datetime(2013, 5, 26, 14, 50, 58),
        special_features=["Trailers"],
        categories=categories or [],
        actors=[],
    )


@pytest.fixture
def film_repo() -> InMemoryFilmRepository:
    return InMemoryFilmRepository(
        films=[
            make_film(1, "Test Film 1", "PG", ["Action"]),
            make_film(2, "Test Film 2", "G", ["Comedy"]),
        ],
        categories=[
            CategoryResponse(category_id=2, name="Comedy"),
            CategoryResponse(category_id=1, name="Action"),
        ],
    )


@pytest.fixture
def comment_repo(film_repo: InMemoryFilmRepository) -> InMemoryCommentRepository:
    return InMemoryCommentRepository(film_repo)


@pytest.fixture
def test_app() -> FastAPI:
    """FastAPI app without the database lifespan, for API tests."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(root.router)
    app.include_router(films.router, prefix="/api/v1")
    app.include_router(comments.router, prefix="/api/v1")
    return app


@pytest.fixture
async def client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as c:
        yield c
    test_app.dependency_overrides.clear()
