"""Tests for the films and categories API endpoints."""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from httpx import AsyncClient

from mockbuster.api.deps import get_film_service
from mockbuster.errors import DatabaseError, FilmNotFoundError, ValidationError
from mockbuster.schemas import CategoryResponse, FilmFilters, FilmListResponse, FilmResponse
from mockbuster.services import FilmServiceInterface

# ---------------------------------------------------------------------------
# Test data helpers
# ---------------------------------------------------------------------------


def make_film(film_id: int = 1, title: str = "Test Film", rating: str = "PG") -> FilmResponse:
    return FilmResponse(
        film_id=film_id,
        title=title,
        description="A test film",
        release_year=2006,
        language_id=1,
        rental_duration=3,
        rental_rate=0.99,
        length=86,
        replacement_cost=20.99,
        rating=rating,
        last_update=datetime(2013, 5, 26, 14, 50, 58),
        special_features=["Trailers", "Deleted Scenes"],
        categories=["Documentary"],
        actors=["Penelope Guiness"],
    )


@pytest.fixture
def film_service(test_app: FastAPI) -> AsyncMock:
    service = AsyncMock(spec=FilmServiceInterface)
    test_app.dependency_overrides[get_film_service] = lambda: service
    return service


# ---------------------------------------------------------------------------
# GET /api/v1/films
# ---------------------------------------------------------------------------


async def test_list_films(client: AsyncClient, film_service: AsyncMock) -> None:
    film_service.get_films.return_value = FilmListResponse(
        films=[make_film(1, "Test Film 1"), make_film(2, "Test Film 2", "G")],
        total=2,
        page=1,
        limit=5,
    )

    response = await client.get("/api/v1/films?page=1&limit=5")

    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 2
    assert data["page"] == 1
    assert data["limit"] == 5
    assert [f["title"] for f in data["films"]] == ["Test Film 1", "Test Film 2"]
    assert data["films"][0]["special_features"] == ["Trailers", "Deleted Scenes"]
    assert data["films"][0]["rental_rate"] == 0.99


async def test_list_films_passes_filters(client: AsyncClient, film_service: AsyncMock) -> None:
    film_service.get_films.return_value = FilmListResponse(films=[], total=0, page=2, limit=20)

    await client.get("/api/v1/films?title=ace&rating=PG-13&category=Action&page=2&limit=20")

    film_service.get_films.assert_awaited_once_with(
        FilmFilters(title="ace", rating="PG-13", category="Action", page=2, limit=20)
    )


@pytest.mark.parametrize(
    "query",
    ["", "?page=0&limit=0", "?page=-1&limit=-10", "?page=abc&limit=xyz", "?page=&limit="],
)
async def test_list_films_defaults_pagination(
    client: AsyncClient, film_service: AsyncMock, query: str
) -> None:
    film_service.get_films.return_value = FilmListResponse(films=[], total=0, page=1, limit=10)

    response = await client.get(f"/api/v1/films{query}")

    assert response.status_code == 200
    filters = film_service.get_films.await_args.args[0]
    assert filters.page == 1
    assert filters.limit == 10


async def test_list_films_validation_error(client: AsyncClient, film_service: AsyncMock) -> None:
    film_service.get_films.side_effect = ValidationError("limit must be between 1 and 100")

    response = await client.get("/api/v1/films?limit=500")

    assert response.status_code == 400
    assert response.json() == {
        "error": "Validation failed",
        "details": "limit must be between 1 and 100",
    }


async def test_list_films_service_error(client: AsyncClient, film_service: AsyncMock) -> None:
    film_service.get_films.side_effect = DatabaseError("database error")

    response = await client.get("/api/v1/films?page=1&limit=10")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to retrieve films", "details": "database error"}


# ---------------------------------------------------------------------------
# GET /api/v1/films/{id}
# ---------------------------------------------------------------------------


async def test_get_film(client: AsyncClient, film_service: AsyncMock) -> None:
    film_service.get_film_by_id.return_value = make_film(1, "Academy Dinosaur")

    response = await client.get("/api/v1/films/1")

    assert response.status_code == 200
    data = response.json()
    assert data["film_id"] == 1
    assert data["title"] == "Academy Dinosaur"
    assert data["categories"] == ["Documentary"]
    assert data["actors"] == ["Penelope Guiness"]
    film_service.get_film_by_id.assert_awaited_once_with(1)


async def test_get_film_not_found(client: AsyncClient, film_service: AsyncMock) -> None:
    film_service.get_film_by_id.side_effect = FilmNotFoundError()

    response = await client.get("/api/v1/films/99999")

    assert response.status_code == 404
    assert response.json() == {"error": "Film not found", "details": "film not found"}


async def test_get_film_invalid_id(client: AsyncClient, film_service: AsyncMock) -> None:
    response = await client.get("/api/v1/films/invalid")

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid film ID"
    film_service.get_film_by_id.assert_not_called()


async def test_get_film_non_positive_id(client: AsyncClient, film_service: AsyncMock) -> None:
    film_service.get_film_by_id.side_effect = ValidationError("invalid film ID")

    response = await client.get("/api/v1/films/0")

    assert response.status_code == 400
    assert response.json()["details"] == "invalid film ID"


async def test_get_film_service_error(client: AsyncClient, film_service: AsyncMock) -> None:
    film_service.get_film_by_id.side_effect = DatabaseError("error querying film: timeout")

    response = await client.get("/api/v1/films/1")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to retrieve film",
        "details": "error querying film: timeout",
    }


# ---------------------------------------------------------------------------
# GET /api/v1/categories
# ---------------------------------------------------------------------------


async def test_list_categories(client: AsyncClient, film_service: AsyncMock) -> None:
    film_service.get_categories.return_value = [
        CategoryResponse(category_id=1, name="Action"),
        CategoryResponse(category_id=2, name="Animation"),
    ]

    response = await client.get("/api/v1/categories")

    assert response.status_code == 200
    assert response.json() == [
        {"category_id": 1, "name": "Action"},
        {"category_id": 2, "name": "Animation"},
    ]


async def test_list_categories_service_error(client: AsyncClient, film_service: AsyncMock) -> None:
    film_service.get_categories.side_effect = DatabaseError("database error")

    response = await client.get("/api/v1/categories")

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to retrieve categories"
