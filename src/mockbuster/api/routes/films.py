"""Films and categories API endpoints."""

from fastapi import APIRouter, Depends, Path, Query

from mockbuster.api.deps import get_film_service
from mockbuster.api.errors import service_error
from mockbuster.errors import MockbusterError
from mockbuster.schemas import CategoryResponse, FilmFilters, FilmListResponse, FilmResponse
from mockbuster.schemas.film import DEFAULT_LIMIT, DEFAULT_PAGE
from mockbuster.services import FilmServiceInterface

router = APIRouter()


def parse_pagination_value(raw: str | None, default: int) -> int:
    """Parse a page/limit query value, falling back to the default when missing or not positive."""
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@router.get("/films", response_model=FilmListResponse)
async def list_films(
    title: str = Query("", description="Case-insensitive title substring"),
    rating: str = Query("", description="Rating: G, PG, PG-13, R or NC-17"),
    category: str = Query("", description="Case-insensitive category name substring"),
    page: str | None = Query(None, description="Page number (default 1)"),
    limit: str | None = Query(None, description="Films per page, 1-100 (default 10)"),
    film_service: FilmServiceInterface = Depends(get_film_service),
) -> FilmListResponse:
    """
    List films with optional filters.

    Results are ordered by title. ``total`` counts every matching film,
    independent of pagination.
    """
    filters = FilmFilters(
        title=title,
        rating=rating,
        category=category,
        page=parse_pagination_value(page, DEFAULT_PAGE),
        limit=parse_pagination_value(limit, DEFAULT_LIMIT),
    )

    try:
        return await film_service.get_films(filters)
    except MockbusterError as e:
        raise service_error(e, "Failed to retrieve films") from e


@router.get("/films/{film_id}", response_model=FilmResponse)
async def get_film(
    film_id: int = Path(..., description="Film ID"),
    film_service: FilmServiceInterface = Depends(get_film_service),
) -> FilmResponse:
    """Get a film with its categories and actors."""
    try:
        return await film_service.get_film_by_id(film_id)
    except MockbusterError as e:
        raise service_error(e, "Failed to retrieve film") from e


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(
    film_service: FilmServiceInterface = Depends(get_film_service),
) -> list[CategoryResponse]:
    """List all film categories ordered by name."""
    try:
        return await film_service.get_categories()
    except MockbusterError as e:
        raise service_error(e, "Failed to retrieve categories") from e
