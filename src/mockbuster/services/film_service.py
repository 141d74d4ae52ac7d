"""Film service: filter validation and film lookups."""

import logging

from mockbuster.errors import FilmNotFoundError, ValidationError
from mockbuster.models.film import RATINGS
from mockbuster.repositories import FilmRepositoryInterface
from mockbuster.schemas import CategoryResponse, FilmFilters, FilmListResponse, FilmResponse
from mockbuster.services.interfaces import FilmServiceInterface

logger = logging.getLogger(__name__)

MAX_LIMIT = 100


class FilmService(FilmServiceInterface):
    """
    Business rules for browsing the film catalog.

    Filters are validated exactly as supplied before any defaults are
    applied, so an explicit page or limit of 0 is rejected rather than
    silently replaced.
    """

    def __init__(self, film_repo: FilmRepositoryInterface) -> None:
        self.film_repo = film_repo

    async def get_films(self, filters: FilmFilters) -> FilmListResponse:
        try:
            self.validate_filters(filters)
        except ValidationError as e:
            logger.warning(f"Invalid filters provided {filters!r}: {e}")
            raise

        filters = filters.with_default_pagination()

        try:
            films = await self.film_repo.get_films(filters)
        except Exception as e:
            logger.error(f"Failed to retrieve films for {filters!r}: {e}")
            raise

        logger.info(f"Retrieved {len(films.films)} films (total {films.total})")
        return films

    async def get_film_by_id(self, film_id: int) -> FilmResponse:
        if film_id <= 0:
            logger.warning(f"Invalid film ID provided: {film_id}")
            raise ValidationError("invalid film ID")

        try:
            film = await self.film_repo.get_film_by_id(film_id)
        except FilmNotFoundError:
            logger.warning(f"Film not found: {film_id}")
            raise
        except Exception as e:
            logger.error(f"Failed to retrieve film {film_id}: {e}")
            raise

        logger.info(f"Retrieved film {film_id}: {film.title}")
        return film

    async def get_categories(self) -> list[CategoryResponse]:
        try:
            categories = await self.film_repo.get_categories()
        except Exception as e:
            logger.error(f"Failed to retrieve categories: {e}")
            raise

        logger.info(f"Retrieved {len(categories)} categories")
        return categories

    def validate_filters(self, filters: FilmFilters) -> None:
        """
        Check pagination ranges and the rating value.

        Raises:
            ValidationError: On the first rule that fails
        """
        if filters.page < 1:
            raise ValidationError("page must be greater than 0")
        if filters.limit < 1 or filters.limit > MAX_LIMIT:
            raise ValidationError(f"limit must be between 1 and {MAX_LIMIT}")
        if filters.rating and filters.rating not in RATINGS:
            raise ValidationError("invalid rating provided")
