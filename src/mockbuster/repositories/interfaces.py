"""Abstract repository contracts.

Services depend on these rather than on the SQL implementations so tests
can substitute in-memory fakes.
"""

from abc import ABC, abstractmethod

from mockbuster.schemas import (
    CategoryResponse,
    CommentRequest,
    CommentResponse,
    FilmFilters,
    FilmListResponse,
    FilmResponse,
)


class FilmRepositoryInterface(ABC):
    """Read access to films and categories."""

    @abstractmethod
    async def get_films(self, filters: FilmFilters) -> FilmListResponse:
        """
        Fetch one page of films matching the filters.

        Raises:
            DatabaseError: If any query fails
        """

    @abstractmethod
    async def get_film_by_id(self, film_id: int) -> FilmResponse:
        """
        Fetch a single film.

        Raises:
            FilmNotFoundError: If no film has this id
            DatabaseError: If any query fails
        """

    @abstractmethod
    async def get_categories(self) -> list[CategoryResponse]:
        """Fetch all categories ordered by name."""


class CommentRepositoryInterface(ABC):
    """Storage for customer comments."""

    @abstractmethod
    async def add_comment(self, film_id: int, request: CommentRequest) -> CommentResponse:
        """
        Store a new comment for a film.

        Raises:
            FilmNotFoundError: If the film does not exist (nothing is inserted)
            DatabaseError: If any query fails
        """

    @abstractmethod
    async def get_comments_by_film_id(self, film_id: int) -> list[CommentResponse]:
        """
        Fetch a film's comments, newest first.

        Raises:
            FilmNotFoundError: If the film does not exist
            DatabaseError: If any query fails
        """
