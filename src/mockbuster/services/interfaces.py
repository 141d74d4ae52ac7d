"""Abstract service contracts used by the API layer."""

from abc import ABC, abstractmethod

from mockbuster.schemas import (
    CategoryResponse,
    CommentRequest,
    CommentResponse,
    FilmFilters,
    FilmListResponse,
    FilmResponse,
)


class FilmServiceInterface(ABC):
    """Film business operations."""

    @abstractmethod
    async def get_films(self, filters: FilmFilters) -> FilmListResponse:
        """Retrieve films with optional filtering and pagination."""

    @abstractmethod
    async def get_film_by_id(self, film_id: int) -> FilmResponse:
        """Retrieve a specific film by its ID."""

    @abstractmethod
    async def get_categories(self) -> list[CategoryResponse]:
        """Retrieve all available film categories."""


class CommentServiceInterface(ABC):
    """Comment business operations."""

    @abstractmethod
    async def add_comment(self, film_id: int, request: CommentRequest) -> CommentResponse:
        """Add a new comment to a film."""

    @abstractmethod
    async def get_comments_by_film_id(self, film_id: int) -> list[CommentResponse]:
        """Retrieve all comments for a specific film."""
