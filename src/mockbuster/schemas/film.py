"""Pydantic schemas for film and category data."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


class FilmResponse(BaseModel):
    """Film with its category names and actor full names."""

    model_config = ConfigDict(from_attributes=True)

    film_id: int
    title: str
    description: str | None = None
    release_year: int | None = None
    language_id: int
    rental_duration: int
    rental_rate: float
    length: int | None = None
    replacement_cost: float
    rating: str | None = None
    last_update: datetime
    special_features: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    actors: list[str] = Field(default_factory=list)


class FilmListResponse(BaseModel):
    """One page of films plus the total number of matches."""

    films: list[FilmResponse]
    total: int
    page: int
    limit: int


class FilmFilters(BaseModel):
    """
    Search filters for the film listing.

    Empty strings mean "no filter". Page and limit are not range checked
    here; that is left to the film service so out-of-range values can be
    reported back to the caller.
    """

    title: str = ""
    rating: str = ""
    category: str = ""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    def with_default_pagination(self) -> "FilmFilters":
        """Return a copy with non-positive page/limit replaced by the defaults."""
        return self.model_copy(
            update={
                "page": self.page if self.page > 0 else DEFAULT_PAGE,
                "limit": self.limit if self.limit > 0 else DEFAULT_LIMIT,
            }
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class CategoryResponse(BaseModel):
    """Category response schema."""

    model_config = ConfigDict(from_attributes=True)

    category_id: int
    name: str
