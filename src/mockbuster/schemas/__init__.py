"""Pydantic schemas for API requests and responses."""

from mockbuster.schemas.comment import CommentRequest, CommentResponse
from mockbuster.schemas.common import APIInfoResponse, ErrorResponse, WelcomeResponse
from mockbuster.schemas.film import (
    CategoryResponse,
    FilmFilters,
    FilmListResponse,
    FilmResponse,
)

__all__ = [
    "APIInfoResponse",
    "CategoryResponse",
    "CommentRequest",
    "CommentResponse",
    "ErrorResponse",
    "FilmFilters",
    "FilmListResponse",
    "FilmResponse",
    "WelcomeResponse",
]
