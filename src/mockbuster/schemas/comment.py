"""Pydantic schemas for film comments."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class CommentRequest(BaseModel):
    """Body of a new comment. Content rules are enforced by the comment service."""

    customer_name: str
    comment: str


class CommentResponse(BaseModel):
    """Comment response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    film_id: int
    customer_name: str
    comment: str
    created_at: datetime
