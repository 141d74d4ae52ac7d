"""Pydantic schemas for static and error payloads."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    details: str = ""


class WelcomeResponse(BaseModel):
    message: str


class APIInfoResponse(BaseModel):
    """Description of the API returned from the versioned root."""

    name: str
    version: str
    description: str
    endpoints: list[str]
    documentation: str
