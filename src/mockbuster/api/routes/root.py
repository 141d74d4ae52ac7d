"""Welcome, API info and health check endpoints."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from mockbuster.database import ping
from mockbuster.schemas import APIInfoResponse, WelcomeResponse

logger = logging.getLogger(__name__)
router = APIRouter()

API_ENDPOINTS = [
    "GET /api/v1/films - List films with filtering and pagination",
    "GET /api/v1/films/{id} - Get detailed film information",
    "GET /api/v1/categories - List all available categories",
    "POST /api/v1/films/{id}/comments - Add a comment to a film",
    "GET /api/v1/films/{id}/comments - Get comments for a film",
]


@router.get("/", response_model=WelcomeResponse)
async def welcome() -> WelcomeResponse:
    return WelcomeResponse(message="Welcome to Mockbuster Movie API!")


@router.get("/api/v1", response_model=APIInfoResponse)
async def api_info(request: Request) -> APIInfoResponse:
    """Describe the API and link to the interactive documentation."""
    docs_url = request.app.docs_url or ""
    return APIInfoResponse(
        name="Mockbuster Movie API",
        version=request.app.version,
        description="A RESTful API for the Mockbuster DVD rental business",
        endpoints=API_ENDPOINTS,
        documentation=f"{str(request.base_url).rstrip('/')}{docs_url}",
    )


@router.get("/health", tags=["health"])
async def health_check(request: Request) -> JSONResponse:
    """
    Health check endpoint.

    Returns:
        200 when the database answers a trivial query, 503 otherwise
    """
    try:
        await ping(request.app.state.engine)
    except SQLAlchemyError as e:
        logger.error(f"Health check database ping failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "database": "error"},
        )
    return JSONResponse(content={"status": "ok", "database": "ok"})
