"""Translation of application errors into JSON error responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from mockbuster.errors import FilmNotFoundError, MockbusterError, ValidationError
from mockbuster.schemas import ErrorResponse

logger = logging.getLogger(__name__)


class APIError(Exception):
    """Error rendered as ``{"error": ..., "details": ...}`` with the given status."""

    def __init__(self, status_code: int, error: str, details: str = "") -> None:
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details


def service_error(exc: MockbusterError, summary: str) -> APIError:
    """
    Map a service/repository error onto an HTTP error.

    Args:
        exc: Error raised by the service layer
        summary: Summary used for unexpected (500) failures

    Returns:
        APIError with 404 for a missing film, 400 for invalid input,
        otherwise 500
    """
    if isinstance(exc, FilmNotFoundError):
        return APIError(status.HTTP_404_NOT_FOUND, "Film not found", str(exc))
    if isinstance(exc, ValidationError):
        return APIError(status.HTTP_400_BAD_REQUEST, "Validation failed", str(exc))
    return APIError(status.HTTP_500_INTERNAL_SERVER_ERROR, summary, str(exc))


def error_response(status_code: int, error: str, details: str = "") -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.error}: {exc.details}")
    return error_response(exc.status_code, exc.error, exc.details)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render FastAPI's request validation failures as 400 responses."""
    errors = exc.errors()

    if any(tuple(err["loc"][:2]) == ("path", "film_id") for err in errors):
        summary = "Invalid film ID"
    elif any(err["type"] == "json_invalid" for err in errors):
        summary = "Invalid request body"
    else:
        summary = "Validation failed"

    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in errors
    )
    return error_response(status.HTTP_400_BAD_REQUEST, summary, details)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
