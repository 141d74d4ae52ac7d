"""Film comment API endpoints."""

from fastapi import APIRouter, Depends, Path, status

from mockbuster.api.deps import get_comment_service
from mockbuster.api.errors import service_error
from mockbuster.errors import MockbusterError
from mockbuster.schemas import CommentRequest, CommentResponse
from mockbuster.services import CommentServiceInterface

router = APIRouter()


@router.post(
    "/films/{film_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    request: CommentRequest,
    film_id: int = Path(..., description="Film ID"),
    comment_service: CommentServiceInterface = Depends(get_comment_service),
) -> CommentResponse:
    """
    Add a customer comment to a film.

    The customer name is limited to 100 characters and the comment to 1000.
    """
    try:
        return await comment_service.add_comment(film_id, request)
    except MockbusterError as e:
        raise service_error(e, "Failed to add comment") from e


@router.get("/films/{film_id}/comments", response_model=list[CommentResponse])
async def list_comments(
    film_id: int = Path(..., description="Film ID"),
    comment_service: CommentServiceInterface = Depends(get_comment_service),
) -> list[CommentResponse]:
    """Get a film's comments, newest first."""
    try:
        return await comment_service.get_comments_by_film_id(film_id)
    except MockbusterError as e:
        raise service_error(e, "Failed to retrieve comments") from e
