"""Comment service: comment validation and film existence checks."""

import logging

from mockbuster.errors import FilmNotFoundError, ValidationError
from mockbuster.repositories import CommentRepositoryInterface, FilmRepositoryInterface
from mockbuster.schemas import CommentRequest, CommentResponse
from mockbuster.services.interfaces import CommentServiceInterface

logger = logging.getLogger(__name__)

MAX_CUSTOMER_NAME_LENGTH = 100
MAX_COMMENT_LENGTH = 1000


class CommentService(CommentServiceInterface):
    def __init__(
        self,
        comment_repo: CommentRepositoryInterface,
        film_repo: FilmRepositoryInterface,
    ) -> None:
        self.comment_repo = comment_repo
        self.film_repo = film_repo

    async def add_comment(self, film_id: int, request: CommentRequest) -> CommentResponse:
        """
        Validate and store a comment on an existing film.

        Raises:
            ValidationError: If the film id or the comment content is invalid
            FilmNotFoundError: If the film does not exist
            DatabaseError: If the lookup or insert fails
        """
        self._validate_film_id(film_id)

        try:
            self.validate_comment(request)
        except ValidationError as e:
            logger.warning(f"Invalid comment for film {film_id}: {e}")
            raise

        await self._ensure_film_exists(film_id, "add comment to")

        try:
            comment = await self.comment_repo.add_comment(film_id, request)
        except Exception as e:
            logger.error(f"Failed to add comment to film {film_id}: {e}")
            raise

        logger.info(f"Added comment {comment.id} to film {film_id}")
        return comment

    async def get_comments_by_film_id(self, film_id: int) -> list[CommentResponse]:
        self._validate_film_id(film_id)
        await self._ensure_film_exists(film_id, "get comments for")

        try:
            comments = await self.comment_repo.get_comments_by_film_id(film_id)
        except Exception as e:
            logger.error(f"Failed to retrieve comments for film {film_id}: {e}")
            raise

        logger.info(f"Retrieved {len(comments)} comments for film {film_id}")
        return comments

    def validate_comment(self, request: CommentRequest) -> None:
        """
        Check the customer name and comment text, in that order.

        Raises:
            ValidationError: On the first rule that fails
        """
        if not request.customer_name:
            raise ValidationError("customer name is required")
        if len(request.customer_name) > MAX_CUSTOMER_NAME_LENGTH:
            raise ValidationError(
                f"customer name too long (max {MAX_CUSTOMER_NAME_LENGTH} characters)"
            )

        if not request.comment:
            raise ValidationError("comment text is required")
        if len(request.comment) > MAX_COMMENT_LENGTH:
            raise ValidationError(f"comment text too long (max {MAX_COMMENT_LENGTH} characters)")

    def _validate_film_id(self, film_id: int) -> None:
        if film_id <= 0:
            logger.warning(f"Invalid film ID provided: {film_id}")
            raise ValidationError("invalid film ID")

    async def _ensure_film_exists(self, film_id: int, action: str) -> None:
        try:
            await self.film_repo.get_film_by_id(film_id)
        except FilmNotFoundError:
            logger.warning(f"Cannot {action} non-existent film {film_id}")
            raise
        except Exception as e:
            logger.error(f"Failed to verify film {film_id} exists: {e}")
            raise
