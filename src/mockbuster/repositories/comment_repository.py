"""SQL repository for film comments."""

from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from mockbuster.errors import FilmNotFoundError
from mockbuster.models import FilmComment
from mockbuster.repositories.base import database_errors, film_exists
from mockbuster.repositories.interfaces import CommentRepositoryInterface
from mockbuster.schemas import CommentRequest, CommentResponse


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, matching the TIMESTAMP column."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class CommentRepository(CommentRepositoryInterface):
    """
    Comment storage in the ``film_comments`` table.

    Both operations check that the film exists first, so a missing film is
    reported as FilmNotFoundError rather than a foreign key violation.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def add_comment(self, film_id: int, request: CommentRequest) -> CommentResponse:
        if not await film_exists(self.db, film_id):
            raise FilmNotFoundError()

        comment = FilmComment(
            film_id=film_id,
            customer_name=request.customer_name,
            comment=request.comment,
            created_at=utc_now(),
        )

        with database_errors("inserting comment"):
            self.db.add(comment)
            # Flush to get the id assigned by the film_comments sequence
            await self.db.flush()
            # Commit before responding so a 201 always means the row is stored
            await self.db.commit()

        return CommentResponse.model_validate(comment)

    async def get_comments_by_film_id(self, film_id: int) -> list[CommentResponse]:
        if not await film_exists(self.db, film_id):
            raise FilmNotFoundError()

        stmt = (
            select(FilmComment)
            .where(FilmComment.film_id == film_id)
            .order_by(FilmComment.created_at.desc())
        )

        with database_errors("querying comments"):
            result = await self.db.execute(stmt)
            comments = result.scalars().all()

        return [CommentResponse.model_validate(comment) for comment in comments]
