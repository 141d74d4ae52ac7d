"""Helpers shared by the SQL repositories."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import exists, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mockbuster.errors import DatabaseError
from mockbuster.models import Film


@contextmanager
def database_errors(action: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as DatabaseError("error <action>: ...")."""
    try:
        yield
    except SQLAlchemyError as exc:
        raise DatabaseError(f"error {action}: {exc}") from exc


async def film_exists(db: AsyncSession, film_id: int) -> bool:
    stmt = select(exists().where(Film.film_id == film_id))
    with database_errors("checking film existence"):
        result = await db.execute(stmt)
        return bool(result.scalar())
