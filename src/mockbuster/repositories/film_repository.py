"""SQL repository for films and categories."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Select, Text, cast, distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from mockbuster.errors import FilmNotFoundError
from mockbuster.models import Actor, Category, Film, film_actor, film_category
from mockbuster.repositories.base import database_errors
from mockbuster.repositories.interfaces import FilmRepositoryInterface
from mockbuster.schemas import CategoryResponse, FilmFilters, FilmListResponse, FilmResponse
from mockbuster.utils.text import parse_special_features

# special_features is read in its text form, e.g. '{Trailers,Commentaries}'
FILM_COLUMNS = (
    Film.film_id,
    Film.title,
    Film.description,
    Film.release_year,
    Film.language_id,
    Film.rental_duration,
    Film.rental_rate,
    Film.length,
    Film.replacement_cost,
    Film.rating,
    Film.last_update,
    cast(Film.special_features, Text).label("special_features"),
)


class FilmRepository(FilmRepositoryInterface):
    """
    Film queries against the dvdrental schema.

    Listing joins film -> film_category -> category so the category filter
    can match on name; DISTINCT keeps films with several categories from
    appearing more than once.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_films(self, filters: FilmFilters) -> FilmListResponse:
        filters = filters.with_default_pagination()

        with database_errors("querying films"):
            result = await self.db.execute(self.build_films_query(filters))
            rows = result.mappings().all()

        films = [await self._to_film(row) for row in rows]

        with database_errors("counting films"):
            result = await self.db.execute(self.build_count_query(filters))
            total = result.scalar_one()

        return FilmListResponse(
            films=films,
            total=total,
            page=filters.page,
            limit=filters.limit,
        )

    async def get_film_by_id(self, film_id: int) -> FilmResponse:
        stmt = select(*FILM_COLUMNS).where(Film.film_id == film_id)

        with database_errors("querying film"):
            result = await self.db.execute(stmt)
            row = result.mappings().first()

        if row is None:
            raise FilmNotFoundError()

        return await self._to_film(row)

    async def get_categories(self) -> list[CategoryResponse]:
        stmt = select(Category.category_id, Category.name).order_by(Category.name)

        with database_errors("querying categories"):
            result = await self.db.execute(stmt)
            rows = result.mappings().all()

        return [CategoryResponse.model_validate(dict(row)) for row in rows]

    def build_films_query(self, filters: FilmFilters) -> Select:
        """SELECT for one page of films matching the filters."""
        stmt = self._apply_filters(
            select(*FILM_COLUMNS).distinct().select_from(Film),
            filters,
        )
        return stmt.order_by(Film.title).limit(filters.limit).offset(filters.offset)

    def build_count_query(self, filters: FilmFilters) -> Select:
        """SELECT counting every film matching the filters, ignoring pagination."""
        return self._apply_filters(
            select(func.count(distinct(Film.film_id))).select_from(Film),
            filters,
        )

    def _apply_filters(self, stmt: Select, filters: FilmFilters) -> Select:
        stmt = stmt.outerjoin(film_category, film_category.c.film_id == Film.film_id).outerjoin(
            Category, Category.category_id == film_category.c.category_id
        )

        if filters.title:
            stmt = stmt.where(Film.title.ilike(f"%{filters.title}%"))
        if filters.rating:
            stmt = stmt.where(Film.rating == filters.rating)
        if filters.category:
            stmt = stmt.where(Category.name.ilike(f"%{filters.category}%"))

        return stmt

    async def _to_film(self, row: Mapping[str, Any]) -> FilmResponse:
        """Build a FilmResponse from a film row, loading its categories and actors."""
        data = dict(row)
        data["special_features"] = parse_special_features(data.get("special_features"))
        data["categories"] = await self._get_film_categories(data["film_id"])
        data["actors"] = await self._get_film_actors(data["film_id"])
        return FilmResponse.model_validate(data)

    async def _get_film_categories(self, film_id: int) -> list[str]:
        stmt = (
            select(Category.name)
            .join(film_category, film_category.c.category_id == Category.category_id)
            .where(film_category.c.film_id == film_id)
            .order_by(Category.name)
        )

        with database_errors("querying film categories"):
            result = await self.db.execute(stmt)
            return list(result.scalars().all())

    async def _get_film_actors(self, film_id: int) -> list[str]:
        full_name = (Actor.first_name + " " + Actor.last_name).label("actor_name")
        stmt = (
            select(full_name)
            .join(film_actor, film_actor.c.actor_id == Actor.actor_id)
            .where(film_actor.c.film_id == film_id)
            .order_by(Actor.last_name, Actor.first_name)
        )

        with database_errors("querying film actors"):
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
