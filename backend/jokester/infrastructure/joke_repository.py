"""SQL Joke Repository — JokeRepository implemented over an AsyncSession.

Invariants:
    - One repository per request-scoped AsyncSession
    - create and delete commit immediately; each is a single statement
    - get_at_offset orders by (created_at, id) so offsets are stable between calls

Design Decisions:
    - Returns ORM Joke objects: they satisfy JokeLike structurally
    - delete issues DELETE ... WHERE id = :id rather than load-then-delete
"""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jokester.core.domain_types import JokeId, UserId
from jokester.models.joke import Joke


class SqlJokeRepository:
    """Joke persistence backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, joke_id: JokeId) -> Joke | None:
        result = await self.db.execute(select(Joke).where(Joke.id == joke_id))
        return result.scalar_one_or_none()

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(Joke))
        return result.scalar_one()

    async def get_at_offset(self, offset: int) -> Joke | None:
        result = await self.db.execute(
            select(Joke)
            .order_by(Joke.created_at, Joke.id)
            .offset(offset)
            .limit(1)
        )
        return result.scalars().first()

    async def list_latest(self, limit: int) -> list[Joke]:
        result = await self.db.execute(
            select(Joke)
            .order_by(Joke.created_at.desc(), Joke.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())

    async def create(
        self, name: str, content: str, jokester_id: UserId,
    ) -> Joke:
        joke = Joke(name=name, content=content, jokester_id=jokester_id)
        self.db.add(joke)
        await self.db.commit()
        await self.db.refresh(joke)
        return joke

    async def delete(self, joke_id: JokeId) -> None:
        await self.db.execute(delete(Joke).where(Joke.id == joke_id))
        await self.db.commit()
