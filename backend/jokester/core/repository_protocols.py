"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO, the pure functions that
      consume their results are never async themselves
"""

from datetime import datetime
from typing import Protocol

from jokester.core.domain_types import JokeId, UserId


class JokeLike(Protocol):
    """Structural contract for Joke objects handed to services and routes.

    Avoids coupling the service to the ORM model while giving mypy
    real type information (unlike Any).
    """
    id: str
    jokester_id: str
    name: str
    content: str
    created_at: datetime


class JokeRepository(Protocol):
    """Contract for joke persistence — implemented by shell."""
    async def get(self, joke_id: JokeId) -> JokeLike | None: ...
    async def count(self) -> int: ...
    async def get_at_offset(self, offset: int) -> JokeLike | None: ...
    async def list_latest(self, limit: int) -> list[JokeLike]: ...
    async def create(
        self, name: str, content: str, jokester_id: UserId,
    ) -> JokeLike: ...
    async def delete(self, joke_id: JokeId) -> None: ...
