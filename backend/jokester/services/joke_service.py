"""Joke Service — fetch-one, fetch-random, create, delete and list for jokes.

Invariants:
    - Each call is stateless and touches the repository at most once per write
    - get_joke never mutates; is_owner is computed from the resolved identity
    - get_random_joke raises ResourceNotFoundError on an empty collection and
      when the offset fetch races a concurrent delete
    - create_joke persists nothing unless every validator passes
    - delete_joke checks intent before lookup and ownership before delete;
      a denied delete leaves the joke untouched

Design Decisions:
    - Repository and RNG injected: the service runs against a fake store in tests
    - User-facing messages attached via ErrorContext at the raise site
"""

import logging
import random

from jokester.core.domain_types import Identity, JokeId, JokeIntent
from jokester.core.enforce_ownership import (
    check_can_delete, is_owner, require_jokester,
)
from jokester.core.errors import (
    ErrorContext, ResourceNotFoundError, UnsupportedIntentError,
)
from jokester.core.outcomes import JokeCreated, JokeDeleted, JokeView, Redirect
from jokester.core.pick_random import pick_offset
from jokester.core.repository_protocols import JokeLike, JokeRepository
from jokester.core.user_messages import (
    JOKE_NOT_FOUND, NO_JOKES_TO_DISPLAY, unknown_joke,
)
from jokester.core.validate_joke_form import ActionData, validate_submission

logger = logging.getLogger(__name__)

JOKE_DETAIL_ROUTE = "get_joke"
JOKE_LIST_ROUTE = "list_jokes"


class JokeService:
    """Joke operations over an injected repository."""

    def __init__(self, repo: JokeRepository, rng: random.Random | None = None):
        self.repo = repo
        self.rng = rng

    async def get_joke(self, joke_id: JokeId, identity: Identity) -> JokeView:
        joke = await self.repo.get(joke_id)
        if joke is None:
            raise ResourceNotFoundError(
                "Joke", joke_id,
                ErrorContext(joke_id=joke_id, user_message=unknown_joke(joke_id)),
            )
        return JokeView(joke=joke, is_owner=is_owner(joke.jokester_id, identity))

    async def get_random_joke(self) -> JokeLike:
        count = await self.repo.count()
        offset = pick_offset(count, self.rng)
        joke = await self.repo.get_at_offset(offset) if offset is not None else None
        if joke is None:
            if offset is not None:
                logger.warning(
                    f"Random joke at offset {offset} vanished after count={count}",
                )
            raise ResourceNotFoundError(
                "random joke", None,
                ErrorContext(user_message=NO_JOKES_TO_DISPLAY),
            )
        return joke

    async def list_jokes(self, limit: int) -> list[JokeLike]:
        return await self.repo.list_latest(limit)

    async def create_joke(
        self, name: object, content: object, identity: Identity,
    ) -> JokeCreated | ActionData:
        """Validate and persist a new joke authored by identity.

        Returns ActionData (nothing persisted) when the submission is malformed
        or any field fails validation.
        """
        jokester_id = require_jokester(identity)
        result = validate_submission({"name": name, "content": content})
        if isinstance(result, ActionData):
            return result

        joke = await self.repo.create(
            name=result.name, content=result.content, jokester_id=jokester_id,
        )
        logger.info(
            f"Joke created: {joke.name!r}",
            extra={"joke_id": joke.id, "user_id": jokester_id},
        )
        return JokeCreated(
            joke_id=JokeId(joke.id),
            redirect=Redirect(JOKE_DETAIL_ROUTE, {"joke_id": joke.id}),
        )

    async def delete_joke(
        self, joke_id: JokeId, intent: object, identity: Identity,
    ) -> JokeDeleted:
        if intent != JokeIntent.DELETE.value:
            raise UnsupportedIntentError(
                intent, ErrorContext(joke_id=joke_id, user_id=identity),
            )

        joke = await self.repo.get(joke_id)
        if joke is None:
            raise ResourceNotFoundError(
                "Joke", joke_id,
                ErrorContext(joke_id=joke_id, user_message=JOKE_NOT_FOUND),
            )

        check_can_delete(joke.id, joke.jokester_id, identity)

        await self.repo.delete(JokeId(joke.id))
        logger.info(
            "Joke deleted", extra={"joke_id": joke.id, "user_id": identity},
        )
        return JokeDeleted(joke_id=JokeId(joke.id), redirect=Redirect(JOKE_LIST_ROUTE))
