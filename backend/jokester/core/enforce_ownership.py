"""Ownership Enforcement — author-reference checks for joke capabilities.

Invariants:
    - All functions are PURE: no IO, no async, no DB
    - An anonymous identity (None) never owns anything
    - Only the author may delete a joke
    - Only a resolved identity may author a joke

Design Decisions:
    - is_owner is a plain comparison usable from any layer; check_can_delete
      raises ForbiddenError because delete denial is a terminal failure
    - require_jokester needs no repository, so the new-joke page check runs
      without a database session
"""

from jokester.core.domain_types import Identity, UserId
from jokester.core.errors import ErrorContext, ForbiddenError, UnauthorizedError
from jokester.core.user_messages import (
    CANNOT_DELETE_OTHERS, LOGIN_REQUIRED_TO_CREATE, NOT_YOUR_JOKE,
)


def is_owner(author_id: str, identity: Identity) -> bool:
    """True when the resolved identity is the joke's author."""
    if identity is None:
        return False
    return author_id == identity


def check_can_delete(joke_id: str, author_id: str, identity: Identity) -> None:
    """Raise ForbiddenError unless identity authored the joke."""
    if not is_owner(author_id, identity):
        raise ForbiddenError(
            CANNOT_DELETE_OTHERS,
            ErrorContext(
                joke_id=joke_id, user_id=identity, user_message=NOT_YOUR_JOKE,
            ),
        )


def require_jokester(identity: Identity) -> UserId:
    """Return the identity that will author a new joke; anonymous is Unauthorized."""
    if identity is None:
        raise UnauthorizedError(
            ErrorContext(user_message=LOGIN_REQUIRED_TO_CREATE),
        )
    return identity
