"""Session Identity — resolves the signed session cookie to a user id or anonymous.

Invariants:
    - Identity is UserId | None; a missing, empty or non-string userId is anonymous
    - A cookie whose signature does not verify yields an empty session (anonymous)
    - This module never writes the session; login/logout belong to the session provider

Design Decisions:
    - Starlette SessionMiddleware (itsdangerous TimestampSigner) holds the session
      in the cookie itself: no server-side session store
    - get_current_user_id is a FastAPI dependency so tests can override it
"""

from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

from jokester.config import Settings
from jokester.core.domain_types import Identity, UserId

USER_ID_SESSION_KEY = "userId"


def resolve_identity(session: Mapping[str, Any]) -> Identity:
    """Map decoded session data to the requesting user's id."""
    user_id = session.get(USER_ID_SESSION_KEY)
    if not isinstance(user_id, str) or not user_id:
        return None
    return UserId(user_id)


async def get_current_user_id(request: Request) -> Identity:
    """FastAPI dependency: identity of the current request."""
    return resolve_identity(request.session)


def install_session_middleware(app: FastAPI, settings: Settings) -> None:
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        session_cookie=settings.session_cookie_name,
        max_age=settings.session_max_age_seconds,
        same_site="lax",
        https_only=settings.session_https_only,
    )
