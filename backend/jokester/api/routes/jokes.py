"""Joke Routes — listing, random pick, detail, new-joke form and detail actions.

Invariants:
    - Static paths (/random, /new) registered before /{joke_id}
    - Form endpoints read application/x-www-form-urlencoded or multipart bodies
    - Successful create and delete answer 303 See Other with a Location header
    - Rejected create submissions answer 400 with ActionDataResponse, not an error envelope

Design Decisions:
    - Identity resolved by dependency (get_current_user_id), never read from the
      session directly in a route
    - Redirect targets resolved with url_for from the route names the service returns
"""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from jokester.config import Settings, get_settings
from jokester.core.domain_types import Identity, JokeId
from jokester.core.enforce_ownership import require_jokester
from jokester.core.outcomes import Redirect
from jokester.core.validate_joke_form import ActionData
from jokester.infrastructure.database import get_db
from jokester.infrastructure.identity import get_current_user_id
from jokester.infrastructure.joke_repository import SqlJokeRepository
from jokester.schemas.joke import (
    ActionDataResponse, JokeCreatedResponse, JokeDetailResponse, JokeListResponse,
    JokeResponse, JokeSummary, NewJokeAccessResponse, RandomJokeResponse,
)
from jokester.services.joke_service import JokeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/jokes", tags=["jokes"])


def get_joke_service(db: AsyncSession = Depends(get_db)) -> JokeService:
    return JokeService(SqlJokeRepository(db))


def _resolve_redirect(request: Request, redirect: Redirect) -> str:
    return str(request.url_for(redirect.route_name, **redirect.path_params))


@router.get("", response_model=JokeListResponse)
async def list_jokes(
    service: JokeService = Depends(get_joke_service),
    settings: Settings = Depends(get_settings),
):
    """Most recent jokes, newest first."""
    jokes = await service.list_jokes(settings.jokes_list_limit)
    return JokeListResponse(
        jokes=[JokeSummary.model_validate(j) for j in jokes],
    )


@router.get("/random", response_model=RandomJokeResponse)
async def get_random_joke(service: JokeService = Depends(get_joke_service)):
    joke = await service.get_random_joke()
    return RandomJokeResponse(joke=JokeResponse.model_validate(joke))


@router.get("/new", response_model=NewJokeAccessResponse)
async def new_joke_page(identity: Identity = Depends(get_current_user_id)):
    """Page-access check for the new-joke form. Opens no database session."""
    user_id = require_jokester(identity)
    return NewJokeAccessResponse(user_id=user_id)


@router.post(
    "",
    status_code=status.HTTP_303_SEE_OTHER,
    response_model=JokeCreatedResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ActionDataResponse}},
)
async def create_joke(
    request: Request,
    identity: Identity = Depends(get_current_user_id),
    service: JokeService = Depends(get_joke_service),
):
    """Submit the new-joke form."""
    form = await request.form()
    outcome = await service.create_joke(
        form.get("name"), form.get("content"), identity,
    )
    if isinstance(outcome, ActionData):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ActionDataResponse(**asdict(outcome)).model_dump(),
        )

    location = _resolve_redirect(request, outcome.redirect)
    return JSONResponse(
        status_code=status.HTTP_303_SEE_OTHER,
        content=JokeCreatedResponse(
            id=outcome.joke_id, redirect_to=location,
        ).model_dump(),
        headers={"Location": location},
    )


@router.get("/{joke_id}", response_model=JokeDetailResponse)
async def get_joke(
    joke_id: str,
    identity: Identity = Depends(get_current_user_id),
    service: JokeService = Depends(get_joke_service),
):
    view = await service.get_joke(JokeId(joke_id), identity)
    return JokeDetailResponse(
        joke=JokeResponse.model_validate(view.joke), is_owner=view.is_owner,
    )


@router.post("/{joke_id}", status_code=status.HTTP_303_SEE_OTHER)
async def joke_action(
    joke_id: str,
    request: Request,
    identity: Identity = Depends(get_current_user_id),
    service: JokeService = Depends(get_joke_service),
):
    """Detail-view form action; only intent=delete is handled."""
    form = await request.form()
    outcome = await service.delete_joke(
        JokeId(joke_id), form.get("intent"), identity,
    )
    return RedirectResponse(
        _resolve_redirect(request, outcome.redirect),
        status_code=status.HTTP_303_SEE_OTHER,
    )
