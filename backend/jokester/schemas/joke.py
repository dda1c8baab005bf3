"""Joke Schemas — Pydantic response models for the joke endpoints.

Invariants:
    - ActionDataResponse mirrors core ActionData: fields echo the submission,
      field_errors has one key per field (None when that field passed)
    - form_error set only for malformed submissions, never together with field_errors
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class JokeResponse(BaseModel):
    """Public joke data."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    content: str
    jokester_id: str
    created_at: datetime


class JokeSummary(BaseModel):
    """Listing entry: enough to link to the detail view."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class JokeListResponse(BaseModel):
    jokes: list[JokeSummary]


class JokeDetailResponse(BaseModel):
    joke: JokeResponse
    is_owner: bool


class RandomJokeResponse(BaseModel):
    joke: JokeResponse


class NewJokeAccessResponse(BaseModel):
    user_id: str


class JokeCreatedResponse(BaseModel):
    id: str
    redirect_to: str


class ActionDataResponse(BaseModel):
    """400 body for a rejected new-joke submission."""
    fields: dict[str, str] | None = None
    field_errors: dict[str, str | None] | None = None
    form_error: str | None = None
