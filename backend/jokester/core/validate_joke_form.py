"""New-Joke Form Validation — field-level checks collected into structured data.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Every validator runs on every submission (collect-all, never fail-fast)
    - Field errors are a mapping field name -> message | None, one key per field
    - A name that passes validate_name always fits the jokes.name column
    - Non-string or missing values are a form-level error, distinct from field errors

Design Decisions:
    - Return data (not exceptions): the caller redisplays the form with the
      original input and the per-field messages
"""

from collections.abc import Mapping
from dataclasses import dataclass

from jokester.core.domain_types import (
    JokeField, MAX_NAME_LENGTH, MIN_CONTENT_LENGTH, MIN_NAME_LENGTH,
)
from jokester.core.user_messages import (
    CONTENT_TOO_SHORT, FORM_BAD_REQUEST, NAME_TOO_LONG, NAME_TOO_SHORT,
)

FieldErrors = dict[str, str | None]


@dataclass(frozen=True)
class JokeSubmission:
    """A well-formed submission: both fields present and textual."""
    name: str
    content: str

    def as_fields(self) -> dict[str, str]:
        return {JokeField.NAME.value: self.name, JokeField.CONTENT.value: self.content}


@dataclass(frozen=True)
class ActionData:
    """Data returned to the form on a rejected submission (HTTP 400 body)."""
    fields: dict[str, str] | None = None
    field_errors: FieldErrors | None = None
    form_error: str | None = None


def validate_name(value: str) -> str | None:
    if len(value) < MIN_NAME_LENGTH:
        return NAME_TOO_SHORT
    if len(value) > MAX_NAME_LENGTH:
        return NAME_TOO_LONG
    return None


def validate_content(value: str) -> str | None:
    if len(value) < MIN_CONTENT_LENGTH:
        return CONTENT_TOO_SHORT
    return None


def parse_submission(form: Mapping[str, object]) -> JokeSubmission | ActionData:
    """Extract name/content from raw form data.

    Anything other than a str (missing key, file upload, list) rejects the
    whole submission with a form-level error and no field echo.
    """
    name = form.get(JokeField.NAME.value)
    content = form.get(JokeField.CONTENT.value)
    if not isinstance(name, str) or not isinstance(content, str):
        return ActionData(form_error=FORM_BAD_REQUEST)
    return JokeSubmission(name=name, content=content)


def collect_field_errors(submission: JokeSubmission) -> FieldErrors:
    """Run every field validator eagerly."""
    return {
        JokeField.NAME.value: validate_name(submission.name),
        JokeField.CONTENT.value: validate_content(submission.content),
    }


def has_field_errors(errors: FieldErrors) -> bool:
    return any(message for message in errors.values())


def validate_submission(form: Mapping[str, object]) -> JokeSubmission | ActionData:
    """Parse and validate a submission.

    Returns the submission when it can be persisted, otherwise the ActionData
    to send back to the form.
    """
    parsed = parse_submission(form)
    if isinstance(parsed, ActionData):
        return parsed
    errors = collect_field_errors(parsed)
    if has_field_errors(errors):
        return ActionData(fields=parsed.as_fields(), field_errors=errors)
    return parsed
