"""New-Joke Form Validation — collect-all field errors and form-level rejection.

Tests cover:
    - Each validator in isolation, at and around its boundary
    - Both field errors reported together (no fail-fast)
    - Missing / non-string values produce a form error with no field errors
    - Valid submissions pass through untouched
"""

import pytest

from jokester.core.validate_joke_form import (
    ActionData,
    JokeSubmission,
    collect_field_errors,
    has_field_errors,
    parse_submission,
    validate_content,
    validate_name,
    validate_submission,
)


# -- validate_name / validate_content -----------------------------------------

@pytest.mark.parametrize("name", ["", "a", "ab"])
def test_short_name_is_rejected(name):
    assert validate_name(name) == "Title is too short"


def test_three_char_name_is_accepted():
    assert validate_name("abc") is None


def test_name_at_column_width_is_accepted():
    assert validate_name("n" * 255) is None


@pytest.mark.parametrize("length", [256, 300])
def test_name_wider_than_column_is_rejected(length):
    assert validate_name("n" * length) == "Title is too long"


def test_nine_char_content_is_rejected():
    assert validate_content("x" * 9) == "Content is too short"


def test_ten_char_content_is_accepted():
    assert validate_content("x" * 10) is None


# -- collect_field_errors -----------------------------------------------------

def test_both_field_errors_co_occur():
    errors = collect_field_errors(JokeSubmission(name="ab", content="short"))
    assert errors == {
        "name": "Title is too short",
        "content": "Content is too short",
    }
    assert has_field_errors(errors)


def test_passing_fields_map_to_none():
    errors = collect_field_errors(
        JokeSubmission(name="Chicken", content="Why did the chicken cross the road"),
    )
    assert errors == {"name": None, "content": None}
    assert not has_field_errors(errors)


def test_only_content_error_keeps_name_key():
    errors = collect_field_errors(JokeSubmission(name="Chicken", content="short"))
    assert errors["name"] is None
    assert errors["content"] == "Content is too short"


# -- parse_submission ---------------------------------------------------------

@pytest.mark.parametrize("form", [
    {},
    {"name": "Chicken"},
    {"content": "Why did the chicken cross the road"},
    {"name": None, "content": "Why did the chicken cross the road"},
    {"name": ["a", "b"], "content": "Why did the chicken cross the road"},
    {"name": "Chicken", "content": b"bytes are not text"},
])
def test_malformed_submission_is_form_error(form):
    result = parse_submission(form)
    assert result == ActionData(form_error="Bad request")
    assert result.field_errors is None
    assert result.fields is None


def test_string_fields_parse_into_submission():
    result = parse_submission({"name": "ab", "content": "short"})
    assert result == JokeSubmission(name="ab", content="short")


# -- validate_submission ------------------------------------------------------

def test_invalid_submission_echoes_fields():
    result = validate_submission({"name": "ab", "content": "short"})
    assert isinstance(result, ActionData)
    assert result.fields == {"name": "ab", "content": "short"}
    assert result.field_errors == {
        "name": "Title is too short",
        "content": "Content is too short",
    }
    assert result.form_error is None


def test_valid_submission_returns_submission():
    result = validate_submission({
        "name": "Chicken", "content": "Why did the chicken cross the road",
    })
    assert result == JokeSubmission(
        name="Chicken", content="Why did the chicken cross the road",
    )
