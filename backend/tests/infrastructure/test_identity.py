"""Session Identity — decoded session data to UserId | None."""

import pytest

from jokester.infrastructure.identity import USER_ID_SESSION_KEY, resolve_identity


def test_user_id_in_session_resolves():
    assert resolve_identity({USER_ID_SESSION_KEY: "kody"}) == "kody"


def test_empty_session_is_anonymous():
    assert resolve_identity({}) is None


@pytest.mark.parametrize("value", ["", None, 42, ["kody"]])
def test_unusable_user_id_is_anonymous(value):
    assert resolve_identity({USER_ID_SESSION_KEY: value}) is None


def test_other_keys_are_ignored():
    assert resolve_identity({"user_id": "kody", "theme": "dark"}) is None
