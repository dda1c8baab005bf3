"""Ownership Enforcement — pure author-reference comparison.

Tests cover:
    - is_owner true only for the exact author id
    - Anonymous identity never owns, even against an empty author id
    - check_can_delete raises ForbiddenError (403) with the user message
    - require_jokester passes a resolved identity through and rejects anonymous (401)
"""

import pytest

from jokester.core.domain_types import UserId
from jokester.core.enforce_ownership import check_can_delete, is_owner, require_jokester
from jokester.core.errors import ForbiddenError, UnauthorizedError


def test_author_is_owner():
    assert is_owner("kody", UserId("kody")) is True


def test_other_user_is_not_owner():
    assert is_owner("kody", UserId("bozo")) is False


def test_anonymous_is_never_owner():
    assert is_owner("kody", None) is False
    assert is_owner("", None) is False


def test_check_can_delete_allows_author():
    check_can_delete("joke-1", "kody", UserId("kody"))


def test_check_can_delete_rejects_other_user():
    with pytest.raises(ForbiddenError) as exc_info:
        check_can_delete("joke-1", "kody", UserId("bozo"))
    err = exc_info.value
    assert err.http_status == 403
    assert err.context.joke_id == "joke-1"
    assert err.user_message == "It's not your joke"


def test_check_can_delete_rejects_anonymous():
    with pytest.raises(ForbiddenError):
        check_can_delete("joke-1", "kody", None)


def test_require_jokester_returns_identity():
    assert require_jokester(UserId("kody")) == "kody"


def test_require_jokester_rejects_anonymous():
    with pytest.raises(UnauthorizedError) as exc_info:
        require_jokester(None)
    err = exc_info.value
    assert err.http_status == 401
    assert err.user_message == "You must be logged in to create a joke."
