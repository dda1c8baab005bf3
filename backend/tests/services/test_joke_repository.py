"""SQL Joke Repository — persistence round trips on in-memory SQLite.

Tests cover:
    - create assigns an opaque string id and timestamps
    - get / count / get_at_offset / list_latest read back what was written
    - list_latest orders newest first before applying the limit
    - delete removes exactly one row and is a no-op for unknown ids
"""

from jokester.core.domain_types import JokeId, UserId
from jokester.infrastructure.joke_repository import SqlJokeRepository


async def _seed(repo: SqlJokeRepository, n: int) -> list:
    return [
        await repo.create(f"Joke {i}", f"Content number {i}", UserId("kody"))
        for i in range(n)
    ]


async def test_create_assigns_id_and_timestamps(test_db):
    repo = SqlJokeRepository(test_db)

    joke = await repo.create("Chicken", "Why did the chicken cross the road", UserId("kody"))

    assert isinstance(joke.id, str) and len(joke.id) == 36
    assert joke.jokester_id == "kody"
    assert joke.created_at is not None
    assert joke.updated_at is not None


async def test_get_returns_stored_joke(test_db):
    repo = SqlJokeRepository(test_db)
    created = await repo.create("Chicken", "Why did the chicken cross the road", UserId("kody"))

    fetched = await repo.get(JokeId(created.id))

    assert fetched is not None
    assert (fetched.name, fetched.content, fetched.jokester_id) == (
        "Chicken", "Why did the chicken cross the road", "kody",
    )


async def test_get_unknown_returns_none(test_db):
    assert await SqlJokeRepository(test_db).get(JokeId("nope")) is None


async def test_count_and_offsets(test_db):
    repo = SqlJokeRepository(test_db)
    created = await _seed(repo, 3)

    assert await repo.count() == 3
    fetched_ids = {(await repo.get_at_offset(i)).id for i in range(3)}
    assert fetched_ids == {j.id for j in created}
    assert await repo.get_at_offset(3) is None


async def test_count_empty(test_db):
    assert await SqlJokeRepository(test_db).count() == 0


async def test_list_latest_newest_first_and_limited(test_db):
    repo = SqlJokeRepository(test_db)
    await _seed(repo, 4)

    latest = await repo.list_latest(2)

    assert [j.name for j in latest] == ["Joke 3", "Joke 2"]


async def test_delete_removes_only_target(test_db):
    repo = SqlJokeRepository(test_db)
    first, second = await _seed(repo, 2)

    await repo.delete(JokeId(first.id))

    assert await repo.get(JokeId(first.id)) is None
    assert await repo.get(JokeId(second.id)) is not None
    assert await repo.count() == 1


async def test_delete_unknown_is_noop(test_db):
    repo = SqlJokeRepository(test_db)
    await _seed(repo, 1)

    await repo.delete(JokeId("nope"))

    assert await repo.count() == 1
