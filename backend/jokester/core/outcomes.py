"""Operation Outcomes — tagged success results returned by the joke service.

Invariants:
    - Success results are frozen dataclasses; failures are either ActionData
      (recoverable, create only) or a JokesterError subclass (terminal)
    - Redirect names a route, never a hard-coded URL

Design Decisions:
    - Route name + params over paths: the API layer resolves them with url_for
"""

from dataclasses import dataclass, field

from jokester.core.domain_types import JokeId
from jokester.core.repository_protocols import JokeLike


@dataclass(frozen=True)
class Redirect:
    route_name: str
    path_params: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class JokeCreated:
    joke_id: JokeId
    redirect: Redirect


@dataclass(frozen=True)
class JokeDeleted:
    joke_id: JokeId
    redirect: Redirect


@dataclass(frozen=True)
class JokeView:
    """A joke as seen by the requesting identity."""
    joke: JokeLike
    is_owner: bool
