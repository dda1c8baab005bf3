"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - JokeId and UserId wrap opaque strings; never compare a JokeId to a UserId
    - Identity is UserId | None; anonymous is None, never an empty-string sentinel
    - Supported form intents encoded as an Enum, no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

JokeId = NewType("JokeId", str)
UserId = NewType("UserId", str)

# Resolved identity of a request, None when the session carries no user
Identity = UserId | None


# ─── Enums ───────────────────────────────────────────────────────

class JokeIntent(str, Enum):
    """Form intents accepted by the joke detail action."""
    DELETE = "delete"


class JokeField(str, Enum):
    """Submitted fields of the new-joke form."""
    NAME = "name"
    CONTENT = "content"


# ─── Validation bounds ───────────────────────────────────────────

MIN_NAME_LENGTH = 3
MIN_CONTENT_LENGTH = 10
MAX_NAME_LENGTH = 255
