"""Joke ORM — persists a user-submitted joke and its author reference.

Invariants:
    - id is an opaque string primary key (UUID4 text, generated client-side)
    - jokester_id is non-nullable and never updated after insert
    - name and content are non-nullable; name fits MAX_NAME_LENGTH, which
      validate_name enforces before insert

Design Decisions:
    - String(36) id over dialect UUID type: same column on PostgreSQL and SQLite
    - jokester_id is a plain indexed string: users live with the session
      provider, not in this database
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from jokester.core.domain_types import MAX_NAME_LENGTH
from jokester.db.base import Base


def _new_joke_id() -> str:
    return str(uuid.uuid4())


class Joke(Base):
    """A single joke owned by the jokester who created it."""
    __tablename__ = "jokes"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=_new_joke_id,
    )
    jokester_id: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"Joke(id={self.id!r}, name={self.name!r})"
