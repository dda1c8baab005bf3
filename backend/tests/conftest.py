"""Root conftest — shared test configuration."""

import os

# Settings are read once (lru_cache) when jokester.main is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DATABASE_CREATE_SCHEMA", "false")
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("LOG_FORMAT", "text")
