"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas describe the wire format; ORM models describe persistence

Design Decisions:
    - from_attributes: ORM objects validated directly into response models
"""
