"""Services Layer — orchestrates pure core checks around repository IO.

Invariants:
    - Services never import from api/
    - Terminal failures raised as JokesterError; recoverable ones returned as data
"""
