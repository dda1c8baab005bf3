"""Infrastructure Layer — database, session identity and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All driver exceptions mapped to core errors before leaving this layer
"""
