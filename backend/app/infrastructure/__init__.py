"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All driver exceptions mapped to core error types before leaving this layer
"""
