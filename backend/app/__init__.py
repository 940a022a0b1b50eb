"""Historic Gems Application Package — liked-artifacts catalog API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
