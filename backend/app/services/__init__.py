"""Services Layer — catalog CRUD and the like/unlike coordinator.

Invariants:
    - Services receive an AsyncSession; they commit their own writes
    - Services never read request state (identity checks happen in api/)
"""
