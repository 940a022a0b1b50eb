"""Core Layer — pure domain logic, no DB, no async.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Functions are deterministic given their inputs (token functions take the clock as a parameter)
"""
