"""ORM Models — SQLAlchemy declarative models for the catalog.

Invariants:
    - All models inherit from Base (db/base.py)
    - No foreign key between likes and artifacts: relations are by value

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from app.models.artifact import Artifact  # noqa: F401
from app.models.like import Like  # noqa: F401
