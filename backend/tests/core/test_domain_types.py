"""Domain Types — verifies identity wrappers and enum wire values.

Tests:
    - NewType wrappers are transparent
    - LikeDirection values match the `likedStatus` wire values
    - Identity is immutable and compares by email
"""

import dataclasses
from uuid import uuid4

import pytest

from app.core.domain_types import (
    ArtifactId, Email, Environment, Identity, LikeDirection, LikeState,
    TOP_ARTIFACTS_LIMIT,
)


def test_identity_types_wrap_values():
    uid = uuid4()
    assert ArtifactId(uid) == uid
    assert Email("a@b.c") == "a@b.c"


def test_like_direction_wire_values():
    assert LikeDirection("increase") is LikeDirection.INCREASE
    assert LikeDirection("decrease") is LikeDirection.DECREASE
    assert len(LikeDirection) == 2


def test_like_state_has_two_states():
    assert set(LikeState) == {LikeState.NOT_LIKED, LikeState.LIKED}


def test_environment_values():
    assert Environment("production") is Environment.PRODUCTION
    assert Environment("development") is Environment.DEVELOPMENT


def test_identity_is_frozen():
    identity = Identity(email=Email("a@b.c"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        identity.email = Email("x@y.z")
    assert identity == Identity(email=Email("a@b.c"))


def test_top_limit_is_six():
    assert TOP_ARTIFACTS_LIMIT == 6
