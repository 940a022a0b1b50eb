"""Like Transitions — pure rules for the like/unlike counter protocol.

Invariants:
    - increase → +1, decrease → -1; no other directions exist
    - The counter delta is applied blindly (no read of the current like state)
    - expected_liked_count() is the single definition of the counter invariant

Design Decisions:
    - Transition rules kept pure so both write modes (two_write, transactional)
      share them without duplicating the arithmetic
"""

from app.core.domain_types import LikeDirection, LikeState

_DELTAS = {
    LikeDirection.INCREASE: 1,
    LikeDirection.DECREASE: -1,
}


def counter_delta(direction: LikeDirection) -> int:
    """Counter adjustment for a transition."""
    return _DELTAS[LikeDirection(direction)]


def target_state(direction: LikeDirection) -> LikeState:
    """State the caller asked to move the (artifact, user) pair into."""
    if LikeDirection(direction) == LikeDirection.INCREASE:
        return LikeState.LIKED
    return LikeState.NOT_LIKED


def like_state(like_rows: int) -> LikeState:
    """Derive the relation state from the number of matching Like rows."""
    return LikeState.LIKED if like_rows > 0 else LikeState.NOT_LIKED


def expected_liked_count(like_rows: int) -> int:
    """Counter value that satisfies the invariant for a given row count."""
    return like_rows


def counter_drift(liked_count: int, like_rows: int) -> int:
    """How far the denormalized counter is from the row count (0 = consistent)."""
    return liked_count - expected_liked_count(like_rows)
