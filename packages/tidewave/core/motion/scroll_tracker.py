"""Velocity-adaptive scroll smoothing.

Tracks a scroll position with damping that adapts to scroll speed:
- Fast scroll (high velocity) = low damping = near-instant response
- Slow scroll (low velocity) = high damping = smooth glide

The state machine has two states. A fresh or reset tracker is
*uninitialized*: its first update only records a baseline. Every later
update is *tracking*: it measures velocity against the previous sample,
picks a damping factor and eases the offset toward the new position.

Updates must arrive in non-decreasing timestamp order from a single
rendering loop. Elapsed time is floored at 1 ms, which tolerates duplicate
timestamps but does not reorder late ones.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from tidewave.core.utils.math import clamp

logger = logging.getLogger(__name__)

MIN_ELAPSED_MS = 1.0


class ScrollTrackerOptions(BaseModel):
    """Tuning knobs for a scroll tracker.

    Attributes:
        max_velocity: Speed (px/s) at and above which damping bottoms out.
        min_damping: Damping at max_velocity (fastest response).
        max_damping: Damping at rest (smoothest response).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_velocity: float = 2000.0
    min_damping: float = 0.02
    max_damping: float = 0.15


class ScrollTrackerState(BaseModel):
    """Snapshot of a tracker between updates."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    offset: float = 0.0
    velocity: float = 0.0
    damping: float
    last_position: float = 0.0
    last_timestamp: float = 0.0
    initialized: bool = False

    @classmethod
    def initial(cls, options: ScrollTrackerOptions) -> ScrollTrackerState:
        """Zero state for the given options."""
        return cls(damping=options.max_damping)


def advance(
    state: ScrollTrackerState,
    position: float,
    timestamp: float,
    options: ScrollTrackerOptions,
) -> ScrollTrackerState:
    """Apply one (position, timestamp) sample and return the next state.

    Args:
        state: Current tracker state.
        position: Raw scroll position in px.
        timestamp: Sample time in ms.
        options: Tracker tuning.

    Returns:
        New state; the input state is not modified.
    """
    if not state.initialized:
        return state.model_copy(
            update={"last_position": position, "last_timestamp": timestamp, "initialized": True}
        )

    dt = max(MIN_ELAPSED_MS, timestamp - state.last_timestamp)
    dy = abs(position - state.last_position)
    velocity = dy / dt * 1000

    velocity_ratio = clamp(velocity / options.max_velocity, 0.0, 1.0)
    # Exact at both ends: ratio 0 gives max_damping, ratio 1 gives min_damping.
    damping = options.max_damping * (1 - velocity_ratio) + options.min_damping * velocity_ratio

    offset = state.offset + (position - state.offset) * (1 - damping)

    return ScrollTrackerState(
        offset=offset,
        velocity=velocity,
        damping=damping,
        last_position=position,
        last_timestamp=timestamp,
        initialized=True,
    )


class ScrollTracker:
    """Mutable owner of one tracked scroll surface.

    Example:
        >>> tracker = ScrollTracker()
        >>> tracker.update(0, 0)
        >>> tracker.update(2000, 100)
        >>> tracker.velocity
        20000.0
        >>> tracker.damping
        0.02
    """

    def __init__(self, options: ScrollTrackerOptions | None = None) -> None:
        self.options = options or ScrollTrackerOptions()
        self._state = ScrollTrackerState.initial(self.options)

    @property
    def state(self) -> ScrollTrackerState:
        return self._state

    @property
    def offset(self) -> float:
        return self._state.offset

    @property
    def velocity(self) -> float:
        return self._state.velocity

    @property
    def damping(self) -> float:
        return self._state.damping

    @property
    def initialized(self) -> bool:
        return self._state.initialized

    def update(self, position: float, timestamp: float) -> None:
        """Feed one animation-frame sample."""
        self._state = advance(self._state, position, timestamp, self.options)

    def reset(self) -> None:
        """Return to the uninitialized zero state."""
        self._state = ScrollTrackerState.initial(self.options)
        logger.debug("Scroll tracker reset")
