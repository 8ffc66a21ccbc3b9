"""Cooperative timers driven by an explicit clock."""

from __future__ import annotations


class TimerSlot:
    """A single pending deadline; arming it again replaces the previous one."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.deadline: float | None = None

    @property
    def armed(self) -> bool:
        return self.deadline is not None

    def arm(self, now: float, delay: float) -> None:
        self.deadline = now + delay

    def cancel(self) -> None:
        self.deadline = None

    def fire_if_due(self, now: float) -> bool:
        """Disarm and return True once *now* has reached the deadline."""
        if self.deadline is None or now < self.deadline:
            return False
        self.deadline = None
        return True

    def remaining(self, now: float) -> float | None:
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - now)

    def __repr__(self) -> str:
        return f"TimerSlot({self.name!r}, deadline={self.deadline!r})"
