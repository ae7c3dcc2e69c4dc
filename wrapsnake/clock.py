"""Repeating interval timers driven by per-frame time deltas."""
from __future__ import annotations

from dataclasses import dataclass, field

_NANOS = 1_000_000_000


def _to_nanos(seconds: float) -> int:
    return round(seconds * _NANOS)


@dataclass
class RepeatingTimer:
    """Accumulates elapsed time and reports when the period is crossed.

    Time is kept in integer nanoseconds so that summed frame deltas hit the
    period exactly. A single ``tick`` fires at most once, however far it
    overshoots; the overshoot carries into the next period.
    """

    period: float
    elapsed_ns: int = 0
    times_finished: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.period <= 0:
            raise ValueError("timer period must be positive")
        self._period_ns = _to_nanos(self.period)

    @property
    def elapsed(self) -> float:
        return self.elapsed_ns / _NANOS

    def tick(self, delta: float) -> bool:
        self.elapsed_ns += max(0, _to_nanos(delta))
        if self.elapsed_ns < self._period_ns:
            self.times_finished = 0
            return False
        self.times_finished, self.elapsed_ns = divmod(self.elapsed_ns, self._period_ns)
        return True

    def reset(self) -> None:
        self.elapsed_ns = 0
        self.times_finished = 0


@dataclass
class Ticks:
    move: bool
    spawn: bool


class SimulationClock:
    """The movement and spawn timers. They never synchronise with each other."""

    def __init__(self, move_period: float = 0.15, spawn_period: float = 1.0) -> None:
        self.move_timer = RepeatingTimer(move_period)
        self.spawn_timer = RepeatingTimer(spawn_period)

    def tick(self, delta: float) -> Ticks:
        return Ticks(move=self.move_timer.tick(delta), spawn=self.spawn_timer.tick(delta))

    def reset(self) -> None:
        self.move_timer.reset()
        self.spawn_timer.reset()
