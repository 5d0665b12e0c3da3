"""components.ai — Pursuers and the spawner that feeds them."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Pursuer:
    """An autonomous chaser.

    ``last_line_of_sight`` is refreshed every frame the pursuer is
    within activation range (False when dormant).  Whether it gates
    movement is controlled by ``pursuit.require_line_of_sight``.
    ``active`` mirrors the dormant/pursuing state for telemetry.
    """
    speed: float = 3.0                 # u/s
    last_line_of_sight: bool = False
    active: bool = False


@dataclass
class RepeatingTimer:
    """Countdown that restarts itself every ``period`` seconds."""
    period: float = 10.0               # s
    elapsed: float = 0.0               # s since last fire

    def __post_init__(self):
        if self.period <= 0:
            raise ValueError(f"RepeatingTimer period must be > 0, got {self.period}")

    def tick(self, dt: float) -> int:
        """Advance by *dt*; return how many periods elapsed (usually 0 or 1)."""
        self.elapsed += dt
        fired = 0
        while self.elapsed >= self.period:
            self.elapsed -= self.period
            fired += 1
        return fired

    @property
    def remaining(self) -> float:
        return self.period - self.elapsed


@dataclass
class PursuerSpawner:
    """Periodically creates pursuers around the origin, up to ``cap``."""
    timer: RepeatingTimer
    cap: int = 10
    radius_min: float = 30.0           # u
    radius_max: float = 80.0           # u
    min_separation: float = 5.0        # u between fresh spawns and live pursuers
    pursuer_speed: float = 3.0         # u/s
    spawned: int = 0
    skipped: int = 0
