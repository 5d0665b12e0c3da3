"""logic/placement.py — Rejection-sampled scattering on an annulus.

Used once at world build (scenery) and by the spawner (pursuers).

Randomness comes from an explicit ``random.Random`` (Mersenne Twister)
handed in by the caller, so a placement stream is fully reproducible
from its seed::

    rng = random.Random(seed)
    rec = PlacementRecord()
    for _ in range(11):
        x, z = rec.place(rng, radius_range=(100.0, 180.0), min_radius=25.0)

``sample_position`` itself is pure: it never mutates ``existing``.
``PlacementRecord`` is the accumulating list that enforces separation
across a whole build and is thrown away afterwards.
"""

from __future__ import annotations
import math
import random
from dataclasses import dataclass, field
from typing import NamedTuple, Sequence

from core.constants import TAU, PLACEMENT_MAX_ATTEMPTS


class Placement(NamedTuple):
    x: float
    z: float
    rejections: int       # candidates rejected before this one was taken

    @property
    def point(self) -> tuple[float, float]:
        return self.x, self.z


def _validate(min_radius: float, radius_range: tuple[float, float],
              max_attempts: int) -> None:
    lo, hi = radius_range
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
    if lo < 0 or hi < lo:
        raise ValueError(f"radius_range must satisfy 0 <= lo <= hi, got {radius_range}")
    if min_radius < 0:
        raise ValueError(f"min_radius must be >= 0, got {min_radius}")


def _too_close(x: float, z: float, existing: Sequence[tuple[float, float]],
               min_radius: float) -> bool:
    for ex, ez in existing:
        if math.hypot(x - ex, z - ez) < min_radius:
            return True
    return False


def sample_position(
    existing: Sequence[tuple[float, float]],
    min_radius: float,
    radius_range: tuple[float, float],
    max_attempts: int,
    rng: random.Random,
    center: tuple[float, float] = (0.0, 0.0),
) -> Placement:
    """Draw a ground point on an annulus, away from *existing* points.

    The angle is uniform over [0, 2π) and the radial distance uniform
    over *radius_range*.  A candidate closer than *min_radius* to any
    existing point is rejected and a fresh one drawn.

    Placement is best-effort: after *max_attempts* consecutive
    rejections the last candidate is accepted anyway, and the returned
    ``rejections`` equals *max_attempts*.  With no existing points the
    first candidate always wins.
    """
    _validate(min_radius, radius_range, max_attempts)
    lo, hi = radius_range
    cx, cz = center

    x = z = 0.0
    for attempt in range(max_attempts):
        angle = rng.random() * TAU
        radius = rng.uniform(lo, hi)
        x = cx + math.cos(angle) * radius
        z = cz + math.sin(angle) * radius
        if not existing or not _too_close(x, z, existing, min_radius):
            return Placement(x, z, attempt)
    return Placement(x, z, max_attempts)


@dataclass
class PlacementRecord:
    """Ordered ground points placed so far during one build."""
    points: list[tuple[float, float]] = field(default_factory=list)
    exhausted: int = 0       # placements that fell back to the last candidate

    def place(self, rng: random.Random, *,
              radius_range: tuple[float, float],
              min_radius: float = 0.0,
              max_attempts: int = PLACEMENT_MAX_ATTEMPTS,
              center: tuple[float, float] = (0.0, 0.0)) -> tuple[float, float]:
        """Sample a point against everything placed so far and keep it."""
        p = sample_position(self.points, min_radius, radius_range,
                            max_attempts, rng, center)
        if p.rejections >= max_attempts:
            self.exhausted += 1
        self.points.append(p.point)
        return p.point

    def scatter(self, count: int, rng: random.Random, **kwargs) -> list[tuple[float, float]]:
        """Place *count* points in sequence; see ``place`` for kwargs."""
        return [self.place(rng, **kwargs) for _ in range(count)]

    def __len__(self) -> int:
        return len(self.points)
