"""logic/visibility.py — Line of sight against axis-aligned obstacle boxes.

The query walks the segment in fixed steps and tests each sample point
for box containment.  It is a discrete approximation: an obstacle
thinner than ``LOS_SAMPLE_STEP`` that sits entirely between two
samples is not seen.  That trade-off is accepted; see
``test_visibility.py`` for the documented miss.
"""

from __future__ import annotations
import math
from typing import NamedTuple, Sequence

from core.ecs import World
from core.vec3 import Vec3
from core.constants import LOS_SAMPLE_STEP
from components import Transform, ObstacleBlocker, ControlledAgent, Pursuer


class ObstacleVolume(NamedTuple):
    """World-space box: ``center`` ± ``half_extent`` on every axis."""
    center: Vec3
    half_extent: Vec3

    @property
    def min(self) -> Vec3:
        return self.center - self.half_extent

    @property
    def max(self) -> Vec3:
        return self.center + self.half_extent


def point_in_box(p: Vec3, box: ObstacleVolume) -> bool:
    """Inclusive containment on all three axes."""
    c, h = box.center, box.half_extent
    return (c.x - h.x <= p.x <= c.x + h.x
            and c.y - h.y <= p.y <= c.y + h.y
            and c.z - h.z <= p.z <= c.z + h.z)


def sample_count(distance: float, step: float = LOS_SAMPLE_STEP) -> int:
    """``floor(distance / step) + 1`` samples, never fewer than one."""
    return max(1, int(math.floor(distance / step)) + 1)


def has_line_of_sight(origin: Vec3, target: Vec3,
                      obstacles: Sequence[ObstacleVolume],
                      step: float = LOS_SAMPLE_STEP) -> bool:
    """Return True if no obstacle box contains any sample of the segment.

    Samples are evenly spaced and include both endpoints; with a single
    sample only *origin* is tested.
    """
    if not obstacles:
        return True

    n = sample_count(origin.distance(target), step)
    for i in range(n):
        t = i / (n - 1) if n > 1 else 0.0
        p = origin.lerp(target, t)
        for box in obstacles:
            if point_in_box(p, box):
                return False
    return True


def obstacle_volumes(world: World) -> list[ObstacleVolume]:
    """Collect every blocker's current world box.

    The agent and pursuers never block sight lines, even if given a
    blocker.  Volumes are rebuilt from the owner's transform on every
    call so moving or rescaled owners are always current.
    """
    out: list[ObstacleVolume] = []
    for _eid, tf, blk in world.query(Transform, ObstacleBlocker,
                                     exclude=(ControlledAgent, Pursuer)):
        out.append(ObstacleVolume(
            center=tf.position.copy(),
            half_extent=blk.half_size.mul(tf.scale.abs()),
        ))
    return out
