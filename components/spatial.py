"""components.spatial — Transforms and obstacle boxes.

All coordinates and dimensions are in units (1 u = 1 m).  Y is up;
the ground plane is X/Z.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, field

from core.vec3 import Vec3


@dataclass
class Transform:
    """World transform of an entity.

    Rotation is a single yaw angle about +Y (radians) — nothing in the
    simulation tilts.  A yaw of 0 faces −Z; positive yaw turns
    counter-clockwise seen from above.
    """
    position: Vec3 = field(default_factory=Vec3)
    yaw: float = 0.0
    scale: Vec3 = field(default_factory=lambda: Vec3.splat(1.0))

    def forward(self) -> Vec3:
        return Vec3(-math.sin(self.yaw), 0.0, -math.cos(self.yaw))

    def back(self) -> Vec3:
        return -self.forward()

    def right(self) -> Vec3:
        return Vec3(math.cos(self.yaw), 0.0, -math.sin(self.yaw))

    def rotate_y(self, angle: float) -> None:
        self.yaw = (self.yaw + angle) % (2.0 * math.pi)

    def ground(self) -> tuple[float, float]:
        """Ground-plane ``(x, z)``."""
        return self.position.x, self.position.z


@dataclass
class ObstacleBlocker:
    """Axis-aligned box that blocks line of sight.

    ``half_size`` is local; the world-space box is centred on the
    owner's ``Transform.position`` with half-extent
    ``half_size * |Transform.scale|`` and is rebuilt on every query.
    Rotation is ignored — the box stays axis-aligned.
    """
    half_size: Vec3 = field(default_factory=lambda: Vec3.splat(0.5))

    def __post_init__(self):
        hs = self.half_size
        if hs.x < 0 or hs.y < 0 or hs.z < 0:
            raise ValueError(f"ObstacleBlocker half_size must be >= 0, got {hs}")
