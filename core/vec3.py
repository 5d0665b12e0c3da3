"""core/vec3.py — Minimal 3-component vector.

World axes follow the usual right-handed, Y-up convention:

    +X  east        +Y  up        +Z  south (towards the default camera)

The ground plane is X/Z.  ``ground()`` on a Transform drops Y.
"""

from __future__ import annotations
import math
from dataclasses import dataclass


@dataclass
class Vec3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, v: float) -> "Vec3":
        return cls(v, v, v)

    def copy(self) -> "Vec3":
        return Vec3(self.x, self.y, self.z)

    # ── arithmetic ───────────────────────────────────────────────────

    def __add__(self, o: "Vec3") -> "Vec3":
        return Vec3(self.x + o.x, self.y + o.y, self.z + o.z)

    def __sub__(self, o: "Vec3") -> "Vec3":
        return Vec3(self.x - o.x, self.y - o.y, self.z - o.z)

    def __mul__(self, s: float) -> "Vec3":
        return Vec3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def mul(self, o: "Vec3") -> "Vec3":
        """Component-wise product (used for half-extent × scale)."""
        return Vec3(self.x * o.x, self.y * o.y, self.z * o.z)

    def abs(self) -> "Vec3":
        return Vec3(abs(self.x), abs(self.y), abs(self.z))

    # ── metrics ──────────────────────────────────────────────────────

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance(self, o: "Vec3") -> float:
        return (o - self).length()

    def normalized(self) -> "Vec3":
        """Unit vector, or the zero vector when the length is zero."""
        n = self.length()
        if n == 0.0:
            return Vec3()
        return Vec3(self.x / n, self.y / n, self.z / n)

    def lerp(self, o: "Vec3", t: float) -> "Vec3":
        return Vec3(self.x + (o.x - self.x) * t,
                    self.y + (o.y - self.y) * t,
                    self.z + (o.z - self.z) * t)

    def is_close(self, o: "Vec3", tol: float = 1e-6) -> bool:
        return (abs(self.x - o.x) <= tol and abs(self.y - o.y) <= tol
                and abs(self.z - o.z) <= tol)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z
