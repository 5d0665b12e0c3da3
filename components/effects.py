"""components.effects — Transient visual entities with bounded lifetimes.

Two clocks, on purpose:

    Footstep       lifetime counts UP from 0 to max_lifetime
    SmokeParticle  lifetime counts DOWN from max_lifetime to 0

Both are removed by the effect lifecycle system; neither can outlive
its ``max_lifetime``, and neither is aged in the frame that emitted it.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from core.vec3 import Vec3


@dataclass
class Footstep:
    lifetime: float = 0.0        # s since the print was left
    max_lifetime: float = 3.0    # s
    born_frame: int = -1         # GameClock.frame it was emitted in


@dataclass
class SmokeParticle:
    lifetime: float = 2.0        # s remaining
    max_lifetime: float = 2.0    # s
    velocity: Vec3 = field(default_factory=Vec3)   # u/s
    born_frame: int = -1
