"""components.rendering — Identity and role markers.

Role markers carry no data worth mentioning; they exist so systems can
ask the World for "every pursuer" or "every obstacle that is not the
agent" by component type.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Identity:
    name: str = ""
    kind: str = ""        # "agent", "pursuer", "glacier", "radar", ...


@dataclass
class ControlledAgent:
    """Marks the player-controlled entity."""
    speed: float = 5.0           # u/s
    turn_rate: float = 2.0       # rad/s


@dataclass
class AgentMotion:
    """Whether the agent translated this frame (footstep trigger)."""
    moved: bool = False
    distance: float = 0.0        # u travelled this frame


@dataclass
class Scenery:
    """Static world dressing placed at build time."""
    kind: str = ""


@dataclass
class Ground:
    """The snowfield slab.  Not a line-of-sight blocker."""
    half_size: float = 200.0     # u


@dataclass
class RotatingProp:
    """Spins about +Y at a fixed rate (radar dishes)."""
    rate: float = 0.2            # rad/s
