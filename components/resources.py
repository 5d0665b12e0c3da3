"""components.resources — World-level singletons (not per-entity)."""

from __future__ import annotations
from dataclasses import dataclass, field

from core.vec3 import Vec3


@dataclass
class GameClock:
    """Monotonic simulation time — accumulated ``dt`` since world build."""
    time: float = 0.0
    frame: int = 0


@dataclass
class ControlState:
    """Snapshot of the controlled agent's keys for one frame.

    Filled by the host's input layer; the simulation never touches a
    keyboard directly.
    """
    forward: bool = False
    back: bool = False
    turn_left: bool = False
    turn_right: bool = False
    speed_mod: bool = False
    pitch_up: bool = False
    pitch_down: bool = False


@dataclass
class CameraRig:
    """Chase camera — behind and above the agent, pitch from the arrows."""
    pitch: float = 0.0
    position: Vec3 = field(default_factory=lambda: Vec3(15.0, 5.0, 20.0))
    look_at: Vec3 = field(default_factory=Vec3)


@dataclass
class FootstepCadence:
    """Accumulator that fires a footprint pair every ``interval`` seconds."""
    interval: float = 0.3
    accumulator: float = 0.0
    phase: int = 0               # alternates 0/1 for the walking gait
