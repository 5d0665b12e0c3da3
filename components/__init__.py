"""components — ECS component dataclasses, organised by domain.

Submodules
----------
spatial        Transform, ObstacleBlocker
rendering      Identity, ControlledAgent, AgentMotion, Scenery, Ground, RotatingProp
rpg            Health
ai             Pursuer, PursuerSpawner, RepeatingTimer
effects        Footstep, SmokeParticle
resources      GameClock, ControlState, CameraRig, FootstepCadence
dev_log        DevLog

All public names are re-exported here so callers can simply
``from components import Transform``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import Transform, ObstacleBlocker

# ── Roles / identity ─────────────────────────────────────────────────
from components.rendering import (
    Identity, ControlledAgent, AgentMotion, Scenery, Ground, RotatingProp,
)

# ── RPG ──────────────────────────────────────────────────────────────
from components.rpg import Health

# ── AI ───────────────────────────────────────────────────────────────
from components.ai import Pursuer, PursuerSpawner, RepeatingTimer

# ── Transient effects ────────────────────────────────────────────────
from components.effects import Footstep, SmokeParticle

# ── World resources / singletons ─────────────────────────────────────
from components.resources import GameClock, ControlState, CameraRig, FootstepCadence
from components.dev_log import DevLog

__all__ = [
    # spatial
    "Transform", "ObstacleBlocker",
    # roles
    "Identity", "ControlledAgent", "AgentMotion", "Scenery", "Ground",
    "RotatingProp",
    # rpg
    "Health",
    # ai
    "Pursuer", "PursuerSpawner", "RepeatingTimer",
    # effects
    "Footstep", "SmokeParticle",
    # resources
    "GameClock", "ControlState", "CameraRig", "FootstepCadence", "DevLog",
]
