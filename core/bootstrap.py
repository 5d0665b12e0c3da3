"""core/bootstrap.py — World construction.

Extracted from main.py so tests and the arena scene build the exact
same world.  Handles:
  - World resources (clock, event bus, dev log, camera, cadence, rng)
  - The ground slab and the controlled agent
  - Procedural scenery: building, glaciers, radars, rusty sphere
  - The pursuer spawner

Scenery is scattered with the placement sampler from a single seed,
so ``build_world(seed=N)`` always lays out the same snowfield.  The
placement record is local to ``build_world`` and dropped on return.
"""

from __future__ import annotations
import math
import random

from core.ecs import World
from core.vec3 import Vec3
from core.events import EventBus
from core.tuning import get as _tun
from core import constants as C
from components import (
    Transform, ObstacleBlocker, Identity, ControlledAgent, AgentMotion,
    Health, Scenery, Ground, RotatingProp, GameClock, CameraRig,
    FootstepCadence, DevLog,
)
from logic.placement import PlacementRecord
from logic.spawner import SpawnRng, make_spawner


# Stock layout per scenery kind; each key may be overridden under
# ``[world.<kind>]`` in tuning.toml.
_SCENERY_DEFAULTS: dict[str, dict] = {
    "building": {"radius": [100.0, 180.0], "scale": [0.05, 0.15],
                 "half_size": [10.0, 7.5, 10.0]},
    "glaciers": {"count": 11, "radius": [100.0, 180.0], "scale": [0.05, 0.13],
                 "half_size": [80.0, 40.0, 80.0]},
    "radars":   {"count": 6, "radius": [150.0, 170.0], "scale": [0.01, 0.025],
                 "half_size": [1.5, 1.0, 1.5]},
    "sphere":   {"radius": [20.0, 50.0], "size": [6.0, 10.0]},
}


def _layout(kind: str) -> dict:
    cfg = dict(_SCENERY_DEFAULTS[kind])
    for key in cfg:
        cfg[key] = _tun(f"world.{kind}", key, cfg[key])
    return cfg


# ── Resources ────────────────────────────────────────────────────────

def setup_world_resources(world: World, seed: int = 0) -> None:
    """Register the singletons every system expects."""
    world.set_res(GameClock())
    world.set_res(EventBus())
    world.set_res(DevLog())
    world.set_res(CameraRig())
    world.set_res(FootstepCadence(
        interval=float(_tun("effects.footsteps", "interval", C.FOOTSTEP_INTERVAL))))
    # Offset so runtime spawns don't replay the scenery stream
    world.set_res(SpawnRng(seed + 1))


# ── Agent ────────────────────────────────────────────────────────────

def create_agent(world: World, position: Vec3 | None = None) -> int:
    """Spawn the controlled agent (full health, facing −Z)."""
    if position is None:
        position = Vec3(0.0, C.AGENT_START_Y, 0.0)
    hp = float(_tun("agent", "max_health", C.AGENT_MAX_HEALTH))
    return world.spawn(
        Transform(position=position.copy()),
        ControlledAgent(speed=float(_tun("agent", "speed", C.AGENT_SPEED)),
                        turn_rate=float(_tun("agent", "turn_rate", C.AGENT_TURN_RATE))),
        AgentMotion(),
        Health(current=hp, maximum=hp),
        Identity(name="You", kind="agent"),
    )


# ── Scenery ──────────────────────────────────────────────────────────

def _scenery(world: World, kind: str, x: float, y: float, z: float, *,
             scale: float, yaw: float, half_size: Vec3,
             rotating: bool = False) -> int:
    eid = world.spawn(
        Transform(position=Vec3(x, y, z), yaw=yaw, scale=Vec3.splat(scale)),
        ObstacleBlocker(half_size=half_size),
        Scenery(kind=kind),
        Identity(name=kind, kind=kind),
    )
    if rotating:
        world.add(eid, RotatingProp(rate=_tun("world.radars", "spin_rate",
                                              C.RADAR_SPIN_RATE)))
    return eid


def _polar(rng: random.Random, radius_range) -> tuple[float, float]:
    angle = rng.random() * C.TAU
    radius = rng.uniform(*radius_range)
    return math.cos(angle) * radius, math.sin(angle) * radius


def build_scenery(world: World, rng: random.Random) -> PlacementRecord:
    """Scatter the static obstacles.  Returns the (spent) placement record."""
    attempts = int(_tun("placement", "max_attempts", C.PLACEMENT_MAX_ATTEMPTS))
    sep = float(_tun("placement", "min_separation", C.SCENERY_MIN_SEPARATION))
    record = PlacementRecord()

    # Industrial building: far ring, not checked against the others
    cfg = _layout("building")
    x, z = _polar(rng, cfg["radius"])
    _scenery(world, "building", x, 0.0, z,
             scale=rng.uniform(*cfg["scale"]), yaw=rng.random() * C.TAU,
             half_size=Vec3(*cfg["half_size"]))

    # Glaciers: far ring, mutually separated
    cfg = _layout("glaciers")
    for _ in range(int(cfg["count"])):
        x, z = record.place(rng, radius_range=tuple(cfg["radius"]),
                            min_radius=sep, max_attempts=attempts)
        _scenery(world, "glacier", x, 0.0, z,
                 scale=rng.uniform(*cfg["scale"]), yaw=rng.random() * C.TAU,
                 half_size=Vec3(*cfg["half_size"]))

    # Radars: outskirts, separated from glaciers and each other
    cfg = _layout("radars")
    for _ in range(int(cfg["count"])):
        x, z = record.place(rng, radius_range=tuple(cfg["radius"]),
                            min_radius=sep, max_attempts=attempts)
        _scenery(world, "radar", x, 0.0, z,
                 scale=rng.uniform(*cfg["scale"]), yaw=rng.random() * C.TAU,
                 half_size=Vec3(*cfg["half_size"]), rotating=True)

    # Rusty sphere: close in, half buried, box as wide as its radius
    cfg = _layout("sphere")
    x, z = _polar(rng, cfg["radius"])
    size = rng.uniform(*cfg["size"])
    _scenery(world, "sphere", x, size * 0.5, z,
             scale=1.0, yaw=0.0, half_size=Vec3.splat(size))

    return record


# ── Entry point ──────────────────────────────────────────────────────

def build_world(seed: int | None = None, *, with_spawner: bool = True,
                with_scenery: bool = True) -> World:
    """Assemble a ready-to-tick world."""
    if seed is None:
        seed = int(_tun("world", "seed", 0))
    world = World()
    setup_world_resources(world, seed)

    world.spawn(Transform(), Ground(half_size=C.GROUND_HALF_SIZE),
                Identity(name="ground", kind="ground"))
    create_agent(world)

    if with_scenery:
        record = build_scenery(world, random.Random(seed))
        print(f"[WORLD] Seed {seed}: placed {len(record)} separated props "
              f"({record.exhausted} best-effort)")
    if with_spawner:
        make_spawner(world)
    return world
