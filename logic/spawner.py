"""logic/spawner.py — Periodic pursuer spawning.

The spawner entity owns a ``RepeatingTimer``.  Every time the period
elapses it either creates one pursuer on the 30–80 u annulus around
the origin or, with the cap already reached, skips that period.  The
timer resets either way.

Spawn positions come from the placement sampler, seeded from the
spawner's own ``random.Random`` so a run is reproducible from the
world seed.
"""

from __future__ import annotations
import random

from core.ecs import World
from core.vec3 import Vec3
from core.events import EventBus, PursuerSpawned
from core.tuning import get as _tun
from core import constants as C
from components import (
    Transform, Pursuer, PursuerSpawner, RepeatingTimer, Identity, GameClock, DevLog,
)
from logic.placement import sample_position


class SpawnRng:
    """World resource: the PRNG stream used for runtime spawns."""

    def __init__(self, seed: int = 0):
        self.seed = seed
        self.rng = random.Random(seed)


def make_spawner(world: World) -> int:
    """Create the spawner entity from tuning."""
    spawner = PursuerSpawner(
        timer=RepeatingTimer(period=float(_tun("spawner", "period", C.SPAWN_PERIOD))),
        cap=int(_tun("spawner", "cap", C.SPAWN_CAP)),
        radius_min=float(_tun("spawner", "radius_min", C.SPAWN_RADIUS[0])),
        radius_max=float(_tun("spawner", "radius_max", C.SPAWN_RADIUS[1])),
        min_separation=float(_tun("spawner", "min_separation", 5.0)),
        pursuer_speed=float(_tun("pursuit", "speed", C.PURSUER_SPEED)),
    )
    return world.spawn(spawner, Identity(name="Spawner", kind="spawner"))


def spawn_pursuer(world: World, position: Vec3,
                  speed: float = C.PURSUER_SPEED) -> int:
    """Create one pursuer at *position* (announces it on the bus)."""
    eid = world.spawn(
        Transform(position=position.copy(),
                  scale=Vec3.splat(_tun("pursuit", "scale", C.PURSUER_SCALE))),
        Pursuer(speed=speed),
        Identity(name="UGV", kind="pursuer"),
    )
    print(f"[SPAWN] Spawning UGV at position: "
          f"({position.x:.2f}, {position.y:.2f}, {position.z:.2f})")
    bus = world.res(EventBus)
    if bus:
        bus.emit(PursuerSpawned(eid=eid, x=position.x, y=position.y, z=position.z))
    return eid


def spawner_system(world: World, dt: float) -> None:
    """Tick every spawner; create pursuers for each elapsed period."""
    srng = world.res(SpawnRng)
    if srng is None:
        srng = SpawnRng()
        world.set_res(srng)
    log = world.res(DevLog)
    clock = world.res(GameClock)
    now = clock.time if clock else 0.0

    for sp_eid, spawner in world.all_of(PursuerSpawner):
        for _ in range(spawner.timer.tick(dt)):
            live = world.count(Pursuer)
            if live >= spawner.cap:
                spawner.skipped += 1
                if log:
                    log.record(sp_eid, "spawn", "cap reached, skipping",
                               t=now, details={"live": live, "cap": spawner.cap})
                continue
            existing = [tf.ground() for _, tf, _ in world.query(Transform, Pursuer)]
            placed = sample_position(
                existing, spawner.min_separation,
                (spawner.radius_min, spawner.radius_max),
                int(_tun("placement", "max_attempts", C.PLACEMENT_MAX_ATTEMPTS)),
                srng.rng,
            )
            eid = spawn_pursuer(world, Vec3(placed.x, 0.0, placed.z),
                                spawner.pursuer_speed)
            spawner.spawned += 1
            if log:
                log.record(eid, "spawn", "pursuer spawned", t=now,
                           details={"x": round(placed.x, 2),
                                    "z": round(placed.z, 2),
                                    "rejections": placed.rejections})
