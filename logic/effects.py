"""logic/effects.py — Transient effect emission and lifecycle.

Usage:
    # Emit from anywhere:
    spawn_smoke_ring(world, Vec3(x, y, z))

    # Once per frame, after movement-driven emitters:
    footstep_emitter_system(world, dt)
    ...
    effect_lifecycle_system(world, dt)

Footprints age upward and shrink from full size to 0.3; smoke ages
downward, drifts along its velocity and shrinks from full size to 0.1.
Expired entities are killed in the same frame they expire.
"""

from __future__ import annotations
import math

from core.ecs import World
from core.vec3 import Vec3
from core.tuning import get as _tun
from core import constants as C
from components import (
    Transform, Footstep, SmokeParticle, Identity, ControlledAgent,
    AgentMotion, FootstepCadence, GameClock,
)


def _current_frame(world: World) -> int | None:
    clock = world.res(GameClock)
    return clock.frame if clock else None


# ── emitters ─────────────────────────────────────────────────────────

def spawn_smoke_ring(world: World, center: Vec3, count: int | None = None,
                     lifetime: float | None = None) -> list[int]:
    """Emit *count* smoke puffs evenly around *center*.

    Each puff starts ``SMOKE_RING_RADIUS`` out along its ring angle and
    drifts outward while rising.  Returns the new entity ids.
    """
    if count is None:
        count = int(_tun("effects.smoke", "count", C.SMOKE_RING_COUNT))
    if lifetime is None:
        lifetime = float(_tun("effects.smoke", "lifetime", C.SMOKE_LIFETIME))
    ring = _tun("effects.smoke", "ring_radius", C.SMOKE_RING_RADIUS)
    drift = _tun("effects.smoke", "drift", C.SMOKE_DRIFT)
    rise = _tun("effects.smoke", "rise_speed", C.SMOKE_RISE_SPEED)

    born = _current_frame(world)
    eids: list[int] = []
    for i in range(count):
        angle = i * C.TAU / count
        ox = math.cos(angle) * ring
        oz = math.sin(angle) * ring
        eids.append(world.spawn(
            Transform(position=Vec3(center.x + ox, center.y, center.z + oz)),
            SmokeParticle(lifetime=lifetime, max_lifetime=lifetime,
                          velocity=Vec3(ox * drift, rise, oz * drift),
                          born_frame=-1 if born is None else born),
            Identity(name="smoke", kind="effect"),
        ))
    return eids


def spawn_footprint_pair(world: World, agent_tf: Transform, phase: int) -> list[int]:
    """Drop a left/right footprint pair just behind *agent_tf*.

    *phase* alternates which foot leads, giving a walking gait.
    """
    behind = _tun("effects.footsteps", "behind", C.FOOTSTEP_BEHIND)
    side = _tun("effects.footsteps", "side", C.FOOTSTEP_SIDE)
    stride = _tun("effects.footsteps", "stride", C.FOOTSTEP_STRIDE)
    life = _tun("effects.footsteps", "lifetime", C.FOOTSTEP_LIFETIME)

    fwd = agent_tf.forward()
    right = agent_tf.right()
    base = agent_tf.position - fwd * behind
    base = Vec3(base.x, C.FOOTSTEP_Y, base.z)
    lead = stride if phase == 0 else -stride

    born = _current_frame(world)
    eids = []
    for side_sign, along in ((1.0, lead), (-1.0, -lead)):
        pos = base + right * (side * side_sign) + fwd * along
        eids.append(world.spawn(
            Transform(position=pos, yaw=agent_tf.yaw),
            Footstep(lifetime=0.0, max_lifetime=life,
                     born_frame=-1 if born is None else born),
            Identity(name="footprint", kind="effect"),
        ))
    return eids


def footstep_emitter_system(world: World, dt: float) -> None:
    """Leave footprints behind the agent while it is moving.

    Timing is an accumulator advanced by *dt*, so the cadence is the
    same at any frame rate.  Standing still lets the accumulator rest.
    """
    res = world.query_one(ControlledAgent, Transform)
    if res is None:
        return
    eid, _agent, tf = res
    cadence = world.res(FootstepCadence)
    if cadence is None:
        return
    motion = world.get(eid, AgentMotion)
    if motion is None or not motion.moved:
        return

    cadence.accumulator += dt
    while cadence.accumulator >= cadence.interval:
        cadence.accumulator -= cadence.interval
        spawn_footprint_pair(world, tf, cadence.phase)
        cadence.phase ^= 1


# ── lifecycle ────────────────────────────────────────────────────────

def effect_lifecycle_system(world: World, dt: float) -> None:
    """Age every transient effect; shrink it, move it, or remove it.

    Effects emitted earlier in the current frame are left alone until
    the next one, so each lives its full lifetime of later frames.
    """
    frame = _current_frame(world)
    for eid, tf, step in world.query(Transform, Footstep):
        if step.born_frame == frame:
            continue
        step.lifetime += dt
        if step.lifetime >= step.max_lifetime:
            world.kill(eid)
            continue
        fade = 1.0 - step.lifetime / step.max_lifetime
        tf.scale = Vec3.splat(0.3 + fade * 0.7)

    for eid, tf, smoke in world.query(Transform, SmokeParticle):
        if smoke.born_frame == frame:
            continue
        smoke.lifetime -= dt
        if smoke.lifetime <= 0.0:
            world.kill(eid)
            continue
        tf.position = tf.position + smoke.velocity * dt
        fade = smoke.lifetime / smoke.max_lifetime
        tf.scale = Vec3.splat(0.1 + fade * 0.9)


def live_effect_count(world: World) -> int:
    return world.count(Footstep) + world.count(SmokeParticle)
