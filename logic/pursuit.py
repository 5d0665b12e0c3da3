"""logic/pursuit.py — Straight-line chase steering.

Each pursuer is either *dormant* (agent at or beyond the activation
range) or *pursuing*.  The state is re-derived from distance every
frame; nothing is latched.

While pursuing a pursuer steps straight at the agent at its fixed
speed and snaps onto the agent when the step would reach or pass it,
so it never overshoots or oscillates.  Its yaw is set so the model's
local +Z faces the direction of travel: ``yaw = atan2(dx, dz)``.

Line of sight is evaluated for every pursuing pursuer and stored on
``Pursuer.last_line_of_sight``.  By default it does NOT stop the chase
(the flag feeds the debug overlay and telemetry); set
``pursuit.require_line_of_sight = true`` to hold occluded pursuers in
place.
"""

from __future__ import annotations
import math

from core.ecs import World
from core.vec3 import Vec3
from core.tuning import get as _tun
from core.constants import ACTIVATION_RANGE
from components import Transform, Pursuer, ControlledAgent, GameClock, DevLog
from logic.visibility import has_line_of_sight, obstacle_volumes, ObstacleVolume

# Below this distance a direction cannot be normalised; treat as arrived.
_ARRIVED_EPS = 1e-6


def find_agent(world: World):
    """Return ``(eid, Transform)`` of the controlled agent, or ``(None, None)``."""
    res = world.query_one(ControlledAgent, Transform)
    if res:
        return res[0], res[2]
    return None, None


def step_toward(tf: Transform, target: Vec3, speed: float, dt: float) -> float:
    """Move *tf* toward *target* by ``speed * dt`` without overshooting.

    Returns the distance that remained before the step.  A pursuer
    already on the target is left untouched (position and yaw).
    """
    offset = target - tf.position
    distance = offset.length()
    if distance <= _ARRIVED_EPS:
        return distance

    direction = Vec3(offset.x / distance, offset.y / distance, offset.z / distance)
    step = speed * dt
    if step < distance:
        tf.position = tf.position + direction * step
    else:
        tf.position = target.copy()
    tf.yaw = math.atan2(direction.x, direction.z)
    return distance


def pursuit_system(world: World, dt: float,
                   obstacles: list[ObstacleVolume] | None = None) -> None:
    """Advance every pursuer toward the agent for one frame."""
    agent_eid, agent_tf = find_agent(world)
    if agent_eid is None:
        return

    activation = _tun("pursuit", "activation_range", ACTIVATION_RANGE)
    gate_on_los = bool(_tun("pursuit", "require_line_of_sight", False))
    if obstacles is None:
        obstacles = obstacle_volumes(world)

    log = world.res(DevLog)
    clock = world.res(GameClock)
    now = clock.time if clock else 0.0

    target = agent_tf.position
    for eid, tf, pursuer in world.query(Transform, Pursuer):
        distance = tf.position.distance(target)
        was_active = pursuer.active

        if distance >= activation:
            pursuer.active = False
            pursuer.last_line_of_sight = False
        else:
            pursuer.active = True
            los = has_line_of_sight(tf.position, target, obstacles)
            if log and los != pursuer.last_line_of_sight:
                log.record(eid, "visibility",
                           "sight clear" if los else "sight blocked",
                           t=now, details={"dist": round(distance, 2)})
            pursuer.last_line_of_sight = los
            if los or not gate_on_los:
                step_toward(tf, target, pursuer.speed, dt)

        if log and was_active != pursuer.active:
            msg = "dormant → pursuing" if pursuer.active else "pursuing → dormant"
            log.record(eid, "pursuit", msg, t=now,
                       details={"dist": round(distance, 2)})
