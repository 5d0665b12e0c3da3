"""logic/movement.py — Agent control and prop animation.

The agent is tank-steered: forward/back translate along its facing,
turn keys rotate it about +Y.  The speed modifier doubles translation
speed only.  Props marked ``RotatingProp`` spin in place.
"""

from __future__ import annotations

from core.ecs import World
from core.tuning import get as _tun
from core import constants as C
from components import (
    Transform, ControlledAgent, AgentMotion, ControlState, RotatingProp,
)


def agent_control_system(world: World, dt: float,
                         controls: ControlState | None) -> None:
    """Apply this frame's key state to the controlled agent."""
    res = world.query_one(ControlledAgent, Transform)
    if res is None:
        return
    eid, agent, tf = res

    motion = world.get(eid, AgentMotion)
    if motion is None:
        motion = AgentMotion()
        world.add(eid, motion)
    motion.moved = False
    motion.distance = 0.0

    if controls is None:
        return

    speed = agent.speed
    if controls.speed_mod:
        speed *= _tun("agent", "sprint_mult", C.AGENT_SPRINT_MULT)

    before = tf.position.copy()
    if controls.forward:
        tf.position = tf.position + tf.forward() * (speed * dt)
    if controls.back:
        tf.position = tf.position + tf.back() * (speed * dt)

    turn = 0.0
    if controls.turn_left:
        turn += agent.turn_rate * dt
    if controls.turn_right:
        turn -= agent.turn_rate * dt
    if turn:
        tf.rotate_y(turn)

    travelled = before.distance(tf.position)
    motion.moved = travelled > 0.0
    motion.distance = travelled


def rotating_prop_system(world: World, dt: float) -> None:
    for _eid, tf, prop in world.query(Transform, RotatingProp):
        tf.rotate_y(prop.rate * dt)
