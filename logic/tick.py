"""logic/tick.py — System tick orchestration.

One call to ``tick_systems`` is one simulated frame.  Systems run in a
fixed order and each finishes before the next starts, so nobody reads
a half-updated world:

    clock → agent control → props → footprints → camera
          → pursuit → contact → effects → spawner
          → event drain → purge

Entities killed mid-frame are hidden from later queries at once and
physically removed by the final ``purge``.

Usage::

    from logic.tick import tick_systems
    tick_systems(world, dt, controls)
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from components import GameClock, ControlState
from core.events import EventBus
from logic.movement import agent_control_system, rotating_prop_system
from logic.camera import camera_follow_system
from logic.pursuit import pursuit_system
from logic.combat import contact_system
from logic.effects import footstep_emitter_system, effect_lifecycle_system
from logic.spawner import spawner_system

if TYPE_CHECKING:
    from core.ecs import World


def tick_systems(world: "World", dt: float,
                 controls: ControlState | None = None,
                 *, skip_spawner: bool = False,
                 skip_footsteps: bool = False) -> None:
    """Run all simulation systems for one frame.

    Parameters
    ----------
    world : World
        The ECS world.
    dt : float
        Seconds since the previous frame.
    controls : ControlState | None
        Key snapshot for the agent; ``None`` means no input this frame.
    skip_spawner : bool
        Freeze periodic spawning (scripted scenarios and tests).
    skip_footsteps : bool
        Don't emit footprints (keeps effect counts predictable).
    """
    clock = world.res(GameClock)
    if clock:
        clock.time += dt
        clock.frame += 1

    # Input → agent
    agent_control_system(world, dt, controls)
    rotating_prop_system(world, dt)
    if not skip_footsteps:
        footstep_emitter_system(world, dt)
    camera_follow_system(world, dt, controls)

    # Chase → strike → fade → reinforce
    pursuit_system(world, dt)
    contact_system(world)
    effect_lifecycle_system(world, dt)
    if not skip_spawner:
        spawner_system(world, dt)

    bus = world.res(EventBus)
    if bus:
        bus.drain()

    world.purge()
