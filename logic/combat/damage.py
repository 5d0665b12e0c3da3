"""logic/combat/damage.py — Canonical damage application.

Every code path that hurts the agent funnels through
``apply_contact_damage()`` so clamping, events, and logging stay
consistent.  This module is the only writer of ``Health`` during a
frame.
"""

from __future__ import annotations

from core.ecs import World
from core.events import EventBus, HealthChanged, AgentDown
from components import Health, ControlledAgent, Identity


def entity_display_name(world: World, eid: int) -> str:
    ident = world.get(eid, Identity)
    if ident and ident.name:
        return ident.name
    return f"#{eid}"


def apply_contact_damage(world: World, target_eid: int, attacker_eid: int,
                         amount: float) -> tuple[float, bool]:
    """Deal *amount* damage to *target_eid*, clamped at zero.

    Returns ``(damage_dealt, went_down)`` where *went_down* is True
    only on the hit that takes health from above zero to zero.
    Targets without ``Health`` are ignored.
    """
    health = world.get(target_eid, Health)
    if health is None:
        return 0.0, False

    was_up = not health.depleted
    dealt = health.damage(amount)

    bus = world.res(EventBus)
    if bus:
        bus.emit(HealthChanged(eid=target_eid, current=health.current,
                               maximum=health.maximum))

    target_name = entity_display_name(world, target_eid)
    attacker_name = entity_display_name(world, attacker_eid)
    print(f"[COMBAT] {attacker_name} hit {target_name} for {dealt:.0f} damage "
          f"(HP: {health.current:.0f}/{health.maximum:.0f})")

    went_down = was_up and health.depleted
    if went_down:
        print(f"[COMBAT] {target_name} down!")
        if bus:
            bus.emit(AgentDown(eid=target_eid))
    return dealt, went_down


def agent_health(world: World) -> tuple[float, float] | None:
    """``(current, maximum)`` of the controlled agent, for display."""
    res = world.query_one(ControlledAgent, Health)
    if res is None:
        return None
    _, _, health = res
    return health.current, health.maximum
