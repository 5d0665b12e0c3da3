"""logic/combat/contact.py — Pursuer/agent contact resolution.

A pursuer closer than the contact threshold strikes the agent: fixed
damage, a ring of smoke where the pursuer was, and the pursuer is
destroyed.  Several pursuers arriving in the same frame each strike;
there is no per-frame damage cap.
"""

from __future__ import annotations

from core.ecs import World
from core.events import EventBus, ContactHit
from core.tuning import get as _tun
from core import constants as C
from components import Transform, Health, Pursuer, ControlledAgent, GameClock, DevLog
from logic.combat.damage import apply_contact_damage
from logic.effects import spawn_smoke_ring


def contact_system(world: World) -> int:
    """Resolve every agent/pursuer contact this frame.  Returns hit count."""
    threshold = _tun("combat", "contact_threshold", C.CONTACT_THRESHOLD)
    damage = _tun("combat", "contact_damage", C.CONTACT_DAMAGE)
    bus = world.res(EventBus)
    log = world.res(DevLog)
    clock = world.res(GameClock)
    now = clock.time if clock else 0.0

    hits = 0
    for agent_eid, _agent, agent_tf, health in world.query(
            ControlledAgent, Transform, Health):
        for p_eid, p_tf, _pursuer in world.query(Transform, Pursuer):
            dist = agent_tf.position.distance(p_tf.position)
            if dist >= threshold:
                continue
            impact = p_tf.position.copy()
            apply_contact_damage(world, agent_eid, p_eid, damage)
            spawn_smoke_ring(world, impact)
            world.kill(p_eid)
            hits += 1
            if bus:
                bus.emit(ContactHit(
                    agent_eid=agent_eid, pursuer_eid=p_eid,
                    x=impact.x, y=impact.y, z=impact.z,
                    damage=damage, health_after=health.current,
                ))
            if log:
                log.record(p_eid, "combat", "contact", t=now,
                           details={"dist": round(dist, 3),
                                    "hp": health.current})
    return hits
