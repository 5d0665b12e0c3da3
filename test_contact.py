"""test_contact.py — Pursuer strikes on the agent.

Verifies damage, clamping, the smoke ring at the impact point,
pursuer removal, and the events the host listens for.

Run: python test_contact.py
"""
from __future__ import annotations
import sys, math, traceback

# ── Test harness ─────────────────────────────────────────────────────

_passed = 0
_failed = 0

def ok(label: str):
    global _passed
    _passed += 1
    print(f"  [PASS] {label}")

def fail(label: str, detail: str = ""):
    global _failed
    _failed += 1
    msg = f"  [FAIL] {label}"
    if detail:
        msg += f" — {detail}"
    print(msg)

def check(cond: bool, label: str, detail: str = ""):
    if cond:
        ok(label)
    else:
        fail(label, detail)
        raise AssertionError(f"{label}: {detail}")


from core.ecs import World
from core.vec3 import Vec3
from core.events import EventBus
from core.bootstrap import setup_world_resources, create_agent
from components import Transform, Health, Pursuer, SmokeParticle
from logic.combat import contact_system, apply_contact_damage, agent_health
from logic.spawner import spawn_pursuer

import core.tuning as _tuning
_tuning.load()


def _arena(at: Vec3 | None = None) -> tuple[World, int]:
    w = World()
    setup_world_resources(w)
    agent = create_agent(w, at)
    return w, agent


def _collect(w: World, *names: str) -> dict[str, list]:
    """Subscribe to *names* on the bus; returns the lists they fill."""
    bus = w.res(EventBus)
    seen: dict[str, list] = {n: [] for n in names}
    for n in names:
        bus.subscribe(n, seen[n].append)
    return seen


# ═══════════════════════════════════════════════════════════════════
#  Tests
# ═══════════════════════════════════════════════════════════════════

def test_single_contact():
    print("\n=== 1: One strike ===")
    w, agent = _arena()                      # agent at (0, 0.5, 0)
    seen = _collect(w, "ContactHit", "HealthChanged")
    p = spawn_pursuer(w, Vec3(1.0, 0.0, 0.0), 3.0)

    hits = contact_system(w)
    check(hits == 1, "one contact resolved", f"hits={hits}")
    check(w.get(agent, Health).current == 90.0, "health 100 → 90")
    check(not w.alive(p), "pursuer destroyed")
    check(agent_health(w) == (90.0, 100.0), "agent_health reports (90, 100)")

    smoke = [(eid, tf) for eid, tf, _ in w.query(Transform, SmokeParticle)]
    check(len(smoke) == 8, "eight smoke puffs", f"got {len(smoke)}")
    radii = [math.hypot(tf.position.x - 1.0, tf.position.z) for _, tf in smoke]
    check(all(abs(r - 0.5) < 1e-9 for r in radii), "puffs on a 0.5 u ring around the impact")
    check(all(tf.position.y == 0.0 for _, tf in smoke), "puffs at impact height")

    w.res(EventBus).drain()
    hit = seen["ContactHit"][0]
    check((hit.x, hit.y, hit.z) == (1.0, 0.0, 0.0), "ContactHit carries the impact point")
    check(hit.health_after == 90.0, "ContactHit carries health after the hit")
    check(seen["HealthChanged"][0].current == 90.0, "HealthChanged emitted")


def test_threshold_is_strict():
    print("\n=== 2: Threshold ===")
    w, agent = _arena(Vec3(0.0, 0.0, 0.0))
    p = spawn_pursuer(w, Vec3(1.5, 0.0, 0.0), 3.0)
    check(contact_system(w) == 0, "exactly 1.5 u is not a contact")
    check(w.alive(p) and w.get(agent, Health).current == 100.0, "nothing changed")

    w.get(p, Transform).position = Vec3(1.4999, 0.0, 0.0)
    check(contact_system(w) == 1, "just inside 1.5 u strikes")


def test_simultaneous_contacts_all_count():
    print("\n=== 3: Same-frame arrivals ===")
    w, agent = _arena(Vec3(0.0, 0.0, 0.0))
    spawn_pursuer(w, Vec3(0.5, 0.0, 0.0), 3.0)
    spawn_pursuer(w, Vec3(-0.5, 0.0, 0.0), 3.0)
    spawn_pursuer(w, Vec3(20.0, 0.0, 0.0), 3.0)
    check(contact_system(w) == 2, "two close pursuers both strike")
    check(w.get(agent, Health).current == 80.0, "health 100 → 80")
    check(w.count(Pursuer) == 1, "far pursuer survives")
    check(w.count(SmokeParticle) == 16, "one ring per strike")


def test_health_clamps_at_zero():
    print("\n=== 4: Twenty strikes, frame by frame ===")
    w, agent = _arena(Vec3(0.0, 0.0, 0.0))
    seen = _collect(w, "AgentDown")
    for _ in range(20):
        spawn_pursuer(w, Vec3(0.0, 0.0, 0.0), 3.0)
        contact_system(w)
        w.purge()
        check(w.get(agent, Health).current >= 0.0, "health never negative")
    w.res(EventBus).drain()
    check(w.get(agent, Health).current == 0.0, "health clamped at 0")
    check(len(seen["AgentDown"]) == 1, "AgentDown fired exactly once",
          f"got {len(seen['AgentDown'])}")


def test_twenty_contacts_in_one_frame():
    print("\n=== 5: Twenty strikes, one pass ===")
    w, agent = _arena(Vec3(0.0, 0.0, 0.0))
    seen = _collect(w, "AgentDown", "ContactHit")
    for _ in range(20):
        spawn_pursuer(w, Vec3(0.0, 0.0, 0.0), 3.0)

    hits = contact_system(w)
    check(hits == 20, "every pursuer strikes in the same pass", f"hits={hits}")
    check(w.get(agent, Health).current == 0.0, "200 damage clamps health to 0")
    check(w.count(Pursuer) == 0, "all twenty destroyed")
    check(w.count(SmokeParticle) == 160, "eight puffs per strike",
          f"got {w.count(SmokeParticle)}")

    w.res(EventBus).drain()
    check(len(seen["ContactHit"]) == 20, "twenty ContactHit events")
    check(len(seen["AgentDown"]) == 1, "AgentDown fired exactly once",
          f"got {len(seen['AgentDown'])}")
    check(min(e.health_after for e in seen["ContactHit"]) == 0.0,
          "no hit reports negative health")


def test_damage_helper():
    print("\n=== 6: apply_contact_damage ===")
    w, agent = _arena()
    w.get(agent, Health).current = 5.0
    dealt, down = apply_contact_damage(w, agent, 0, 10.0)
    check(dealt == 5.0 and down, "overkill reports the 5 HP actually lost")
    dealt, down = apply_contact_damage(w, agent, 0, 10.0)
    check(dealt == 0.0 and not down, "already down: nothing dealt, no second knockout")
    check(apply_contact_damage(w, 999, 0, 10.0) == (0.0, False),
          "entities without Health are ignored")


def test_health_validation():
    print("\n=== 7: Health bounds ===")
    h = Health(current=150.0, maximum=100.0)
    check(h.current == 100.0, "current clamped to maximum on creation")
    check(h.heal(10.0) == 0.0, "heal above maximum is a no-op")
    try:
        Health(current=0.0, maximum=0.0)
    except ValueError:
        ok("maximum of 0 rejected")
    else:
        fail("maximum of 0 rejected", "no exception")
        raise AssertionError("Health(maximum=0) accepted")


# ═══════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("One strike", test_single_contact),
        ("Threshold", test_threshold_is_strict),
        ("Same-frame arrivals", test_simultaneous_contacts_all_count),
        ("Twenty strikes", test_health_clamps_at_zero),
        ("Twenty strikes, one pass", test_twenty_contacts_in_one_frame),
        ("apply_contact_damage", test_damage_helper),
        ("Health bounds", test_health_validation),
    ]
    for name, fn in sections:
        try:
            fn()
        except AssertionError:
            pass
        except Exception:
            _failed += 1
            print(f"\n  [CRASH] {name} — unhandled exception:")
            traceback.print_exc()

    print(f"\n{'=' * 60}")
    print(f"  Contact Tests: {_passed} passed, {_failed} failed")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
