"""test_effects.py — Footprint and smoke lifecycles.

Lifetimes are stepped with dt values that sum exactly in binary
floating point (0.5, 0.25) so expiry frames are unambiguous.

Run: python test_effects.py
"""
from __future__ import annotations
import sys, traceback

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
from core.bootstrap import setup_world_resources, create_agent
from components import (
    Transform, Footstep, SmokeParticle, AgentMotion, FootstepCadence, ControlState,
    GameClock,
)
from logic.spawner import spawn_pursuer
from logic.effects import (
    spawn_smoke_ring, spawn_footprint_pair, footstep_emitter_system,
    effect_lifecycle_system, live_effect_count,
)
from logic.tick import tick_systems

import core.tuning as _tuning
_tuning.load()


def _arena() -> tuple[World, int]:
    w = World()
    setup_world_resources(w)
    agent = create_agent(w, Vec3(0.0, 0.0, 0.0))
    return w, agent


def _age(w: World, dt: float):
    """Run the lifecycle pass as a later frame than the one that emitted."""
    w.res(GameClock).frame += 1
    effect_lifecycle_system(w, dt)


# ═══════════════════════════════════════════════════════════════════
#  Tests
# ═══════════════════════════════════════════════════════════════════

def test_smoke_expires_at_two_seconds():
    print("\n=== 1: Smoke lifetime ===")
    w, _ = _arena()
    spawn_smoke_ring(w, Vec3(0.0, 0.0, 0.0))
    check(w.count(SmokeParticle) == 8, "ring of eight")

    for _ in range(3):
        _age(w, 0.5)
    check(w.count(SmokeParticle) == 8, "all alive at 1.5 s")
    _age(w, 0.5)
    check(w.count(SmokeParticle) == 0, "all gone at exactly 2.0 s")
    w.purge()
    check(live_effect_count(w) == 0, "nothing left after purge")


def test_smoke_lives_two_seconds_through_the_tick():
    print("\n=== 2: Smoke lifetime, full frames ===")
    w, _ = _arena()
    spawn_pursuer(w, Vec3(1.0, 0.0, 0.0), 3.0)
    tick_systems(w, 0.5, None, skip_spawner=True, skip_footsteps=True)
    check(w.count(SmokeParticle) == 8, "contact left a ring")
    check(all(s.lifetime == 2.0 for _, s in w.all_of(SmokeParticle)),
          "not aged in the frame that emitted it")

    elapsed = 0.0
    while w.count(SmokeParticle):
        tick_systems(w, 0.5, None, skip_spawner=True, skip_footsteps=True)
        elapsed += 0.5
        if w.count(SmokeParticle):
            check(elapsed < 2.0, f"still alive at {elapsed} s")
    check(elapsed == 2.0, f"ring cleared after {elapsed} s of later frames")


def test_smoke_rises_drifts_and_shrinks():
    print("\n=== 3: Smoke motion ===")
    w, _ = _arena()
    eids = spawn_smoke_ring(w, Vec3(0.0, 0.0, 0.0), count=4)
    first = w.get(eids[0], Transform)           # angle 0 → offset (+0.5, 0)
    check(first.position.is_close(Vec3(0.5, 0.0, 0.0)), "first puff starts at +X")

    _age(w, 0.5)
    # velocity = (0.5·0.5, 1.0, 0)
    check(first.position.is_close(Vec3(0.625, 0.5, 0.0)), f"moved to {first.position}")
    check(abs(first.scale.x - (0.1 + 0.75 * 0.9)) < 1e-9, "scale 0.1 + fade·0.9")


def test_footprints_expire_at_three_seconds():
    print("\n=== 4: Footprint lifetime ===")
    w, _ = _arena()
    tf = Transform()
    spawn_footprint_pair(w, tf, 0)
    for _ in range(5):
        _age(w, 0.5)
    check(w.count(Footstep) == 2, "both prints alive at 2.5 s")
    scale = next(t.scale.x for _, t, _ in w.query(Transform, Footstep))
    check(abs(scale - (0.3 + (0.5 / 3.0) * 0.7)) < 1e-9, "scale 0.3 + fade·0.7")
    _age(w, 0.5)
    check(w.count(Footstep) == 0, "both gone at exactly 3.0 s")


def test_footprint_pair_sits_behind_agent():
    print("\n=== 5: Footprint placement ===")
    w, _ = _arena()
    first, second = spawn_footprint_pair(w, Transform(), 0)  # facing −Z
    a = w.get(first, Transform).position
    b = w.get(second, Transform).position
    check(a.y == 0.05 and b.y == 0.05, "prints just above the ground")
    check(abs(a.x - 0.3) < 1e-9 and abs(b.x + 0.3) < 1e-9, "±0.3 u to the sides")
    check(a.z > 0.0 and b.z > 0.0, "both behind the agent (+Z)")
    check(abs(a.z - 0.3) < 1e-9 and abs(b.z - 0.7) < 1e-9, "staggered by the gait offset")


def test_emitter_only_while_moving():
    print("\n=== 6: Emitter cadence ===")
    w, agent = _arena()
    footstep_emitter_system(w, 1.0)
    check(w.count(Footstep) == 0, "standing still leaves no prints")

    w.get(agent, AgentMotion).moved = True
    cadence = w.res(FootstepCadence)
    cadence.interval = 0.25
    footstep_emitter_system(w, 0.25)
    check(w.count(Footstep) == 2, "one pair per interval")
    check(cadence.phase == 1, "gait phase flipped")
    footstep_emitter_system(w, 0.5)
    check(w.count(Footstep) == 6, "long frame emits every pair it owes")


def test_driving_leaves_a_trail():
    print("\n=== 7: Through the tick ===")
    w, _ = _arena()
    tick_systems(w, 0.25, None, skip_spawner=True)
    check(w.count(Footstep) == 0, "idle frame: no prints")
    drive = ControlState(forward=True)
    for _ in range(4):
        tick_systems(w, 0.25, drive, skip_spawner=True)
    check(w.count(Footstep) > 0, f"driving for 1 s left {w.count(Footstep)} prints")
    frame = w.res(GameClock).frame
    check(all(fp.lifetime == 0.25 * (frame - fp.born_frame)
              for _, fp in w.all_of(Footstep)),
          "each print aged only by the frames after its own")


# ═══════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("Smoke lifetime", test_smoke_expires_at_two_seconds),
        ("Smoke lifetime, full frames", test_smoke_lives_two_seconds_through_the_tick),
        ("Smoke motion", test_smoke_rises_drifts_and_shrinks),
        ("Footprint lifetime", test_footprints_expire_at_three_seconds),
        ("Footprint placement", test_footprint_pair_sits_behind_agent),
        ("Emitter cadence", test_emitter_only_while_moving),
        ("Through the tick", test_driving_leaves_a_trail),
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
    print(f"  Effect Tests: {_passed} passed, {_failed} failed")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
