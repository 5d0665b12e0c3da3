"""test_simulation.py — Headless verification of the full frame.

Tests:
1. End-to-end chase: one pursuer from 50 u reaches the agent once
2. World build is reproducible from its seed and lays out every prop
3. Agent driving, turning and sprint
4. Camera rig follows and clamps its pitch
5. Spawner inside the full tick
6. Radars spin

Run: python test_simulation.py
"""
from __future__ import annotations
import sys, math, random, traceback

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
from core.bootstrap import (
    build_world, build_scenery, setup_world_resources, create_agent,
)
from components import (
    Transform, Health, Pursuer, SmokeParticle, Scenery, ObstacleBlocker,
    RotatingProp, Ground, ControlledAgent, ControlState, CameraRig, GameClock,
)
from logic.spawner import spawn_pursuer
from logic.tick import tick_systems

import core.tuning as _tuning
_tuning.load()


def _agent_tf(w: World) -> Transform:
    return w.query_one(ControlledAgent, Transform)[2]


# ═══════════════════════════════════════════════════════════════════
#  Tests
# ═══════════════════════════════════════════════════════════════════

def test_end_to_end_chase():
    print("\n=== 1: End-to-end chase ===")
    w = World()
    setup_world_resources(w)
    agent = create_agent(w)                         # (0, 0.5, 0)
    pursuer = spawn_pursuer(w, Vec3(50.0, 0.0, 0.0), 3.0)
    hits: list = []
    w.res(EventBus).subscribe("ContactHit", hits.append)

    for _ in range(16):
        tick_systems(w, 1.0, None, skip_spawner=True)
    check(w.alive(pursuer), "still closing after 16 s (48 u covered)")
    gap = w.get(pursuer, Transform).position.distance(_agent_tf(w).position)
    check(1.5 < gap < 3.0, f"remaining gap {gap:.3f} u")
    check(w.get(agent, Health).current == 100.0, "no damage yet")

    tick_systems(w, 1.0, None, skip_spawner=True)
    check(not w.alive(pursuer), "pursuer destroyed on arrival")
    check(len(hits) == 1, "exactly one ContactHit")
    check(w.get(agent, Health).current == 90.0, "health 100 → 90")
    check(w.count(SmokeParticle) == 8, "smoke ring at the impact")
    impact = Vec3(hits[0].x, hits[0].y, hits[0].z)
    check(impact.is_close(_agent_tf(w).position), "impact recorded at the agent")

    for _ in range(13):
        tick_systems(w, 1.0, None, skip_spawner=True)
    check(len(hits) == 1 and w.get(agent, Health).current == 90.0,
          "no further contacts over the next 13 s")
    check(w.count(SmokeParticle) == 0, "smoke has cleared")
    check(w.res(GameClock).frame == 30, "30 frames ticked")


def test_world_build_is_seeded():
    print("\n=== 2: Seeded world ===")
    def layout(seed):
        w = build_world(seed=seed, with_spawner=False)
        return w, sorted((s.kind, round(tf.position.x, 6), round(tf.position.z, 6))
                         for _, tf, s in w.query(Transform, Scenery))

    w, first = layout(5)
    _, again = layout(5)
    _, other = layout(6)
    check(first == again, "same seed → identical scenery")
    check(first != other, "different seed → different scenery")

    kinds = [k for k, _, _ in first]
    check(kinds.count("building") == 1 and kinds.count("glacier") == 11
          and kinds.count("radar") == 6 and kinds.count("sphere") == 1,
          "1 building, 11 glaciers, 6 radars, 1 sphere")
    check(w.count(Ground) == 1, "one ground slab")
    check(w.count(RotatingProp) == 6, "every radar spins")
    check(not w.query_one(Ground, ObstacleBlocker), "ground is not a sight blocker")

    for _, tf, blk, s in w.query(Transform, ObstacleBlocker, Scenery):
        if s.kind == "sphere":
            size = blk.half_size.x
            check(6.0 <= size <= 10.0, f"sphere size {size:.2f} in [6, 10]")
            check(abs(tf.position.y - size / 2) < 1e-9, "sphere half buried")
        elif s.kind == "glacier":
            r = math.hypot(tf.position.x, tf.position.z)
            check(100.0 <= r <= 180.0, f"glacier at r={r:.1f}")
        elif s.kind == "building":
            check(blk.half_size == Vec3(10.0, 7.5, 10.0), f"building box {blk.half_size}")


def test_scenery_separation():
    print("\n=== 3: Prop separation ===")
    w = World()
    record = build_scenery(w, random.Random(8))
    check(len(record) == 17, "glaciers and radars share one placement record")
    if record.exhausted == 0:
        pts = record.points
        closest = min(math.dist(a, b) for i, a in enumerate(pts) for b in pts[i + 1:])
        check(closest >= 25.0, f"closest pair {closest:.2f} ≥ 25 u")
    else:
        ok(f"({record.exhausted} best-effort placements; separation not guaranteed)")


def test_agent_control():
    print("\n=== 4: Agent control ===")
    w = World()
    setup_world_resources(w)
    create_agent(w)
    tf = _agent_tf(w)

    tick_systems(w, 0.5, ControlState(forward=True), skip_spawner=True)
    tick_systems(w, 0.5, ControlState(forward=True), skip_spawner=True)
    check(tf.position.is_close(Vec3(0.0, 0.5, -5.0)), f"W for 1 s → {tf.position}")

    tick_systems(w, 1.0, ControlState(back=True, speed_mod=True), skip_spawner=True)
    check(tf.position.is_close(Vec3(0.0, 0.5, 5.0)), "Shift+S covers 10 u")

    tick_systems(w, 0.5, ControlState(turn_left=True, speed_mod=True), skip_spawner=True)
    check(abs(tf.yaw - 1.0) < 1e-9, "turning ignores sprint: 2 rad/s × 0.5 s")
    tick_systems(w, 0.5, ControlState(turn_right=True), skip_spawner=True)
    check(abs(tf.yaw) < 1e-9, "turned back to 0")


def test_camera_rig():
    print("\n=== 5: Camera rig ===")
    w = World()
    setup_world_resources(w)
    create_agent(w)
    rig = w.res(CameraRig)

    tick_systems(w, 0.5, ControlState(pitch_up=True), skip_spawner=True)
    check(abs(rig.pitch - 1.0) < 1e-9, "pitch rises at 2 rad/s")
    tick_systems(w, 1.0, ControlState(pitch_up=True), skip_spawner=True)
    check(rig.pitch == 1.5, "pitch clamped at 1.5")
    check(rig.position.is_close(Vec3(0.0, 10.5, 16.0)), f"behind and above: {rig.position}")
    check(rig.look_at.is_close(Vec3(0.0, 8.0, 0.0)), "look-at lifted by pitch × 5")

    for _ in range(4):
        tick_systems(w, 1.0, ControlState(pitch_down=True), skip_spawner=True)
    check(rig.pitch == -1.5, "pitch clamped at −1.5")


def test_spawner_in_full_tick():
    print("\n=== 6: Spawner in the loop ===")
    w = build_world(seed=2)
    for _ in range(40):
        tick_systems(w, 0.25, None)
    check(w.count(Pursuer) == 1, "one pursuer after 10 s", f"got {w.count(Pursuer)}")


def test_radars_spin():
    print("\n=== 7: Radar spin ===")
    w = build_world(seed=4, with_spawner=False)
    eid, tf, prop = next(iter(w.query(Transform, RotatingProp)))
    before = tf.yaw
    tick_systems(w, 0.5, None, skip_spawner=True)
    turned = (tf.yaw - before) % (2 * math.pi)
    check(abs(turned - 0.1) < 1e-9, f"radar turned {turned:.4f} rad in 0.5 s")


# ═══════════════════════════════════════════════════════════════════
#  MAIN
# ═══════════════════════════════════════════════════════════════════

if __name__ == "__main__":
    sections = [
        ("End-to-end chase", test_end_to_end_chase),
        ("Seeded world", test_world_build_is_seeded),
        ("Prop separation", test_scenery_separation),
        ("Agent control", test_agent_control),
        ("Camera rig", test_camera_rig),
        ("Spawner in the loop", test_spawner_in_full_tick),
        ("Radar spin", test_radars_spin),
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
    print(f"  Simulation Tests: {_passed} passed, {_failed} failed")
    print(f"{'=' * 60}")
    sys.exit(1 if _failed else 0)
