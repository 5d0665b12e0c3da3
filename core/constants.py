"""core/constants.py — Shared constants used across the codebase.

Centralises magic numbers so there's exactly one place to change them.
Policy values that designers tweak (speeds, ranges, damage) live in
``data/tuning.toml``; the numbers below are the shipped defaults that
every ``tuning.get`` call falls back to.

Unit System
-----------
All gameplay distances are measured in **units** (1 unit = 1 metre).

    Distance / position     u       (units)
    Speed                   u/s
    Turn rate               rad/s
    Time                    s       (seconds, real)
    Health                  HP
    Angles                  rad

Reference speeds:
    Pursuer     3.0 u/s
    Agent walk  5.0 u/s
    Agent run  10.0 u/s     (speed modifier ×2)

Range Hierarchy (small → large):
     1.5 u   Contact threshold (pursuer strikes agent)
     2.0 u   Line-of-sight sampling step
    25   u   Minimum scenery separation
    30–80 u  Pursuer spawn annulus
   100   u   Pursuer activation range
   100–180 u Far scenery ring (building, glaciers)
   150–170 u Radar ring
"""

import math

TAU = 2.0 * math.pi

# ── Agent ───────────────────────────────────────────────────────────
AGENT_SPEED = 5.0                  # u/s
AGENT_SPRINT_MULT = 2.0
AGENT_TURN_RATE = 2.0              # rad/s
AGENT_START_Y = 0.5                # half a unit above the ground
AGENT_MAX_HEALTH = 100.0           # HP

# ── Pursuers ────────────────────────────────────────────────────────
PURSUER_SPEED = 3.0                # u/s
PURSUER_SCALE = 0.25
ACTIVATION_RANGE = 100.0           # u
LOS_SAMPLE_STEP = 2.0              # u between line-of-sight samples

# ── Contact / damage ────────────────────────────────────────────────
CONTACT_THRESHOLD = 1.5            # u
CONTACT_DAMAGE = 10.0              # HP per contact
SMOKE_RING_COUNT = 8
SMOKE_RING_RADIUS = 0.5            # u
SMOKE_LIFETIME = 2.0               # s
SMOKE_RISE_SPEED = 1.0             # u/s
SMOKE_DRIFT = 0.5                  # horizontal velocity per unit of ring offset

# ── Footsteps ───────────────────────────────────────────────────────
FOOTSTEP_INTERVAL = 0.3            # s between pairs
FOOTSTEP_LIFETIME = 3.0            # s
FOOTSTEP_BEHIND = 0.5              # u behind the agent
FOOTSTEP_SIDE = 0.3                # u to either side
FOOTSTEP_STRIDE = 0.2              # u gait offset along forward
FOOTSTEP_Y = 0.05                  # u

# ── Spawner ─────────────────────────────────────────────────────────
SPAWN_PERIOD = 10.0                # s
SPAWN_CAP = 10
SPAWN_RADIUS = (30.0, 80.0)        # u around the origin

# ── Placement ───────────────────────────────────────────────────────
PLACEMENT_MAX_ATTEMPTS = 50
SCENERY_MIN_SEPARATION = 25.0      # u

# ── Props ───────────────────────────────────────────────────────────
RADAR_SPIN_RATE = 0.2              # rad/s

# ── Camera ──────────────────────────────────────────────────────────
CAMERA_FOLLOW_DISTANCE = 16.0      # u
CAMERA_FOLLOW_HEIGHT = 10.0        # u
CAMERA_PITCH_RATE = 2.0            # rad/s
CAMERA_PITCH_LIMIT = 1.5           # rad
CAMERA_PITCH_LOOK = 5.0            # u of look-at lift per radian of pitch

# ── Render (host layer only) ────────────────────────────────────────
PIXELS_PER_UNIT = 6.0
GROUND_HALF_SIZE = 200.0           # u

COLORS = {
    "background": (3, 3, 3),
    "ground":     (40, 44, 52),
    "obstacle":   (90, 100, 115),
    "glacier":    (120, 160, 190),
    "radar":      (160, 160, 160),
    "building":   (130, 60, 50),
    "sphere":     (150, 90, 50),
    "agent":      (128, 128, 128),
    "agent_wire": (178, 0, 0),
    "pursuer":    (220, 200, 60),
    "footstep":   (10, 10, 10),
    "smoke":      (77, 77, 77),
    "los_clear":  (255, 0, 0),
    "los_blocked": (77, 77, 77),
}
