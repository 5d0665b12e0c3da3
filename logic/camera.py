"""logic/camera.py — Chase-camera rig.

Sits behind and above the agent along its back vector; the pitch keys
raise or lower the look-at point.  Renderers read ``CameraRig``; the
simulation never does.
"""

from __future__ import annotations

from core.ecs import World
from core.vec3 import Vec3
from core.tuning import get as _tun
from core import constants as C
from components import Transform, ControlledAgent, CameraRig, ControlState


def camera_follow_system(world: World, dt: float,
                         controls: ControlState | None) -> None:
    rig = world.res(CameraRig)
    res = world.query_one(ControlledAgent, Transform)
    if rig is None or res is None:
        return
    _, _, tf = res

    rate = _tun("camera", "pitch_rate", C.CAMERA_PITCH_RATE)
    limit = _tun("camera", "pitch_limit", C.CAMERA_PITCH_LIMIT)
    if controls is not None:
        if controls.pitch_up:
            rig.pitch += rate * dt
        if controls.pitch_down:
            rig.pitch -= rate * dt
    rig.pitch = max(-limit, min(limit, rig.pitch))

    dist = _tun("camera", "follow_distance", C.CAMERA_FOLLOW_DISTANCE)
    height = _tun("camera", "follow_height", C.CAMERA_FOLLOW_HEIGHT)
    rig.position = tf.position + tf.back() * dist + Vec3(0.0, height, 0.0)
    rig.look_at = tf.position + Vec3(0.0, rig.pitch * C.CAMERA_PITCH_LOOK, 0.0)
