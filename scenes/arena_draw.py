"""scenes/arena_draw.py — Rendering helpers for the arena scene.

Top-down orthographic view: world X runs right, world Z runs down the
screen, and the view is centred on the agent.  Everything is drawn
from the ECS each frame; nothing here mutates the world.
"""

from __future__ import annotations
import math
import pygame
from core.app import App
from core.ecs import World
from core.vec3 import Vec3
from core.tuning import get as _tun
from core.constants import COLORS, PIXELS_PER_UNIT, ACTIVATION_RANGE
from components import (
    Transform, ObstacleBlocker, Scenery, Ground, ControlledAgent, Pursuer,
    Footstep, SmokeParticle, Health, GameClock, CameraRig, DevLog,
)


class View:
    """World → screen mapping for one frame."""

    def __init__(self, surface: pygame.Surface, focus: Vec3,
                 ppu: float = PIXELS_PER_UNIT):
        self.cx = surface.get_width() // 2
        self.cy = surface.get_height() // 2
        self.focus = focus
        self.ppu = ppu

    def to_screen(self, p: Vec3) -> tuple[int, int]:
        return (int(self.cx + (p.x - self.focus.x) * self.ppu),
                int(self.cy + (p.z - self.focus.z) * self.ppu))

    def length(self, u: float) -> int:
        return max(1, int(u * self.ppu))


# ── Ground + obstacles ─────────────────────────────────────────────

def draw_ground(surface: pygame.Surface, world: World, view: View):
    surface.fill(COLORS["background"])
    for _eid, tf, ground in world.query(Transform, Ground):
        x0, y0 = view.to_screen(tf.position - Vec3(ground.half_size, 0.0, ground.half_size))
        size = view.length(ground.half_size * 2)
        pygame.draw.rect(surface, COLORS["ground"], pygame.Rect(x0, y0, size, size))


def draw_obstacles(surface: pygame.Surface, world: World, view: View):
    for _eid, tf, blk, scenery in world.query(Transform, ObstacleBlocker, Scenery):
        half = blk.half_size.mul(tf.scale.abs())
        x0, y0 = view.to_screen(tf.position - half)
        rect = pygame.Rect(x0, y0, view.length(half.x * 2), view.length(half.z * 2))
        color = COLORS.get(scenery.kind, COLORS["obstacle"])
        pygame.draw.rect(surface, color, rect)
        pygame.draw.rect(surface, COLORS["obstacle"], rect, 1)


# ── Effects ─────────────────────────────────────────────────────────

def draw_effects(surface: pygame.Surface, world: World, view: View):
    for _eid, tf, _fp in world.query(Transform, Footstep):
        sx, sy = view.to_screen(tf.position)
        r = max(1, int(view.ppu * 0.3 * tf.scale.x))
        pygame.draw.circle(surface, COLORS["footstep"], (sx, sy), r)

    for _eid, tf, smoke in world.query(Transform, SmokeParticle):
        sx, sy = view.to_screen(tf.position)
        r = max(2, int(view.ppu * tf.scale.x))
        fade = smoke.lifetime / smoke.max_lifetime if smoke.max_lifetime else 0.0
        _draw_circle_alpha(surface, (*COLORS["smoke"], int(200 * fade)), sx, sy, r)


# ── Actors ──────────────────────────────────────────────────────────

def draw_sight_lines(surface: pygame.Surface, world: World, view: View,
                     agent_tf: Transform):
    """Pursuer → agent line while pursuing: red if clear, grey if blocked."""
    activation = _tun("pursuit", "activation_range", ACTIVATION_RANGE)
    end = view.to_screen(agent_tf.position)
    for _eid, tf, pursuer in world.query(Transform, Pursuer):
        if tf.position.distance(agent_tf.position) >= activation:
            continue
        start = view.to_screen(tf.position)
        if pursuer.last_line_of_sight:
            pygame.draw.line(surface, COLORS["los_clear"], start, end, 1)
        else:
            _draw_dashed_line(surface, COLORS["los_blocked"], *start, *end)


def draw_pursuers(surface: pygame.Surface, world: World, view: View):
    for _eid, tf, pursuer in world.query(Transform, Pursuer):
        sx, sy = view.to_screen(tf.position)
        r = max(3, int(view.ppu * 0.6))
        pygame.draw.circle(surface, COLORS["pursuer"], (sx, sy), r)
        # Heading tick along local +Z
        hx = sx + int(math.sin(tf.yaw) * r * 1.8)
        hy = sy + int(math.cos(tf.yaw) * r * 1.8)
        pygame.draw.line(surface, COLORS["pursuer"], (sx, sy), (hx, hy), 2)
        if not pursuer.active:
            pygame.draw.circle(surface, COLORS["obstacle"], (sx, sy), r, 1)


def draw_agent(surface: pygame.Surface, view: View, agent_tf: Transform):
    sx, sy = view.to_screen(agent_tf.position)
    half = view.length(0.5)
    rect = pygame.Rect(sx - half, sy - half, half * 2, half * 2)
    pygame.draw.rect(surface, COLORS["agent"], rect)
    pygame.draw.rect(surface, COLORS["agent_wire"], rect, 1)
    fwd = agent_tf.forward()
    tip = view.to_screen(agent_tf.position + fwd * 2.0)
    pygame.draw.line(surface, COLORS["agent_wire"], (sx, sy), tip, 2)


def draw_world(surface: pygame.Surface, world: World, ppu: float = PIXELS_PER_UNIT):
    """Draw one full frame of the arena."""
    res = world.query_one(ControlledAgent, Transform)
    focus = res[2].position if res else Vec3()
    view = View(surface, focus, ppu)

    draw_ground(surface, world, view)
    draw_obstacles(surface, world, view)
    draw_effects(surface, world, view)
    if res:
        draw_sight_lines(surface, world, view, res[2])
    draw_pursuers(surface, world, view)
    if res:
        draw_agent(surface, view, res[2])


# ── HUD ─────────────────────────────────────────────────────────────

def draw_hud(surface: pygame.Surface, app: App, world: World, banner: str = ""):
    hud_y = 8
    res = world.query_one(ControlledAgent, Health)
    if res:
        _, _, health = res
        app.draw_text_bg(surface, f"Health: {health.current:.0f}/{health.maximum:.0f}",
                         8, hud_y, (255, 100, 100))
        hud_y += 18
        bar = pygame.Rect(8, hud_y, 160, 6)
        pygame.draw.rect(surface, (60, 20, 20), bar)
        pygame.draw.rect(surface, (220, 60, 60),
                         pygame.Rect(8, hud_y, int(160 * health.ratio), 6))
        hud_y += 12

    pursuing = sum(1 for _, p in world.all_of(Pursuer) if p.active)
    app.draw_text_bg(surface, f"UGVs: {world.count(Pursuer)} ({pursuing} pursuing)",
                     8, hud_y, (220, 200, 60))

    sw = surface.get_width()
    clock = world.res(GameClock)
    if clock:
        app.draw_text(surface, f"t = {clock.time:6.1f}s", sw - 120, 8, (200, 200, 255))

    if banner:
        img = app.font_lg.render(banner, True, (255, 80, 80))
        surface.blit(img, ((sw - img.get_width()) // 2, 40))


def draw_debug_overlay(surface: pygame.Surface, app: App, world: World):
    """Tab overlay: frame stats, camera rig and the DevLog tail."""
    sw, sh = surface.get_size()
    panel = pygame.Surface((sw // 2, sh - 80), pygame.SRCALPHA)
    panel.fill((0, 0, 0, 150))
    surface.blit(panel, (sw // 2 - 4, 60))

    x = sw // 2
    y = 66
    app.draw_text(surface, f"FPS: {int(app.clock.get_fps())}", x, y, (0, 255, 0), app.font_sm)
    y += 14
    app.draw_text(surface, f"Entities: {len(world.debug_dump())}", x, y, (0, 255, 0), app.font_sm)
    y += 14
    rig = world.res(CameraRig)
    if rig:
        app.draw_text(surface, f"Camera pitch: {rig.pitch:+.2f} rad", x, y,
                      (0, 255, 0), app.font_sm)
        y += 14
    y += 4

    log = world.res(DevLog)
    if not log:
        return
    summary = "  ".join(f"{cat}:{n}" for cat, n in sorted(log.counts().items()))
    app.draw_text(surface, summary or "(log empty)", x, y, (200, 200, 100), app.font_sm)
    y += 16
    rows = max(0, (sh - 80 - (y - 60)) // 13)
    for entry in log.recent(rows):
        line = f"{entry['t']:6.1f} #{entry['eid']:<4} [{entry['cat']}] {entry['msg']}"
        app.draw_text(surface, line, x, y, (200, 200, 200), app.font_sm)
        y += 13


# ── Primitives ──────────────────────────────────────────────────────

def _draw_circle_alpha(surface: pygame.Surface, color: tuple, cx: int, cy: int, radius: int):
    """Draw a filled circle with alpha transparency."""
    if radius < 2:
        return
    d = radius * 2 + 2
    circle_surf = pygame.Surface((d, d), pygame.SRCALPHA)
    pygame.draw.circle(circle_surf, color, (d // 2, d // 2), radius)
    surface.blit(circle_surf, (cx - d // 2, cy - d // 2))


def _draw_dashed_line(surface: pygame.Surface, color: tuple,
                      x1: int, y1: int, x2: int, y2: int,
                      dash_len: int = 6, gap_len: int = 4):
    dx = x2 - x1
    dy = y2 - y1
    dist = math.hypot(dx, dy)
    if dist < 1:
        return
    nx, ny = dx / dist, dy / dist
    drawn = 0.0
    while drawn < dist:
        seg_end = min(drawn + dash_len, dist)
        pygame.draw.line(surface, color,
                         (int(x1 + nx * drawn), int(y1 + ny * drawn)),
                         (int(x1 + nx * seg_end), int(y1 + ny * seg_end)), 1)
        drawn = seg_end + gap_len
