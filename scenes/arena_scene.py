"""
scenes/arena_scene.py — The snowfield

Builds a seeded world, feeds held keys to the simulation every frame
and draws the top-down view.

    W / S        drive forward / back      Shift   double speed
    A,Q / D,E    turn left / right         ↑ / ↓   camera pitch
    Tab          dev-log overlay           F5      reload tuning
    Esc          quit
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core.bootstrap import build_world
from core.events import EventBus
from core import tuning as tuning_mod
from logic.input_manager import InputManager
from logic.tick import tick_systems
from scenes.arena_draw import draw_world, draw_hud, draw_debug_overlay


class ArenaScene(Scene):
    def __init__(self, seed: int | None = None):
        self.seed = seed
        self.world = build_world(seed)
        self.input = InputManager()
        self.show_debug = False
        self.banner = ""

    # -- Bus handlers (display only) --

    def _on_health(self, event):
        if event.current < event.maximum * 0.25 and not self.banner:
            self.banner = "Hull critical"

    def _on_agent_down(self, event):
        self.banner = "Destroyed"

    # -- Scene interface --

    def on_enter(self, app: App):
        bus = self.world.res(EventBus)
        bus.subscribe("HealthChanged", self._on_health)
        bus.subscribe("AgentDown", self._on_agent_down)

    def on_exit(self, app: App):
        # Covered or popped: stop reacting to this world's events
        bus = self.world.res(EventBus)
        bus.unsubscribe("HealthChanged", self._on_health)
        bus.unsubscribe("AgentDown", self._on_agent_down)

    def handle_events(self, events: list[pygame.event.Event], app: App):
        self.input.begin_frame()
        for event in events:
            self.input.feed(event)
        self.input.end_frame()

        if self.input.just("quit"):
            app.pop_scene()
        if self.input.just("toggle_debug"):
            self.show_debug = not self.show_debug
        if self.input.just("reload_tuning"):
            tuning_mod.reload()

    def update(self, dt: float, app: App):
        tick_systems(self.world, dt, self.input.control_state())

    def draw(self, surface: pygame.Surface, app: App):
        draw_world(surface, self.world)
        draw_hud(surface, app, self.world, self.banner)
        if self.show_debug:
            draw_debug_overlay(surface, app, self.world)
