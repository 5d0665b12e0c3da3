"""
core/scene.py — Base class for anything the App can run.

``App`` keeps scenes on a stack and drives only the top one, in this
order every frame: ``handle_events`` → ``update`` → ``draw``.
Pushing a scene calls ``on_exit`` on the one it covers; popping calls
``on_enter`` on the one it reveals.

    class PauseScene(Scene):
        def handle_events(self, events, app):
            if any(e.type == pygame.KEYDOWN for e in events):
                app.pop_scene()

        def draw(self, surface, app):
            app.draw_text(surface, "paused", 20, 20)

Every hook defaults to doing nothing, so a scene overrides only what
it needs.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Now on top of the stack."""

    def on_exit(self, app: App):
        """Covered by another scene or popped."""

    def handle_events(self, events: list[pygame.event.Event], app: App):
        """Every event the App did not consume itself this frame."""

    def update(self, dt: float, app: App):
        """Step by *dt* seconds (already clamped by the App)."""

    def draw(self, surface: pygame.Surface, app: App):
        pass
