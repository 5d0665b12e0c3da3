"""
core/app.py — Pygame application shell

Owns the window, the frame clock and a stack of scenes.  Scenes own
their worlds; the shell never touches simulation state.

    app = App(title="Snowfield Pursuit")
    app.push_scene(ArenaScene(seed=7))
    app.run()

Rendering always targets a fixed virtual surface which is scaled to
the window, so drawing code can assume ``app.size`` pixels.
"""

from __future__ import annotations
import pygame
from core.scene import Scene

# Longest frame the simulation is allowed to see (window drags, stalls)
MAX_FRAME_DT = 0.1


class App:
    def __init__(self, title: str = "Snowfield Pursuit",
                 size: tuple[int, int] = (960, 640), fps: int = 60):
        pygame.init()
        pygame.display.set_caption(title)
        self.size = size
        self.canvas = pygame.Surface(size)
        self.window_size = size
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        self.fullscreen = False

        self.clock = pygame.time.Clock()
        self.fps = fps
        self.dt = 0.0
        self.frames = 0
        self.running = True

        self._stack: list[Scene] = []

        self.font = pygame.font.SysFont("monospace", 14)
        self.font_sm = pygame.font.SysFont("monospace", 11)
        self.font_lg = pygame.font.SysFont("monospace", 18)

    # -- Scene stack --

    @property
    def scene(self) -> Scene | None:
        return self._stack[-1] if self._stack else None

    def push_scene(self, scene: Scene):
        if self.scene:
            self.scene.on_exit(self)
        self._stack.append(scene)
        scene.on_enter(self)

    def pop_scene(self):
        """Drop the top scene; quitting when the stack empties."""
        if not self._stack:
            return
        self._stack.pop().on_exit(self)
        if self.scene:
            self.scene.on_enter(self)
        else:
            self.running = False

    # -- Frame --

    def _pump_events(self) -> list[pygame.event.Event]:
        """Handle window-level events; return the rest for the scene."""
        passed: list[pygame.event.Event] = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_F11:
                self.toggle_fullscreen()
            elif event.type == pygame.VIDEORESIZE and not self.fullscreen:
                self.window_size = (event.w, event.h)
                self.screen = pygame.display.set_mode(self.window_size,
                                                      pygame.RESIZABLE)
            else:
                passed.append(event)
        return passed

    def _present(self):
        pygame.transform.scale(self.canvas, self.screen.get_size(), self.screen)
        pygame.display.flip()

    def run(self, max_frames: int | None = None):
        """Main loop.  *max_frames* stops early (smoke runs, recordings)."""
        while self.running:
            self.dt = min(self.clock.tick(self.fps) / 1000.0, MAX_FRAME_DT)
            events = self._pump_events()

            scene = self.scene
            if scene is not None:
                scene.handle_events(events, self)
            # handle_events may have popped the scene
            scene = self.scene
            if scene is not None:
                scene.update(self.dt, self)
                scene.draw(self.canvas, self)
            self._present()

            self.frames += 1
            if max_frames is not None and self.frames >= max_frames:
                self.running = False

        pygame.quit()

    def toggle_fullscreen(self):
        """F11: flip between the resizable window and fullscreen."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            self.screen = pygame.display.set_mode(self.window_size,
                                                  pygame.RESIZABLE)

    # -- Text helpers --

    def draw_text(self, surface: pygame.Surface, text: str, x: int, y: int,
                  color=(255, 255, 255), font=None) -> pygame.Rect:
        img = (font or self.font).render(text, True, color)
        return surface.blit(img, (x, y))

    def draw_text_bg(self, surface: pygame.Surface, text: str, x: int, y: int,
                     color=(255, 255, 255), bg=(0, 0, 0, 160), font=None,
                     pad: int = 2) -> pygame.Rect:
        """Text over a translucent box, for HUD lines on busy ground."""
        img = (font or self.font).render(text, True, color)
        box = pygame.Surface((img.get_width() + pad * 2,
                              img.get_height() + pad * 2), pygame.SRCALPHA)
        box.fill(bg)
        surface.blit(box, (x - pad, y - pad))
        return surface.blit(img, (x, y))
