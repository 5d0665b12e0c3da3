"""logic/input_manager.py — Keys to intents.

The scene feeds raw pygame events in; systems only ever see intent
names, and the simulation only sees the ``ControlState`` snapshot
built from held intents.

    self.input = InputManager()
    # each frame:
    self.input.begin_frame()
    for event in events:
        self.input.feed(event)
    self.input.end_frame()

    if self.input.just("reload_tuning"):     # rising edge
        ...
    controls = self.input.control_state()  # held keys
"""

from __future__ import annotations
import pygame

from components import ControlState


# Intent → keys.  Held intents drive the agent and camera; the rest
# are one-shot toggles.
ARENA_BINDS: dict[str, tuple[int, ...]] = {
    "forward":       (pygame.K_w,),
    "back":          (pygame.K_s,),
    "turn_left":     (pygame.K_a, pygame.K_q),
    "turn_right":    (pygame.K_d, pygame.K_e),
    "speed_mod":     (pygame.K_LSHIFT, pygame.K_RSHIFT),
    "pitch_up":      (pygame.K_UP,),
    "pitch_down":    (pygame.K_DOWN,),
    "toggle_debug":  (pygame.K_TAB,),
    "reload_tuning": (pygame.K_F5,),
    "quit":          (pygame.K_ESCAPE,),
}


class InputManager:
    """Tracks which intents fired this frame and which are held."""

    def __init__(self, binds: dict[str, tuple[int, ...]] | None = None):
        self.binds = dict(ARENA_BINDS if binds is None else binds)
        self._by_key: dict[int, list[str]] = {}
        for intent, keys in self.binds.items():
            for key in keys:
                self._by_key.setdefault(key, []).append(intent)
        self._pressed: set[str] = set()
        self._held: set[str] = set()

    def begin_frame(self):
        self._pressed.clear()

    def feed(self, event: pygame.event.Event):
        if event.type == pygame.KEYDOWN:
            self._pressed.update(self._by_key.get(event.key, ()))

    def end_frame(self):
        """Snapshot the keyboard for held intents."""
        keys = pygame.key.get_pressed()
        self._held = {intent for intent, bound in self.binds.items()
                      if any(keys[k] for k in bound)}

    def just(self, intent: str) -> bool:
        return intent in self._pressed

    def held(self, intent: str) -> bool:
        return intent in self._held

    def control_state(self) -> ControlState:
        """This frame's key snapshot for ``tick_systems``."""
        return ControlState(
            forward=self.held("forward"),
            back=self.held("back"),
            turn_left=self.held("turn_left"),
            turn_right=self.held("turn_right"),
            speed_mod=self.held("speed_mod"),
            pitch_up=self.held("pitch_up"),
            pitch_down=self.held("pitch_down"),
        )
