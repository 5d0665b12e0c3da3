"""components.rpg — Health."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Health:
    """Hit points, clamped to ``[0, maximum]``.

    ``maximum`` is fixed at creation.  Only the contact resolver writes
    ``current`` during a frame; ``heal`` is there for regeneration
    effects and is not used by the core loop.
    """
    current: float = 100.0     # HP
    maximum: float = 100.0     # HP

    def __post_init__(self):
        if self.maximum <= 0:
            raise ValueError(f"Health maximum must be > 0, got {self.maximum}")
        self.current = min(self.maximum, max(0.0, float(self.current)))

    def damage(self, amount: float) -> float:
        """Subtract *amount* (clamped at 0).  Returns HP actually lost."""
        before = self.current
        self.current = max(0.0, self.current - amount)
        return before - self.current

    def heal(self, amount: float) -> float:
        """Add *amount* (clamped at maximum).  Returns HP actually gained."""
        before = self.current
        self.current = min(self.maximum, self.current + amount)
        return self.current - before

    @property
    def depleted(self) -> bool:
        return self.current <= 0.0

    @property
    def ratio(self) -> float:
        return self.current / self.maximum
