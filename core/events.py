"""core/events.py — Frame event queue.

Systems that *signal* (spawner, contact resolver) are decoupled from
the host code that *reacts* (HUD, logs).  The bus is an ECS resource::

    bus = world.res(EventBus)
    bus.emit(ContactHit(agent_eid=1, pursuer_eid=7, damage=10.0))

Listeners register per event class (or its name)::

    bus.subscribe(HealthChanged, hud.on_health)
    bus.subscribe("AgentDown", hud.on_down)

``tick_systems`` drains once per frame after every system ran.
Events queued by a handler are delivered in the same drain.  Handlers
feed displays and logs; they never write simulation state.
"""

from __future__ import annotations
import traceback
from collections import Counter, defaultdict, deque
from dataclasses import dataclass
from typing import Any, Callable

# Upper bound on handler-triggered re-queues within one drain
MAX_DRAIN_ROUNDS = 1000


# ═══════════════════════════════════════════════════════════════════
#  Event definitions
# ═══════════════════════════════════════════════════════════════════

@dataclass
class PursuerSpawned:
    """The spawner created a new pursuer."""
    eid: int
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class ContactHit:
    """A pursuer reached the agent and was destroyed."""
    agent_eid: int = 0
    pursuer_eid: int = 0
    x: float = 0.0          # pursuer position at impact
    y: float = 0.0
    z: float = 0.0
    damage: float = 0.0
    health_after: float = 0.0


@dataclass
class HealthChanged:
    eid: int
    current: float
    maximum: float


@dataclass
class AgentDown:
    """The agent's health reached zero (sent once)."""
    eid: int


# ═══════════════════════════════════════════════════════════════════
#  Event Bus
# ═══════════════════════════════════════════════════════════════════

def _key(event_type: type | str) -> str:
    return event_type if isinstance(event_type, str) else event_type.__name__


class EventBus:
    """FIFO queue of plain event objects, dispatched by class name."""

    def __init__(self):
        self._queue: deque[Any] = deque()
        self._handlers: dict[str, list[Callable]] = defaultdict(list)
        self._delivered: Counter[str] = Counter()

    def emit(self, event) -> None:
        self._queue.append(event)

    def subscribe(self, event_type: type | str, handler: Callable) -> None:
        self._handlers[_key(event_type)].append(handler)

    def unsubscribe(self, event_type: type | str, handler: Callable) -> bool:
        """Remove *handler*; returns False if it was not registered."""
        handlers = self._handlers.get(_key(event_type), [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def drain(self) -> int:
        """Deliver everything queued.  Returns the number of events.

        A handler that raises is reported with ``[EVENT]`` and skipped;
        the remaining handlers and events still run.
        """
        processed = 0
        rounds = 0
        while self._queue and rounds < MAX_DRAIN_ROUNDS:
            batch = list(self._queue)
            self._queue.clear()
            for event in batch:
                name = type(event).__name__
                self._delivered[name] += 1
                for handler in list(self._handlers.get(name, ())):
                    try:
                        handler(event)
                    except Exception as exc:
                        print(f"[EVENT] handler error for {name}: {exc}")
                        traceback.print_exc()
            processed += len(batch)
            rounds += 1
        return processed

    def pending(self, event_type: type | str | None = None) -> list[Any]:
        """Queued events, optionally only those of *event_type*."""
        if event_type is None:
            return list(self._queue)
        name = _key(event_type)
        return [e for e in self._queue if type(e).__name__ == name]

    def pending_count(self) -> int:
        return len(self._queue)

    def clear(self) -> None:
        """Drop queued events without delivering them."""
        self._queue.clear()

    def stats(self) -> dict[str, int]:
        """Delivered-event totals by class name."""
        return dict(self._delivered)

    def __repr__(self) -> str:
        return (f"EventBus(pending={len(self._queue)}, "
                f"types={sum(1 for h in self._handlers.values() if h)})")
