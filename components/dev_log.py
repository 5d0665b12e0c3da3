"""components.dev_log — Per-frame telemetry ring buffer.

Things too chatty for the console (visibility flips, dormant/pursuing
transitions, spawn decisions, contacts) are recorded here and shown
by the Tab overlay.  Tests read it to assert on behaviour over time.

    log = world.res(DevLog)
    log.record(eid, "pursuit", "dormant → pursuing", t=clock.time,
               details={"dist": 97.4})

Each entry is a dict ``{"t", "eid", "cat", "msg", "details"}``.
"""

from __future__ import annotations
from collections import Counter, deque
from dataclasses import dataclass, field


@dataclass
class DevLog:
    max_entries: int = 500
    # If non-empty, only these categories are kept
    cat_filter: set[str] = field(default_factory=set)
    paused: bool = False
    entries: deque = field(init=False, repr=False)

    def __post_init__(self):
        self.entries = deque(maxlen=self.max_entries)

    def record(self, eid: int, cat: str, msg: str, *,
               t: float = 0.0, details: dict | None = None) -> None:
        if self.paused or (self.cat_filter and cat not in self.cat_filter):
            return
        self.entries.append({"t": t, "eid": eid, "cat": cat,
                             "msg": msg, "details": details})

    def clear(self):
        self.entries.clear()

    def pause(self):
        self.paused = True

    def resume(self):
        self.paused = False

    def recent(self, n: int = 50) -> list[dict]:
        """The *n* newest entries, oldest first."""
        if n <= 0:
            return []
        return list(self.entries)[-n:]

    def for_eid(self, eid: int, n: int = 30) -> list[dict]:
        return [e for e in self.entries if e["eid"] == eid][-n:]

    def for_cat(self, cat: str, n: int = 50) -> list[dict]:
        return [e for e in self.entries if e["cat"] == cat][-n:]

    def counts(self) -> dict[str, int]:
        """Entries currently held, by category."""
        return dict(Counter(e["cat"] for e in self.entries))
