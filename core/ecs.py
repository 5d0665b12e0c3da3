"""
core/ecs.py — Entity-Component-System

Entities are ints.  Components are dataclasses stored per type;
resources are per-type singletons kept beside them.  Role markers
(``ControlledAgent``, ``Pursuer``, ...) are ordinary components, so
"every X that is not a Y" is a query with ``exclude``.

    w = World()
    e = w.spawn(Transform(position=Vec3(5.0, 0.0, 3.0)), Health())

    for eid, tf, hp in w.query(Transform, Health):
        tf.position.x += 1
        hp.damage(5)

    for eid, tf, blk in w.query(Transform, ObstacleBlocker,
                                exclude=(ControlledAgent, Pursuer)):
        ...

``kill`` hides an entity from every lookup at once; ``purge`` drops
its components at the end of the frame.  Ids are never reused.
"""

from __future__ import annotations
from typing import Any, Iterable, Iterator


class World:
    def __init__(self):
        self._last_id = 0
        self._stores: dict[type, dict[int, Any]] = {}
        self._resources: dict[type, Any] = {}
        self._dead: set[int] = set()

    # -- Entities --

    def spawn(self, *components: Any) -> int:
        """New entity id, with *components* attached."""
        self._last_id += 1
        for comp in components:
            self.add(self._last_id, comp)
        return self._last_id

    def kill(self, eid: int):
        self._dead.add(eid)

    def alive(self, eid: int) -> bool:
        """True while *eid* is not killed and still owns a component."""
        return eid not in self._dead and any(
            eid in store for store in self._stores.values())

    def purge(self):
        """Remove dead entities from all stores. Call once per frame."""
        if not self._dead:
            return
        for store in self._stores.values():
            for eid in self._dead:
                store.pop(eid, None)
        self._dead.clear()

    # -- Components --

    def add(self, eid: int, comp: Any):
        self._stores.setdefault(type(comp), {})[eid] = comp

    def get(self, eid: int, comp_type: type) -> Any | None:
        if eid in self._dead:
            return None
        return self._stores.get(comp_type, {}).get(eid)

    def has(self, eid: int, comp_type: type) -> bool:
        return self.get(eid, comp_type) is not None

    def remove(self, eid: int, comp_type: type):
        self._stores.get(comp_type, {}).pop(eid, None)

    # -- Queries --

    def query(self, *types: type,
              exclude: Iterable[type] = ()) -> Iterator[tuple]:
        """Yield ``(eid, comp1, comp2, ...)`` for living entities that
        carry every one of *types* and none of *exclude*.

        Keys are snapshotted first, so systems may spawn or kill while
        iterating.  Entities killed mid-iteration are skipped.
        """
        if not types:
            return
        stores = [self._stores.get(t, {}) for t in types]
        banned = [self._stores.get(t, {}) for t in exclude]
        driver = min(stores, key=len)
        for eid in list(driver):
            if eid in self._dead:
                continue
            if any(eid not in s for s in stores):
                continue
            if any(eid in b for b in banned):
                continue
            yield (eid, *(s[eid] for s in stores))

    def query_one(self, *types: type,
                  exclude: Iterable[type] = ()) -> tuple | None:
        """First match or None."""
        return next(self.query(*types, exclude=exclude), None)

    def all_of(self, comp_type: type) -> Iterator[tuple[int, Any]]:
        """Yield (eid, component) for every entity with this type."""
        for eid, comp in list(self._stores.get(comp_type, {}).items()):
            if eid not in self._dead:
                yield eid, comp

    def count(self, comp_type: type) -> int:
        return sum(1 for _ in self.all_of(comp_type))

    # -- Resources (singletons, not tied to entities) --

    def set_res(self, resource: Any):
        self._resources[type(resource)] = resource

    def res(self, res_type: type) -> Any | None:
        return self._resources.get(res_type)

    # -- Debug --

    def debug_dump(self) -> dict[int, list[Any]]:
        """Return {eid: [components...]} for every living entity."""
        entities: dict[int, list[Any]] = {}
        for store in self._stores.values():
            for eid, comp in store.items():
                if eid not in self._dead:
                    entities.setdefault(eid, []).append(comp)
        return entities
