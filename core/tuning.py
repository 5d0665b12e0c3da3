"""core/tuning.py — Data-driven tuning constants.

All policy numbers live in ``data/tuning.toml`` and are loaded once
at startup.  Any system can read a value with::

    from core.tuning import get
    rng = get("pursuit", "activation_range", 100.0)

Every call site passes the shipped value as its default, so a missing
file (or a missing key) leaves the simulation on stock behaviour.

Hot-reload: ``reload()`` re-reads the file and prints which keys
changed.  In-game, press F5.
"""

from __future__ import annotations
from pathlib import Path

try:
    import tomllib                         # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib                # pip install tomli


DEFAULT_PATH = Path(__file__).resolve().parent.parent / "data" / "tuning.toml"

_data: dict = {}
_path: Path = DEFAULT_PATH


def load(path: str | Path | None = None) -> None:
    """Read tuning values from *path* (default ``data/tuning.toml``).

    A missing file is not an error: every lookup falls back to its
    call-site default.
    """
    global _data, _path
    _path = DEFAULT_PATH if path is None else Path(path)

    if not _path.exists():
        print(f"[TUNING] {_path} not found, using defaults")
        _data = {}
        return

    with open(_path, "rb") as f:
        _data = tomllib.load(f)
    print(f"[TUNING] Loaded {len(_flatten(_data))} values from {_path}")


def reload() -> list[str]:
    """Re-read the current file.  Returns the dotted keys whose value changed."""
    before = _flatten(_data)
    load(_path)
    after = _flatten(_data)
    changed = sorted(k for k in before.keys() | after.keys()
                     if before.get(k) != after.get(k))
    for key in changed:
        print(f"[TUNING] {key}: {before.get(key)!r} -> {after.get(key)!r}")
    return changed


def override(section_path: str, key: str, value) -> None:
    """Set a single value in memory (tests and debug toggles)."""
    node = _data
    for part in section_path.split("."):
        node = node.setdefault(part, {})
    node[key] = value


def reset() -> None:
    """Forget every loaded value; all lookups fall back to defaults."""
    global _data
    _data = {}


def _table(section_path: str) -> dict | None:
    """Walk ``"world.glaciers"`` down to its table, or None."""
    node = _data
    for part in section_path.split("."):
        if not isinstance(node, dict):
            return None
        node = node.get(part)
    return node if isinstance(node, dict) else None


def get(section: str, key: str, default=None):
    """Read one value; *section* is dotted for nested tables.

    >>> get("combat", "contact_damage", 10.0)
    10.0
    """
    table = _table(section)
    if table is None:
        return default
    return table.get(key, default)


def section(section_path: str) -> dict:
    """Shallow copy of a whole table (empty if absent)."""
    table = _table(section_path)
    return dict(table) if table else {}


def _flatten(d: dict, prefix: str = "") -> dict[str, object]:
    out: dict[str, object] = {}
    for k, v in d.items():
        name = f"{prefix}{k}"
        if isinstance(v, dict):
            out.update(_flatten(v, name + "."))
        else:
            out[name] = v
    return out
