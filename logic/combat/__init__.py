"""logic/combat — Contact combat subpackage.

Modules
-------
damage   — apply_contact_damage(), agent_health(), entity_display_name()
contact  — contact_system(): pursuer strikes, smoke, pursuer removal

Public symbols are re-exported here for ``from logic.combat import X``.
"""

# ── damage ───────────────────────────────────────────────────────────
from logic.combat.damage import (                    # noqa: F401
    apply_contact_damage,
    agent_health,
    entity_display_name,
)

# ── contact ──────────────────────────────────────────────────────────
from logic.combat.contact import contact_system     # noqa: F401
