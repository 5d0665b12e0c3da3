"""logic — Simulation systems package.

Subpackages
-----------
combat/     — contact resolution and damage application

Top-level modules
-----------------
tick            — per-frame system orchestrator
placement       — rejection-sampled annulus scattering
visibility      — sampled line of sight against obstacle boxes
pursuit         — straight-line chase steering
effects         — footprint / smoke emission and lifecycle
spawner         — periodic pursuer spawning
movement        — agent control, spinning props
camera          — chase-camera rig
input_manager   — raw input → intent mapping
"""
