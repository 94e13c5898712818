# MIT License (see LICENSE)
"""
Collision detection subsystem.

This subpackage provides:
    - Collision: an interpenetrating pair with its overlap depth.
    - detect_collisions: full pairwise scan.
    - find_collision_partner: first body touching a given body.

Typical usage:
    from gravity_lander.collision import find_collision_partner

    partner = find_collision_partner(ship, world.bodies)
    if partner is not None:
        # classify touchdown
"""
from .pairs import Collision, detect_collisions, find_collision_partner

__all__ = [
    "Collision",
    "detect_collisions",
    "find_collision_partner",
]
