# MIT License (see LICENSE)
"""
Force generators for the gravity simulation.

All functions accumulate into Body.acceleration via Body.apply_force and are
meant to be called during the force phase of a step, before integration.

Key concepts:
- Gravity is direct pairwise summation, O(N²). Body counts are small
  (single digits to low tens), so no tree or cell structure is used.
- Pairs closer than a minimum distance are skipped entirely instead of
  softened or clamped. Very close bodies simply stop attracting each other.
- Newton's third law: each unordered pair is visited once and receives an
  equal and opposite force.
"""
from __future__ import annotations
import math

from ..constants import GAME_G, MIN_GRAVITY_DISTANCE
from ..types import Body
from ..vector import Vec2


def gravity_between(
    a: Body,
    b: Body,
    g: float = GAME_G,
    min_distance: float = MIN_GRAVITY_DISTANCE,
) -> Vec2 | None:
    """
    Gravitational force exerted on `a` by `b`.

    Implements F = G · m_a · m_b / r², directed from a towards b.

    Returns:
        The force on `a` (the force on `b` is its negation), or None when
        the centers are closer than `min_distance` or coincide.
    """
    direction = b.position - a.position
    dist_sq = direction.length_sq()
    if dist_sq == 0.0 or math.sqrt(dist_sq) < min_distance:
        return None
    magnitude = g * a.mass * b.mass / dist_sq
    return direction.normalized() * magnitude


def apply_gravity_pairwise(
    bodies: list[Body],
    g: float = GAME_G,
    min_distance: float = MIN_GRAVITY_DISTANCE,
) -> int:
    """
    Apply mutual gravity between every unordered pair of distinct bodies.

    Pairs are visited in list order (i < j), so repeated calls on the same
    state produce bit-identical accumulators.

    Args:
        bodies: Bodies to interact. Fixed bodies exert force but ignore it.
        g: Game gravitational constant.
        min_distance: Pairs closer than this are skipped.

    Returns:
        Number of pairs that exchanged a force.
    """
    applied = 0
    n = len(bodies)
    for i in range(n):
        bi = bodies[i]
        for j in range(i + 1, n):
            bj = bodies[j]
            f = gravity_between(bi, bj, g, min_distance)
            if f is None:
                continue

            # Newton's third law
            bi.apply_force(f)
            bj.apply_force(-f)
            applied += 1
    return applied


def thrust_vector(angle: float, max_thrust: float) -> Vec2:
    """Thrust force of magnitude `max_thrust` along orientation `angle`."""
    return Vec2.from_angle(angle, max_thrust)
