# MIT License (see LICENSE)
"""
Discrete collision queries between bodies.

Collision is plain interpenetration: center distance strictly less than the
sum of radii (Body.is_colliding). Every call re-scans from scratch; there is
no broadphase, because worlds hold single digits to low tens of bodies.

Limitation: there is no swept (continuous) test, so a body moving further
than its target's diameter in one step can tunnel through it.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from ..types import Body


@dataclass(frozen=True)
class Collision:
    """
    An interpenetrating pair.

    Attributes:
        a: Earlier body in iteration order.
        b: Later body in iteration order.
        depth: Overlap, radius sum minus center distance (> 0).
    """
    a: Body
    b: Body
    depth: float


def detect_collisions(bodies: list[Body]) -> list[Collision]:
    """
    Every unordered pair of distinct bodies currently interpenetrating.

    O(N²). Pairs are reported in list order (i < j), each once.
    """
    out = []
    n = len(bodies)
    for i in range(n):
        bi = bodies[i]
        for j in range(i + 1, n):
            bj = bodies[j]
            if bi.is_colliding(bj):
                depth = (bi.radius + bj.radius) - bi.distance_to(bj)
                out.append(Collision(a=bi, b=bj, depth=depth))
    return out


def find_collision_partner(body: Body, bodies: Iterable[Body]) -> Body | None:
    """
    First other body, in iteration order, interpenetrating with `body`.

    Returns:
        The partner, or None when `body` touches nothing.
    """
    for other in bodies:
        if other is body:
            continue
        if body.is_colliding(other):
            return other
    return None
