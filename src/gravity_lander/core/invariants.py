# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants and conserved quantities.

Used to verify the force loop and debug stability. Pairwise gravity between
free bodies obeys Newton's third law, so the net accumulated force over a
system without fixed bodies is zero before integration drains it.
"""
from __future__ import annotations
import numpy as np

from ..types import Body


def net_force(bodies: list[Body]) -> np.ndarray:
    """
    Sum of mass · accumulated acceleration over all bodies.

    Call between force accumulation and integration.
    """
    f = np.zeros(2, dtype=np.float64)
    for b in bodies:
        f += b.mass * b.acceleration.as_array()
    return f


def linear_momentum(bodies: list[Body]) -> np.ndarray:
    """Total linear momentum P = Σ m·v of non-fixed bodies."""
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        if b.fixed:
            continue
        p += b.mass * b.velocity.as_array()
    return p


def kinetic_energy(bodies: list[Body]) -> float:
    """Total kinetic energy T = Σ ½·m·v² of non-fixed bodies."""
    ke = 0.0
    for b in bodies:
        if b.fixed:
            continue
        ke += 0.5 * b.mass * b.velocity.length_sq()
    return ke
