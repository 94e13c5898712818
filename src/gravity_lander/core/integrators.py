# MIT License (see LICENSE)
"""
Numerical integration for point-mass bodies.

The shared update is semi-implicit (symplectic) Euler:
    v(t+dt) = v(t) + a(t)·dt
    x(t+dt) = x(t) + v(t+dt)·dt

Velocity is updated from the current acceleration before it moves the
position. Unlike explicit Euler this keeps gravity orbits bounded instead of
spiralling outward over many steps.

Kind-specific behaviour is layered on by composition in integrate(): the
shared step runs first, then a post-step adjustment chosen by BodyKind.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations

from ..types import Body, BodyKind


def semi_implicit_euler_step(body: Body, dt: float) -> None:
    """
    Advance one body by dt and drain its accumulator.

    Order: velocity from acceleration, record the pre-move position in the
    trail, move, then zero the accumulator. Fixed bodies are untouched,
    trail included.
    """
    if body.fixed:
        return

    body.velocity = body.velocity + body.acceleration * dt
    body.record_trail()
    body.position = body.position + body.velocity * dt
    body.clear_forces()


def _ship_post_step(body: Body) -> None:
    """Mass follows the fuel load: dry mass plus remaining fuel."""
    body.mass = body.ship.effective_mass


def integrate(body: Body, dt: float) -> None:
    """
    Shared integration followed by the post-step for the body's kind.

    Plain and orbiting bodies need no extra work; ships recompute their mass.
    """
    semi_implicit_euler_step(body, dt)
    if body.kind is BodyKind.SHIP:
        _ship_post_step(body)
