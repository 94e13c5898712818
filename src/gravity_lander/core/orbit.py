# MIT License (see LICENSE)
"""
Circular-orbit constraint for bodies locked to a parent.

An orbit-locked body (OrbitParams.radius > 0) is positioned exclusively by
the orbit formula each step; free-body integration never moves it:

    θ      += ω·dt
    x       = parent + R·(cos θ, sin θ)
    v       = (−sin θ, cos θ) · ω·R / dt

The reported velocity divides by dt, so it scales inversely with the step
size. It only feeds the speed other code reads from the body, not its path.
With dt == 0 the angle does not move and the previous velocity is kept.
"""
from __future__ import annotations
import math

from ..types import Body
from ..vector import Vec2


def orbit_position(parent: Body, radius: float, angle: float) -> Vec2:
    """Point on the circle of `radius` around `parent` at `angle`."""
    return parent.position + Vec2(math.cos(angle), math.sin(angle)) * radius


def update_orbit(body: Body, dt: float, parent: Body) -> None:
    """
    Advance the orbit angle and override position and velocity.

    No-op for bodies without an orbit or with orbit radius 0 (free bodies).
    The new position is appended to the trail, since integration never
    moves a locked body.

    Args:
        body: Orbiting body (modified in-place).
        dt: Simulated time step.
        parent: Body at the orbit center, normally the anchor.
    """
    orbit = body.orbit
    if orbit is None or not orbit.locked:
        return

    orbit.angle += orbit.angular_speed * dt
    body.position = orbit_position(parent, orbit.radius, orbit.angle)
    body.record_trail()

    if dt == 0:
        return
    tangent = Vec2(-math.sin(orbit.angle), math.cos(orbit.angle))
    body.velocity = tangent * (orbit.angular_speed * orbit.radius / dt)
