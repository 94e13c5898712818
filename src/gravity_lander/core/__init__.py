# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Force generators: pairwise gravity and ship thrust.
    - Integrators: semi-implicit Euler with per-kind post-steps.
    - Orbit constraint: circular orbits locked to a parent body.
    - Ship control: thrust, rotation, fuel and reset.
    - Invariants: net force, momentum and kinetic energy.

Typical usage:
    from gravity_lander.core import apply_gravity_pairwise, integrate

    apply_gravity_pairwise(bodies, g=100.0)
    for b in bodies:
        integrate(b, dt=1/60)
"""
from .forces import apply_gravity_pairwise, gravity_between, thrust_vector
from .integrators import integrate, semi_implicit_euler_step
from .orbit import orbit_position, update_orbit
from .ship import apply_thrust, fuel_percent, make_ship, reset_ship, rotate
from .invariants import kinetic_energy, linear_momentum, net_force

__all__ = [
    # Forces
    "apply_gravity_pairwise",
    "gravity_between",
    "thrust_vector",
    # Integrators
    "integrate",
    "semi_implicit_euler_step",
    # Orbits
    "orbit_position",
    "update_orbit",
    # Ship
    "apply_thrust",
    "fuel_percent",
    "make_ship",
    "reset_ship",
    "rotate",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "net_force",
]
