# MIT License (see LICENSE)
"""
Ship control: thrust, rotation, fuel and reset.

A ship is a Body whose `ship` field carries ShipParams. Mass tracks the fuel
load (dry mass + fuel) after every integration, so burning fuel changes the
gravitational pull on and from the ship.
"""
from __future__ import annotations
import math

from ..config import ShipCfg, SHIP_CFG
from ..constants import DEFAULT_TRAIL_LENGTH
from ..types import Body, ShipParams
from ..vector import Vec2
from .forces import thrust_vector


def make_ship(
    position: Vec2 = Vec2(),
    velocity: Vec2 = Vec2(),
    angle: float = 0.0,
    cfg: ShipCfg = SHIP_CFG,
    *,
    name: str = "Ship",
    fuel: float | None = None,
    max_trail_length: int = DEFAULT_TRAIL_LENGTH,
) -> Body:
    """Create a ship body from a ShipCfg, fuelled to capacity unless `fuel` is given."""
    params = ShipParams(
        dry_mass=cfg.dry_mass,
        fuel_capacity=cfg.fuel_capacity,
        max_thrust=cfg.max_thrust,
        fuel_consumption=cfg.fuel_consumption,
        fuel=fuel,
        angle=angle,
        rotation_step=cfg.rotation_step,
        thrust_color=cfg.thrust_color,
    )
    return Body(
        name=name,
        radius=cfg.radius,
        position=position,
        velocity=velocity,
        color=cfg.color,
        max_trail_length=max_trail_length,
        ship=params,
    )


def apply_thrust(body: Body, dt: float) -> bool:
    """
    Fire the engine for one step.

    With an empty tank the thrusting flag is cleared and no force is added.
    Otherwise a force of max_thrust along the orientation is accumulated and
    fuel drops by fuel_consumption·dt, floored at zero.

    Returns:
        True if thrust was applied.
    """
    ship = body.ship
    if ship.fuel <= 0:
        ship.thrusting = False
        return False

    body.apply_force(thrust_vector(ship.angle, ship.max_thrust))
    ship.fuel = max(0.0, ship.fuel - ship.fuel_consumption * dt)
    ship.thrusting = True
    return True


def rotate(body: Body, direction: float) -> None:
    """
    Turn by one fixed rotation step in the sign of `direction`.

    Only the sign matters (-1 left, +1 right); zero does nothing. The step is
    per call, not per unit time, so turning speed assumes a steady frame rate.
    """
    if direction == 0:
        return
    body.ship.angle += math.copysign(body.ship.rotation_step, direction)


def reset_ship(body: Body, position: Vec2, velocity: Vec2, angle: float) -> None:
    """Restore a clean flight state: full tank, empty trail, no accumulated force."""
    ship = body.ship
    body.position = Vec2.of(position)
    body.velocity = Vec2.of(velocity)
    ship.angle = angle
    ship.fuel = ship.fuel_capacity
    ship.thrusting = False
    body.mass = ship.effective_mass
    body.clear_forces()
    body.clear_trail()


def fuel_percent(body: Body) -> float:
    """Remaining fuel as a percentage of capacity."""
    return 100.0 * body.ship.fuel / body.ship.fuel_capacity
