# MIT License (see LICENSE)
"""
Core type definitions for the gravity simulation.

Defines the fundamental data structures:
- BodyKind: tag selecting the kind-specific update applied after the shared
  integration (plain, orbiting, ship).
- OrbitParams / ShipParams: the data each specialised kind carries.
- Body: the single simulation entity with mass, radius, kinematic state,
  force accumulator and a bounded motion trail.

The equations of motion are plain Newtonian point-mass dynamics:
  a = F/m   (accumulated per step)
  v += a·dt, x += v·dt   (semi-implicit Euler, see core/integrators.py)
"""
from __future__ import annotations
import enum
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Mapping

from .constants import (
    DEFAULT_COLOR,
    DEFAULT_MASS,
    DEFAULT_NAME,
    DEFAULT_RADIUS,
    DEFAULT_TRAIL_LENGTH,
    SHIP_ROTATION_STEP,
)
from .vector import Vec2


class BodyKind(enum.Enum):
    """Kind tag. Selects the post-integration adjustment for a body."""
    PLAIN = "plain"
    ORBITING = "orbiting"
    SHIP = "ship"


@dataclass
class OrbitParams:
    """
    Circular-orbit constraint around a parent body.

    Attributes:
        radius: Orbit radius. 0 means the body is free and governed by gravity.
        angular_speed: Radians per unit of simulated time.
        angle: Current orbit angle in radians. Never normalised; the
               trigonometric functions wrap it implicitly.
        atmosphere_height: Cosmetic only.
    """
    radius: float = 0.0
    angular_speed: float = 0.0
    angle: float = 0.0
    atmosphere_height: float = 0.0

    @property
    def locked(self) -> bool:
        """True when position and velocity are driven by the orbit formula."""
        return self.radius > 0.0


@dataclass
class ShipParams:
    """
    Flight state of a player ship.

    Attributes:
        dry_mass: Mass without fuel.
        fuel_capacity: Fuel mass when full.
        fuel: Remaining fuel, kept in [0, fuel_capacity].
        max_thrust: Thrust force magnitude while firing.
        fuel_consumption: Fuel burned per unit of simulated time while firing.
        angle: Orientation in radians. Accumulates without wraparound.
        rotation_step: Angle added per rotate() call.
        thrusting: Derived each frame from input; not persisted across resets.
        thrust_color: Cosmetic only.
    """
    dry_mass: float
    fuel_capacity: float
    max_thrust: float
    fuel_consumption: float
    fuel: float | None = None
    angle: float = 0.0
    rotation_step: float = SHIP_ROTATION_STEP
    thrusting: bool = False
    thrust_color: str = "#FF4500"

    def __post_init__(self) -> None:
        if self.dry_mass <= 0:
            raise ValueError(f"Ship dry mass must be positive, got {self.dry_mass}")
        if self.fuel_capacity <= 0:
            raise ValueError(f"Ship fuel capacity must be positive, got {self.fuel_capacity}")
        if self.fuel is None:
            self.fuel = self.fuel_capacity
        self.fuel = max(0.0, min(self.fuel_capacity, float(self.fuel)))

    @property
    def effective_mass(self) -> float:
        return self.dry_mass + self.fuel


@dataclass(eq=False)
class Body:
    """
    A point-mass body with kinematic state, force accumulator and trail.

    Attributes:
        name: Display identifier.
        mass: Strictly positive mass. Ships keep this equal to dry + fuel mass.
        radius: Collision radius (also the display radius). Non-negative.
        position: Current position.
        velocity: Current velocity.
        color: Display color.
        glow_color: Cosmetic halo color, or None. Does not affect the kind.
        fixed: Fixed bodies never move and ignore applied forces (the anchor).
        max_trail_length: Capacity of the trail; oldest points are evicted first.
        orbit: Orbit constraint data for orbiting bodies.
        ship: Flight data for ships.
        acceleration: Force accumulator divided by mass. Zero at the start and
                      end of every integration step.
        id: Unique identifier assigned by World.add_body().

    Bodies compare by identity, so removing one from a world never removes a
    different body that happens to be in the same state.
    """
    name: str = DEFAULT_NAME
    mass: float = DEFAULT_MASS
    radius: float = DEFAULT_RADIUS
    position: Vec2 = field(default_factory=Vec2.zero)
    velocity: Vec2 = field(default_factory=Vec2.zero)
    color: str = DEFAULT_COLOR
    glow_color: str | None = None
    fixed: bool = False
    max_trail_length: int = DEFAULT_TRAIL_LENGTH
    orbit: OrbitParams | None = None
    ship: ShipParams | None = None

    # Runtime state (not user-specified)
    acceleration: Vec2 = field(default_factory=Vec2.zero)
    id: int = -1
    _trail: deque = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate physical invariants and allocate the trail buffer."""
        self.position = Vec2.of(self.position)
        self.velocity = Vec2.of(self.velocity)
        if self.ship is not None and self.orbit is not None:
            raise ValueError("A body cannot be both a ship and an orbiting body")
        if self.ship is not None:
            self.mass = self.ship.effective_mass
        if self.mass <= 0:
            raise ValueError(f"Body mass must be positive, got {self.mass}")
        if self.radius < 0:
            raise ValueError(f"Body radius must be non-negative, got {self.radius}")
        if self.max_trail_length < 1:
            raise ValueError(f"Trail length must be at least 1, got {self.max_trail_length}")
        self._trail = deque(maxlen=self.max_trail_length)

    @property
    def kind(self) -> BodyKind:
        if self.ship is not None:
            return BodyKind.SHIP
        if self.orbit is not None:
            return BodyKind.ORBITING
        return BodyKind.PLAIN

    @property
    def orbit_locked(self) -> bool:
        """True when the orbit constraint, not gravity, moves this body."""
        return self.orbit is not None and self.orbit.locked

    @property
    def trail(self) -> tuple[Vec2, ...]:
        """Snapshot of past positions, oldest first. Never the live buffer."""
        return tuple(self._trail)

    def record_trail(self) -> None:
        """Append the current position; the deque evicts the oldest when full."""
        self._trail.append(self.position)

    def clear_trail(self) -> None:
        self._trail.clear()

    def speed(self) -> float:
        return self.velocity.length()

    def apply_force(self, force: Vec2) -> None:
        """
        Accumulate `force / mass` into the acceleration accumulator.

        No-op for fixed bodies. Velocity and position are untouched until
        integration.
        """
        if self.fixed:
            return
        self.acceleration = self.acceleration + force / self.mass

    def clear_forces(self) -> None:
        """Reset the accumulator for the next step."""
        self.acceleration = Vec2.zero()

    def distance_to(self, other: Body) -> float:
        return self.position.distance_to(other.position)

    def is_colliding(self, other: Body) -> bool:
        """
        Interpenetration test: center distance strictly less than the radius sum.

        Discrete only. A fast body can pass through a thin target within one
        step without ever overlapping it.
        """
        return self.distance_to(other) < (self.radius + other.radius)

    def altitude_of(self, point: Vec2) -> float:
        """Height of `point` above this body's surface (distance minus radius)."""
        return self.position.distance_to(point) - self.radius


def _opt(cfg: Mapping[str, Any], key: str, default: Any) -> Any:
    """cfg[key], treating a missing key and an explicit None alike."""
    value = cfg.get(key)
    return default if value is None else value


def body_from_config(cfg: Mapping[str, Any]) -> Body:
    """
    Build a Body from a loose mapping, substituting defaults for missing fields.

    Optional tuning fields fall back to name "Unknown", mass 1, radius 10,
    zero position/velocity and a trail of 100 points. A key set to None counts
    as missing. A mass that is present but non-positive, or a negative radius,
    is rejected with ValueError.

    Recognised keys: name, mass, radius, position, velocity, color, glow_color,
    fixed, max_trail_length, orbit_radius, orbit_speed, orbit_angle,
    atmosphere_height. Any non-None orbit_* key makes the body an orbiting
    body.
    """
    orbit = None
    if any(cfg.get(k) is not None for k in ("orbit_radius", "orbit_speed", "orbit_angle")):
        orbit = OrbitParams(
            radius=float(_opt(cfg, "orbit_radius", 0.0)),
            angular_speed=float(_opt(cfg, "orbit_speed", 0.0)),
            angle=float(_opt(cfg, "orbit_angle", 0.0)),
            atmosphere_height=float(_opt(cfg, "atmosphere_height", 0.0)),
        )

    return Body(
        name=str(_opt(cfg, "name", DEFAULT_NAME)),
        mass=float(_opt(cfg, "mass", DEFAULT_MASS)),
        radius=float(_opt(cfg, "radius", DEFAULT_RADIUS)),
        position=Vec2.of(_opt(cfg, "position", (0.0, 0.0))),
        velocity=Vec2.of(_opt(cfg, "velocity", (0.0, 0.0))),
        color=str(_opt(cfg, "color", DEFAULT_COLOR)),
        glow_color=cfg.get("glow_color"),
        fixed=bool(_opt(cfg, "fixed", False)),
        max_trail_length=int(_opt(cfg, "max_trail_length", DEFAULT_TRAIL_LENGTH)),
        orbit=orbit,
    )
