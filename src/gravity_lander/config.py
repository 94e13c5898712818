# MIT License (see LICENSE)
"""
Configuration dataclasses and presets for the simulation.

Configs are frozen; derive variants with dataclasses.replace(). The
SOLAR_SYSTEM preset is a sun anchor with four orbiting planets in game
units (radii and orbit radii are display units, orbit speeds rad per unit
of simulated time).
"""
from __future__ import annotations
from dataclasses import dataclass, field

from .constants import (
    GAME_G,
    LANDING_MAX_ALTITUDE,
    LANDING_MAX_ANGLE,
    LANDING_MAX_VELOCITY,
    MIN_GRAVITY_DISTANCE,
    SHIP_ROTATION_STEP,
    TIME_SCALES,
    DEFAULT_TRAIL_LENGTH,
)


@dataclass(frozen=True)
class CelestialCfg:
    """A sun or planet. orbit_radius == 0 means not orbiting."""
    name: str
    mass: float
    radius: float
    color: str = "#FFFFFF"
    orbit_radius: float = 0.0
    orbit_speed: float = 0.0
    atmosphere_height: float = 0.0
    glow_color: str | None = None


@dataclass(frozen=True)
class ShipCfg:
    dry_mass: float = 1000.0
    fuel_capacity: float = 1000.0
    max_thrust: float = 50000.0
    fuel_consumption: float = 0.5
    radius: float = 5.0
    color: str = "#FFFFFF"
    thrust_color: str = "#FF4500"
    rotation_step: float = SHIP_ROTATION_STEP


@dataclass(frozen=True)
class LandingCfg:
    """
    Touchdown thresholds.

    max_angle is carried for completeness; the classifier only looks at
    speed and altitude.
    """
    max_velocity: float = LANDING_MAX_VELOCITY
    max_altitude: float = LANDING_MAX_ALTITUDE
    max_angle: float = LANDING_MAX_ANGLE


@dataclass(frozen=True)
class DisplayCfg:
    min_zoom: float = 0.05
    max_zoom: float = 5.0
    zoom_step: float = 0.01
    initial_zoom: float = 0.5
    smoothing: float = 0.1
    viewport: tuple[int, int] = (1280, 720)


SUN = CelestialCfg(
    name="Sun", mass=1.989e30, radius=30, color="#FDB813", glow_color="#FF6B00",
)

PLANETS: tuple[CelestialCfg, ...] = (
    CelestialCfg(
        name="Mercury", mass=3.285e23, radius=8, color="#8C7853",
        orbit_radius=200, orbit_speed=0.0002, atmosphere_height=0,
    ),
    CelestialCfg(
        name="Venus", mass=4.867e24, radius=12, color="#FFC649",
        orbit_radius=300, orbit_speed=0.00015, atmosphere_height=250,
    ),
    CelestialCfg(
        name="Earth", mass=5.972e24, radius=13, color="#4A90E2",
        orbit_radius=400, orbit_speed=0.0001, atmosphere_height=100,
    ),
    CelestialCfg(
        name="Mars", mass=6.39e23, radius=10, color="#E27B58",
        orbit_radius=500, orbit_speed=0.00008, atmosphere_height=50,
    ),
)


@dataclass(frozen=True)
class SessionCfg:
    """
    Everything a session needs to build and run a world.

    Attributes:
        gravitational_constant: Game G fed to the pairwise force loop.
        min_gravity_distance: Pairs closer than this exert no force.
        time_scales: Fast-forward multipliers cycled by the time-scale control.
        anchor: The fixed gravity source at the origin.
        planets: Orbiting bodies, placed at random initial phases.
        reference_body: Name of the planet the ship spawns next to.
        spawn_clearance: Gap between the reference surface and the ship hull.
        initial_phase_dt: Step used to place planets before the first tick.
        trail_length: Trail capacity for every body.
        seed: Seed for planet phases; None draws fresh entropy.
    """
    gravitational_constant: float = GAME_G
    min_gravity_distance: float = MIN_GRAVITY_DISTANCE
    time_scales: tuple[int, ...] = TIME_SCALES
    anchor: CelestialCfg = SUN
    planets: tuple[CelestialCfg, ...] = PLANETS
    reference_body: str = "Earth"
    spawn_clearance: float = 20.0
    initial_phase_dt: float = 1.0
    trail_length: int = DEFAULT_TRAIL_LENGTH
    ship: ShipCfg = field(default_factory=ShipCfg)
    landing: LandingCfg = field(default_factory=LandingCfg)
    display: DisplayCfg = field(default_factory=DisplayCfg)
    seed: int | None = None

    def __post_init__(self) -> None:
        if not self.time_scales:
            raise ValueError("At least one time scale is required")
        if any(s <= 0 for s in self.time_scales):
            raise ValueError(f"Time scales must be positive, got {self.time_scales}")


SHIP_CFG = ShipCfg()
SOLAR_SYSTEM = SessionCfg()


__all__ = [
    "CelestialCfg",
    "DisplayCfg",
    "LandingCfg",
    "PLANETS",
    "SHIP_CFG",
    "SOLAR_SYSTEM",
    "SUN",
    "SessionCfg",
    "ShipCfg",
]
