# MIT License (see LICENSE)
"""
Game session: world setup, per-tick ordering and the landing state machine.

States:
    UNINITIALIZED -> RUNNING -> ENDED(SUCCESS | FAILURE)
    ENDED -> RUNNING only through restart(), which rebuilds the world.

Each RUNNING tick, in order:
    1. Input (rotation, thrust, time-scale cycling, reset, zoom).
    2. Orbit update of every orbiting body.
    3. Physics step (pairwise gravity, integration).
    4. Ship-vs-world collision via the partner lookup.

Once ENDED, ticks leave the world frozen for inspection until restart.

The session is an explicit context object owned by whatever drives ticks.
There is no process-wide state.
"""
from __future__ import annotations
import enum
import logging
import math
from dataclasses import dataclass

import numpy as np

from .camera import Camera
from .config import CelestialCfg, SessionCfg, SOLAR_SYSTEM
from .controls import Control, InputSource, NoInput
from .core.orbit import update_orbit
from .core.ship import apply_thrust, fuel_percent, make_ship, rotate
from .hud import HudSnapshot
from .types import Body, OrbitParams
from .vector import Vec2
from .world import World

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"
    ENDED = "ended"


class Outcome(enum.Enum):
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class LandingReport:
    """
    How a session ended.

    Attributes:
        outcome: SUCCESS for a soft landing, FAILURE for a crash.
        partner: The body the ship touched.
        speed: Ship speed at contact.
        altitude: Ship distance from the partner minus the partner's radius.
    """
    outcome: Outcome
    partner: Body
    speed: float
    altitude: float


def classify_landing(ship: Body, partner: Body, cfg: SessionCfg) -> LandingReport:
    """
    Soft landing iff speed < max_velocity and altitude < max_altitude.

    Approach angle is not considered.
    """
    speed = ship.speed()
    altitude = partner.altitude_of(ship.position)
    ok = speed < cfg.landing.max_velocity and altitude < cfg.landing.max_altitude
    return LandingReport(
        outcome=Outcome.SUCCESS if ok else Outcome.FAILURE,
        partner=partner,
        speed=speed,
        altitude=altitude,
    )


def _celestial_body(cfg: CelestialCfg, trail_length: int, *, fixed: bool = False,
                    angle: float = 0.0) -> Body:
    orbit = None
    if cfg.orbit_radius > 0:
        orbit = OrbitParams(
            radius=cfg.orbit_radius,
            angular_speed=cfg.orbit_speed,
            angle=angle,
            atmosphere_height=cfg.atmosphere_height,
        )
    return Body(
        name=cfg.name,
        mass=cfg.mass,
        radius=cfg.radius,
        color=cfg.color,
        glow_color=cfg.glow_color,
        fixed=fixed,
        max_trail_length=trail_length,
        orbit=orbit,
    )


class Session:
    """
    One playthrough: owns the world, the ship and the terminal state.

    Args:
        cfg: Bodies, ship and landing tuning.
        rng: Random generator for planet phases. Defaults to one seeded from
             cfg.seed.
        camera: Optional camera; zoom controls and follow are applied to it.

    Example:
        session = Session(cfg)
        session.start()
        while session.phase is Phase.RUNNING:
            session.tick(frame_dt, controls)
        print(session.report.outcome)
    """

    def __init__(
        self,
        cfg: SessionCfg = SOLAR_SYSTEM,
        *,
        rng: np.random.Generator | None = None,
        camera: Camera | None = None,
    ) -> None:
        self.cfg = cfg
        self.rng = rng if rng is not None else np.random.default_rng(cfg.seed)
        self.camera = camera
        self.world = World(g=cfg.gravitational_constant, min_distance=cfg.min_gravity_distance)
        self.phase = Phase.UNINITIALIZED
        self.report: LandingReport | None = None
        self.anchor: Body | None = None
        self.planets: list[Body] = []
        self.ship: Body | None = None
        self.time_scale_index = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def time_scale(self) -> int:
        return self.cfg.time_scales[self.time_scale_index]

    @property
    def outcome(self) -> Outcome | None:
        return None if self.report is None else self.report.outcome

    def setup(self) -> None:
        """
        Populate an empty world: anchor at the origin, planets at random
        phases, ship just above the reference planet moving with it.
        """
        cfg = self.cfg
        self.anchor = _celestial_body(cfg.anchor, cfg.trail_length, fixed=True)
        self.world.add_body(self.anchor)

        self.planets = []
        for pcfg in cfg.planets:
            phase = float(self.rng.uniform(0.0, 2.0 * math.pi))
            planet = _celestial_body(pcfg, cfg.trail_length, angle=phase)
            update_orbit(planet, cfg.initial_phase_dt, self.anchor)
            self.planets.append(planet)
            self.world.add_body(planet)

        reference = next((p for p in self.planets if p.name == cfg.reference_body), None)
        if reference is None:
            raise ValueError(f"Reference body {cfg.reference_body!r} is not among the planets")

        outward = (reference.position - self.anchor.position).normalized()
        if outward == Vec2.zero():
            outward = Vec2(1.0, 0.0)
        clearance = reference.radius + cfg.ship.radius + cfg.spawn_clearance
        self.ship = make_ship(
            position=reference.position + outward * clearance,
            velocity=reference.velocity,
            angle=0.0,
            cfg=cfg.ship,
            max_trail_length=cfg.trail_length,
        )
        self.world.add_body(self.ship)

        if self.camera is not None:
            self.camera.follow(self.ship)
            self.camera.set_zoom(cfg.display.initial_zoom)

        logger.info(
            "session set up: %d bodies, ship near %s", len(self.world.bodies), reference.name
        )

    def start(self) -> None:
        """UNINITIALIZED -> RUNNING. No effect in any other state."""
        if self.phase is not Phase.UNINITIALIZED:
            return
        self.setup()
        self.phase = Phase.RUNNING

    def restart(self) -> None:
        """Clear every body and run setup again; always ends in RUNNING."""
        self.world.clear()
        self.anchor = None
        self.planets = []
        self.ship = None
        self.report = None
        self.time_scale_index = 0
        self.setup()
        self.phase = Phase.RUNNING
        logger.info("session restarted")

    def _end(self, partner: Body) -> None:
        self.report = classify_landing(self.ship, partner, self.cfg)
        self.phase = Phase.ENDED
        logger.info(
            "session ended: %s on %s (speed=%.3f, altitude=%.3f)",
            self.report.outcome.value, partner.name, self.report.speed, self.report.altitude,
        )

    # ------------------------------------------------------------------
    # Per-tick
    # ------------------------------------------------------------------

    def cycle_time_scale(self) -> int:
        self.time_scale_index = (self.time_scale_index + 1) % len(self.cfg.time_scales)
        logger.debug("time scale -> %dx", self.time_scale)
        return self.time_scale

    def handle_input(self, controls: InputSource, dt: float) -> None:
        """
        Apply one tick of input.

        While ENDED only the reset control is honoured. Thrust that is not
        held clears the thrusting flag.
        """
        if controls.was_pressed(Control.RESET):
            self.restart()
            return
        if self.phase is not Phase.RUNNING:
            return

        if controls.is_held(Control.ROTATE_LEFT):
            rotate(self.ship, -1)
        if controls.is_held(Control.ROTATE_RIGHT):
            rotate(self.ship, 1)

        if controls.is_held(Control.THRUST):
            apply_thrust(self.ship, dt)
        else:
            self.ship.ship.thrusting = False

        if controls.was_pressed(Control.CYCLE_TIME_SCALE):
            self.cycle_time_scale()

        if self.camera is not None:
            if controls.is_held(Control.ZOOM_IN):
                self.camera.zoom_in()
            if controls.is_held(Control.ZOOM_OUT):
                self.camera.zoom_out()

    def update(self, dt: float) -> None:
        """Orbits, physics, then the ship collision check. Frozen unless RUNNING."""
        if self.phase is not Phase.RUNNING:
            return

        for planet in self.planets:
            update_orbit(planet, dt, self.anchor)

        self.world.step(dt)

        partner = self.world.find_collision_partner(self.ship)
        if partner is not None:
            self._end(partner)

        if self.camera is not None:
            self.camera.update()

    def tick(self, frame_dt: float, controls: InputSource | None = None) -> float:
        """
        One frame: scale the wall-clock delta, apply input, advance.

        Returns:
            The simulated step size used (frame_dt × time scale).
        """
        controls = controls or NoInput()
        dt = frame_dt * self.time_scale
        self.handle_input(controls, dt)
        self.update(dt)
        controls.end_frame()
        return dt

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def min_altitude(self) -> float:
        """Lowest altitude of the ship above any non-ship body."""
        if self.ship is None:
            return math.inf
        return min(
            (b.altitude_of(self.ship.position) for b in self.world.bodies if b is not self.ship),
            default=math.inf,
        )

    def hud(self) -> HudSnapshot:
        """Current HUD values. Before setup there is no ship: zero speed and fuel."""
        if self.ship is None:
            return HudSnapshot(speed=0.0, altitude=math.inf, fuel_percent=0.0,
                               time_scale=self.time_scale)
        return HudSnapshot(
            speed=self.ship.speed(),
            altitude=self.min_altitude(),
            fuel_percent=fuel_percent(self.ship),
            time_scale=self.time_scale,
        )

    def draw_order(self) -> list[Body]:
        """Bodies in the order renderers should draw them: anchor, planets, ship."""
        return [b for b in (self.anchor, *self.planets, self.ship) if b is not None]
