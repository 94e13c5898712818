# MIT License (see LICENSE)
"""
The physics world: body ownership and the per-step update.

The World class acts as the body container and physics engine. It manages:
- The list of bodies (insertion order fixes the pair iteration order, so
  force summation is reproducible for identical dt sequences).
- Global parameters (game gravitational constant, minimum pair distance).
- The step, in order:
    1. Pairwise gravity accumulated into every body.
    2. Semi-implicit Euler integration of every free body.
- Collision queries (full pairwise scan, or the partner of one body).

Orbit-locked bodies take part in gravity (they pull and are pulled) but are
never integrated: their accumulator is drained and the orbit update alone
positions them.

Structure:
    - Caller creates a World.
    - Caller adds bodies via add_body().
    - Caller calls world.step(dt) once per tick.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field

from .constants import GAME_G, MIN_GRAVITY_DISTANCE
from .types import Body
from .profiler import Profiler
from .core.forces import apply_gravity_pairwise
from .core.integrators import integrate
from .collision import Collision, detect_collisions, find_collision_partner

logger = logging.getLogger(__name__)


@dataclass
class World:
    """
    Physics simulation world.

    Attributes:
        g: Game gravitational constant.
        min_distance: Pairs whose centers are closer than this exert no force.
        profiler: Optional Profiler receiving "gravity" and "integrate" timings.
        bodies: Owned bodies, in insertion order.
        time: Simulated time advanced so far.
    """
    g: float = GAME_G
    min_distance: float = MIN_GRAVITY_DISTANCE
    profiler: Profiler | None = None

    # Internal state
    bodies: list[Body] = field(default_factory=list)
    time: float = 0.0

    def __post_init__(self) -> None:
        self._next_id = 1

    def add_body(self, body: Body) -> int:
        """
        Add a body to the simulation and assign it a unique ID.

        Returns:
            The assigned body ID.
        """
        body.id = self._next_id
        self._next_id += 1
        self.bodies.append(body)
        logger.debug("added body %d (%s, %s)", body.id, body.name, body.kind.value)
        return body.id

    def remove_body(self, body: Body) -> bool:
        """
        Remove a body if present.

        Returns:
            True if the body was removed, False if it was not in the world.
        """
        if body not in self.bodies:
            return False
        self.bodies.remove(body)
        logger.debug("removed body %d (%s)", body.id, body.name)
        return True

    def clear(self) -> None:
        """Drop every body and rewind the clock."""
        logger.debug("clearing %d bodies", len(self.bodies))
        self.bodies.clear()
        self.time = 0.0

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def accumulate_forces(self) -> int:
        """
        Accumulate pairwise gravity into every body without integrating.

        Exposed separately so the accumulators can be inspected before
        step() drains them.

        Returns:
            Number of pairs that exchanged a force.
        """
        return apply_gravity_pairwise(self.bodies, self.g, self.min_distance)

    def integrate_all(self, dt: float) -> None:
        """Integrate free bodies; drain the accumulator of orbit-locked ones."""
        for b in self.bodies:
            if b.orbit_locked:
                b.clear_forces()
                continue
            integrate(b, dt)

    def step(self, dt: float) -> None:
        """
        Advance the simulation by dt.

        Every unordered pair is visited exactly once for gravity, then every
        body is integrated. Afterwards every accumulator is zero.
        """
        with self._section("gravity"):
            self.accumulate_forces()
        with self._section("integrate"):
            self.integrate_all(dt)
        self.time += dt

    def detect_collisions(self) -> list[Collision]:
        """All interpenetrating pairs, scanned fresh."""
        return detect_collisions(self.bodies)

    def find_collision_partner(self, body: Body) -> Body | None:
        """First other body currently interpenetrating `body`, or None."""
        return find_collision_partner(body, self.bodies)

    def find(self, name: str) -> Body | None:
        """First body with the given name."""
        for b in self.bodies:
            if b.name == name:
                return b
        return None
