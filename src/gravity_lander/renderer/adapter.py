# MIT License (see LICENSE)
"""
Renderer adapters for simulation visualization.

This module provides an abstract base class for rendering and concrete
debug implementations. The physics core never draws; a renderer reads the
per-body state it needs (position, radius, color, trail, and for ships the
orientation and thrusting flag) and maps it through a Camera.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence, TextIO
import sys

from ..types import Body, BodyKind
from ..vector import stack

if TYPE_CHECKING:
    from ..camera import Camera
    from ..session import Session


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses integrate with a graphics backend (pygame, matplotlib, a web
    frontend, ...).

    Usage:
        renderer.begin_frame(time)
        for body in bodies:
            renderer.draw_body(body, camera)
        renderer.end_frame()

    Or use the convenience methods render_bodies() / render_session().
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulated time.
        """
        ...

    @abstractmethod
    def draw_body(self, body: Body, camera: "Camera | None" = None) -> None:
        """
        Draw a single body.

        Args:
            body: The body to draw.
            camera: Mapping to screen space, or None for world coordinates.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_bodies(self, bodies: Sequence[Body], time: float,
                      camera: "Camera | None" = None) -> None:
        self.begin_frame(time)
        for body in bodies:
            self.draw_body(body, camera)
        self.end_frame()

    def render_session(self, session: "Session") -> None:
        """Draw anchor, planets and ship in order, through the session camera."""
        self.render_bodies(session.draw_order(), session.world.time, session.camera)


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development without graphics dependencies.

    Output:
        === Frame t=12.5000 ===
        [1] Sun plain r=30.00 @ (0.00, 0.00)
        [6] Ship ship r=5.00 @ (412.10, 33.02) v=(0.10, 0.02) θ=0.05 thrust fuel=99%
    """

    def __init__(self, output: TextIO | None = None, verbose: bool = True):
        """
        Args:
            output: Output stream (defaults to sys.stdout).
            verbose: If True, include velocity and ship attitude.
        """
        self.output = output or sys.stdout
        self.verbose = verbose

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_body(self, body: Body, camera: "Camera | None" = None) -> None:
        pos = body.position if camera is None else camera.world_to_screen(body.position)
        line = f"[{body.id}] {body.name} {body.kind.value} r={body.radius:.2f} @ ({pos.x:.2f}, {pos.y:.2f})"

        if self.verbose:
            vel = body.velocity
            line += f" v=({vel.x:.2f}, {vel.y:.2f})"
            if body.kind is BodyKind.SHIP:
                ship = body.ship
                line += f" θ={ship.angle:.2f}"
                if ship.thrusting:
                    line += " thrust"
                line += f" fuel={100.0 * ship.fuel / ship.fuel_capacity:.0f}%"

        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for timing runs without drawing overhead."""

    def begin_frame(self, time: float) -> None:
        pass

    def draw_body(self, body: Body, camera: "Camera | None" = None) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records the drawable state of every body for each frame.

    Useful for replays, exporting to another frontend, and tests.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            session.tick(1 / 60)
            renderer.render_session(session)
        last = renderer.frames[-1]
        print(last["time"], [b["name"] for b in last["bodies"]])
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {"time": time, "bodies": []}

    def draw_body(self, body: Body, camera: "Camera | None" = None) -> None:
        if self._current_frame is None:
            return

        pos = body.position if camera is None else camera.world_to_screen(body.position)
        trail = stack(body.trail)
        if camera is not None:
            trail = stack([camera.world_to_screen(p) for p in body.trail])

        entry = {
            "id": body.id,
            "name": body.name,
            "kind": body.kind.value,
            "position": pos.as_array().tolist(),
            "radius": body.radius if camera is None else body.radius * camera.zoom,
            "color": body.color,
            "glow_color": body.glow_color,
            "trail": trail.tolist(),
        }
        if body.kind is BodyKind.SHIP:
            entry["angle"] = body.ship.angle
            entry["thrusting"] = body.ship.thrusting
        self._current_frame["bodies"].append(entry)

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
