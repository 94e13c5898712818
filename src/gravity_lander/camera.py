# MIT License (see LICENSE)
"""
Camera collaborator: world-to-screen mapping for renderers.

Independent of physics. It may follow a body with exponential smoothing and
clamps its zoom to the configured range. Screen space has its origin at the
top-left of the viewport; the camera position maps to the viewport center.
"""
from __future__ import annotations
from typing import Sequence

from .config import DisplayCfg
from .types import Body
from .vector import Vec2


class Camera:
    """
    2D camera with zoom and optional follow target.

    Attributes:
        position: World point at the viewport center.
        zoom: Screen units per world unit.
        target: Body followed by update(), or None.
    """

    def __init__(self, cfg: DisplayCfg | None = None) -> None:
        self.cfg = cfg or DisplayCfg()
        self.viewport = self.cfg.viewport
        self.position = Vec2.zero()
        self.zoom = 1.0
        self.target: Body | None = None
        self.set_zoom(self.cfg.initial_zoom)

    def follow(self, target: Body | None) -> None:
        self.target = target

    def update(self) -> None:
        """Move a fraction (smoothing) of the way toward the target."""
        if self.target is None:
            return
        offset = self.target.position - self.position
        self.position = self.position + offset * self.cfg.smoothing

    def set_zoom(self, zoom: float) -> None:
        self.zoom = max(self.cfg.min_zoom, min(self.cfg.max_zoom, zoom))

    def zoom_in(self, amount: float | None = None) -> None:
        self.set_zoom(self.zoom + (self.cfg.zoom_step if amount is None else amount))

    def zoom_out(self, amount: float | None = None) -> None:
        self.set_zoom(self.zoom - (self.cfg.zoom_step if amount is None else amount))

    def world_to_screen(self, point: Vec2) -> Vec2:
        w, h = self.viewport
        rel = point - self.position
        return Vec2(w / 2 + rel.x * self.zoom, h / 2 + rel.y * self.zoom)

    def screen_to_world(self, point: Vec2) -> Vec2:
        w, h = self.viewport
        rel = Vec2((point.x - w / 2) / self.zoom, (point.y - h / 2) / self.zoom)
        return self.position + rel

    def auto_zoom(self, bodies: Sequence[Body], margin: float = 0.8) -> None:
        """Zoom so the bounding box of `bodies` fits the viewport with a margin."""
        if not bodies:
            return
        min_x = min(b.position.x - b.radius for b in bodies)
        max_x = max(b.position.x + b.radius for b in bodies)
        min_y = min(b.position.y - b.radius for b in bodies)
        max_y = max(b.position.y + b.radius for b in bodies)
        span_x, span_y = max_x - min_x, max_y - min_y
        if span_x <= 0 or span_y <= 0:
            return
        w, h = self.viewport
        self.set_zoom(min(w / span_x, h / span_y) * margin)
