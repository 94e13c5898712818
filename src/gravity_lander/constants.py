# MIT License (see LICENSE)
"""
Tuning constants used throughout the simulation.

These are game units, not SI. The gravitational constant in particular is an
arbitrarily tuned scalar chosen for the feel of the game.
"""
from __future__ import annotations
import math

# Gravitational constant used by the pairwise force loop (game units).
GAME_G: float = 100.0

# Pairs closer than this are skipped entirely rather than clamped.
MIN_GRAVITY_DISTANCE: float = 1.0

# Discrete fast-forward multipliers applied to the wall-clock frame delta.
TIME_SCALES: tuple[int, ...] = (1, 10, 100, 1000, 10000)

# Body defaults substituted for missing optional configuration.
DEFAULT_NAME: str = "Unknown"
DEFAULT_MASS: float = 1.0
DEFAULT_RADIUS: float = 10.0
DEFAULT_COLOR: str = "#FFFFFF"
DEFAULT_TRAIL_LENGTH: int = 100

# Ship turning: fixed increment per rotate() call, assumes a steady frame cadence.
SHIP_ROTATION_STEP: float = 0.05

# Landing classification.
LANDING_MAX_VELOCITY: float = 5.0
LANDING_MAX_ALTITUDE: float = 10.0
LANDING_MAX_ANGLE: float = math.pi / 6  # defined, not consulted by the classifier
