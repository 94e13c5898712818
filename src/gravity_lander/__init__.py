# MIT License (see LICENSE)
"""
gravity_lander - a 2D gravity landing game core.

A player ship navigates a simplified N-body solar system, using thrust and
rotation to touch down softly on a planet without crashing. This package is
the physics and session core; drawing, device input and HUD widgets are
collaborators plugged in through small interfaces.

Main entry points:
    - Session: builds the solar system and runs the landing state machine.
    - World: body container and physics step (pairwise gravity + integration).
    - Body: point mass with trail; ships and orbiting planets are kinds of Body.
    - Vec2: immutable 2D vector.

Submodules:
    - core: Forces, integrator, orbit constraint, ship control, invariants.
    - collision: Interpenetration queries.
    - renderer: Optional visualization adapters.

Example:
    from gravity_lander import Session, ScriptedInput, Control

    session = Session()
    session.start()
    controls = ScriptedInput(held=[Control.THRUST])
    session.tick(1 / 60, controls)
    print(session.hud())
"""
from .vector import Vec2
from .types import Body, BodyKind, OrbitParams, ShipParams, body_from_config
from .world import World
from .session import Session, Phase, Outcome, LandingReport, classify_landing
from .controls import Control, InputSource, ScriptedInput
from .camera import Camera
from .hud import HudSnapshot, format_hud
from .config import SessionCfg, ShipCfg, LandingCfg, CelestialCfg, DisplayCfg, SOLAR_SYSTEM

__all__ = [
    # Simulation
    "Session",
    "World",
    "Phase",
    "Outcome",
    "LandingReport",
    "classify_landing",
    # Bodies
    "Body",
    "BodyKind",
    "OrbitParams",
    "ShipParams",
    "body_from_config",
    "Vec2",
    # Collaborators
    "Control",
    "InputSource",
    "ScriptedInput",
    "Camera",
    "HudSnapshot",
    "format_hud",
    # Configuration
    "SessionCfg",
    "ShipCfg",
    "LandingCfg",
    "CelestialCfg",
    "DisplayCfg",
    "SOLAR_SYSTEM",
]
