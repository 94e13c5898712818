# MIT License (see LICENSE)
"""
HUD collaborator: read-only display values derived from a session.

Altitudes are shown divided by 10 and labelled km, matching the game's
display scale.
"""
from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class HudSnapshot:
    """
    Values a HUD reads once per tick.

    Attributes:
        speed: Ship speed.
        altitude: Minimum altitude over every non-ship body (inf if none).
        fuel_percent: Remaining fuel, 0-100.
        time_scale: Active fast-forward multiplier.
    """
    speed: float
    altitude: float
    fuel_percent: float
    time_scale: int


def format_hud(hud: HudSnapshot) -> dict[str, str]:
    """Display strings keyed by field name."""
    return {
        "velocity": f"{hud.speed:.1f} m/s",
        "altitude": f"{hud.altitude / 10:.1f} km",
        "fuel": f"{hud.fuel_percent:.0f}%",
        "timescale": f"{hud.time_scale}x",
    }
