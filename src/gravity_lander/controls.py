# MIT License (see LICENSE)
"""
Logical input controls and the input-source interface.

The session polls an InputSource once per tick and never sees a device.
Two kinds of query exist:
- is_held(control): level-triggered, true for as long as it is held.
- was_pressed(control): edge-triggered, true only on the tick it went down.

Adapters for keyboards, gamepads or network input implement InputSource.
ScriptedInput drives headless runs and tests.
"""
from __future__ import annotations
import enum
from abc import ABC, abstractmethod
from typing import Iterable


class Control(enum.Enum):
    ROTATE_LEFT = "rotate_left"
    ROTATE_RIGHT = "rotate_right"
    THRUST = "thrust"
    CYCLE_TIME_SCALE = "cycle_time_scale"
    RESET = "reset"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"


class InputSource(ABC):
    """Abstract poll interface read by Session.handle_input()."""

    @abstractmethod
    def is_held(self, control: Control) -> bool:
        ...

    @abstractmethod
    def was_pressed(self, control: Control) -> bool:
        ...

    def end_frame(self) -> None:
        """Called once after each tick; clears edge-triggered state."""


class NoInput(InputSource):
    """Nothing is ever held or pressed."""

    def is_held(self, control: Control) -> bool:
        return False

    def was_pressed(self, control: Control) -> bool:
        return False


class ScriptedInput(InputSource):
    """
    Programmable input for headless runs and tests.

    Example:
        controls = ScriptedInput()
        controls.hold(Control.THRUST)
        session.tick(1 / 60, controls)   # thrusts
        controls.press(Control.RESET)
        session.tick(1 / 60, controls)   # restarts; the press is then consumed
    """

    def __init__(self, held: Iterable[Control] = ()) -> None:
        self._held: set[Control] = set(held)
        self._pressed: set[Control] = set()

    def hold(self, *controls: Control) -> None:
        for c in controls:
            if c not in self._held:
                self._pressed.add(c)
            self._held.add(c)

    def release(self, *controls: Control) -> None:
        for c in controls:
            self._held.discard(c)

    def press(self, *controls: Control) -> None:
        """A tap: pressed for the next tick only, not held."""
        self._pressed.update(controls)

    def is_held(self, control: Control) -> bool:
        return control in self._held

    def was_pressed(self, control: Control) -> bool:
        return control in self._pressed

    def end_frame(self) -> None:
        self._pressed.clear()
