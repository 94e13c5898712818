# MIT License (see LICENSE)
import io
import math

import pytest
from gravity_lander.camera import Camera
from gravity_lander.config import DisplayCfg, SessionCfg
from gravity_lander.controls import Control, ScriptedInput, NoInput
from gravity_lander.hud import HudSnapshot, format_hud
from gravity_lander.renderer import BufferedRenderer, DebugRenderer, NullRenderer
from gravity_lander.session import Session
from gravity_lander.types import Body
from gravity_lander.vector import Vec2


def test_camera_round_trip_and_clamp():
    cam = Camera(DisplayCfg(viewport=(800, 600), initial_zoom=2.0))
    cam.position = Vec2(100.0, -50.0)

    center = cam.world_to_screen(Vec2(100.0, -50.0))
    assert center == Vec2(400.0, 300.0)
    p = cam.world_to_screen(Vec2(110.0, -50.0))
    assert p.x == pytest.approx(420.0)

    back = cam.screen_to_world(Vec2(123.0, 456.0))
    again = cam.world_to_screen(back)
    assert again.x == pytest.approx(123.0)
    assert again.y == pytest.approx(456.0)

    cam.set_zoom(100.0)
    assert cam.zoom == 5.0
    cam.set_zoom(0.0)
    assert cam.zoom == 0.05


def test_camera_auto_zoom_fits_bodies():
    cam = Camera(DisplayCfg(viewport=(1000, 1000), max_zoom=10.0))
    bodies = [Body(radius=10.0, position=(-490.0, 0.0)), Body(radius=10.0, position=(490.0, 0.0)),
              Body(radius=10.0, position=(0.0, 90.0))]
    cam.auto_zoom(bodies)
    # Width 1000 -> zoom 1.0 · 0.8
    assert cam.zoom == pytest.approx(0.8)
    cam.auto_zoom([])
    assert cam.zoom == pytest.approx(0.8)


def test_scripted_input_edges():
    controls = ScriptedInput()
    controls.hold(Control.THRUST)
    assert controls.is_held(Control.THRUST)
    assert controls.was_pressed(Control.THRUST)
    controls.end_frame()
    assert controls.is_held(Control.THRUST)
    assert not controls.was_pressed(Control.THRUST)

    controls.press(Control.CYCLE_TIME_SCALE)
    assert controls.was_pressed(Control.CYCLE_TIME_SCALE)
    assert not controls.is_held(Control.CYCLE_TIME_SCALE)

    controls.release(Control.THRUST)
    assert not controls.is_held(Control.THRUST)

    none = NoInput()
    assert not any(none.is_held(c) or none.was_pressed(c) for c in Control)


def test_format_hud():
    text = format_hud(HudSnapshot(speed=12.345, altitude=123.0, fuel_percent=99.6, time_scale=100))
    assert text == {
        "velocity": "12.3 m/s",
        "altitude": "12.3 km",
        "fuel": "100%",
        "timescale": "100x",
    }
    assert format_hud(HudSnapshot(0.0, math.inf, 0.0, 1))["altitude"] == "inf km"


def test_buffered_renderer_records_draw_state():
    session = Session(SessionCfg(gravitational_constant=0.0, seed=2))
    session.start()
    controls = ScriptedInput(held=[Control.THRUST])
    renderer = BufferedRenderer()
    for _ in range(3):
        session.tick(0.01, controls)
        renderer.render_bodies(session.draw_order(), session.world.time)

    assert len(renderer.frames) == 3
    last = renderer.frames[-1]
    names = [b["name"] for b in last["bodies"]]
    assert names == ["Sun", "Mercury", "Venus", "Earth", "Mars", "Ship"]
    ship = last["bodies"][-1]
    assert ship["thrusting"] is True
    assert ship["angle"] == 0.0
    assert len(ship["trail"]) == 3
    assert ship["position"] == session.ship.position.as_array().tolist()
    sun, earth = last["bodies"][0], last["bodies"][3]
    assert sun["kind"] == "plain" and sun["glow_color"] == "#FF6B00"
    # one point from the initial placement, one per tick
    assert len(earth["trail"]) == 4

    renderer.clear()
    assert renderer.frames == []


def test_debug_and_null_renderers():
    session = Session(SessionCfg(seed=4))
    session.start()

    out = io.StringIO()
    DebugRenderer(output=out).render_session(session)
    text = out.getvalue()
    assert text.startswith("=== Frame t=0.0000 ===")
    assert "Sun plain" in text and "Earth orbiting" in text and "Ship ship" in text and "fuel=100%" in text

    NullRenderer().render_session(session)
