# MIT License (see LICENSE)
import math

import numpy as np
import pytest
from gravity_lander.world import World
from gravity_lander.types import Body, OrbitParams
from gravity_lander.core.orbit import update_orbit
from gravity_lander.vector import Vec2


def make_planet(radius=400.0, speed=0.0001, angle=0.0):
    return Body(name="Earth", mass=5.0, radius=13.0,
                orbit=OrbitParams(radius=radius, angular_speed=speed, angle=angle))


@pytest.mark.parametrize("orbit_radius", [1.0, 200.0, 400.0, 12345.6])
@pytest.mark.parametrize("angle", [0.0, 1.0, math.pi, -2.5, 40.0])
def test_orbit_position_on_circle(orbit_radius, angle):
    anchor = Body(name="Sun", mass=1e6, radius=30, fixed=True, position=(17.0, -4.0))
    planet = make_planet(radius=orbit_radius, speed=0.3, angle=angle)

    update_orbit(planet, 0.7, anchor)

    assert planet.distance_to(anchor) == pytest.approx(orbit_radius, rel=1e-12)
    assert planet.orbit.angle == pytest.approx(angle + 0.3 * 0.7)


def test_orbit_velocity_is_tangential_and_scaled_by_dt():
    anchor = Body(name="Sun", mass=1e6, fixed=True)
    planet = make_planet(radius=400.0, speed=0.0001)

    update_orbit(planet, 2.0, anchor)
    radial = planet.position - anchor.position
    assert planet.velocity.dot(radial) == pytest.approx(0.0, abs=1e-9)
    # ω R / dt
    assert planet.velocity.length() == pytest.approx(0.0001 * 400.0 / 2.0)


def test_zero_dt_keeps_previous_velocity():
    anchor = Body(name="Sun", mass=1e6, fixed=True)
    planet = make_planet()
    update_orbit(planet, 1.0, anchor)
    v = planet.velocity
    p = planet.position

    update_orbit(planet, 0.0, anchor)
    assert planet.velocity == v
    assert planet.position == p


def test_free_body_is_untouched():
    anchor = Body(name="Sun", mass=1e6, fixed=True)
    free = Body(position=(3.0, 4.0), velocity=(1.0, 1.0), orbit=OrbitParams(radius=0.0, angular_speed=1.0))
    update_orbit(free, 1.0, anchor)
    assert free.position == Vec2(3.0, 4.0)
    assert free.velocity == Vec2(1.0, 1.0)
    assert free.orbit.angle == 0.0


def test_world_step_does_not_move_orbit_locked_bodies():
    """Only the orbit update positions a locked body; gravity never adds to it."""
    anchor = Body(name="Sun", mass=1e6, radius=30, fixed=True)
    planet = make_planet(radius=400.0, speed=0.01)
    world = World(g=100.0)
    world.add_body(anchor)
    world.add_body(planet)

    update_orbit(planet, 1.0, anchor)
    before = planet.position
    world.step(1.0)
    assert planet.position == before
    assert planet.acceleration == Vec2.zero()
    # step() never records for a locked body; only the orbit update does
    assert planet.trail == (before,)

    for _ in range(50):
        update_orbit(planet, 1.0, anchor)
        world.step(1.0)
        assert planet.distance_to(anchor) == pytest.approx(400.0)


def test_orbit_angle_accumulates_without_wrapping():
    anchor = Body(name="Sun", mass=1e6, fixed=True)
    planet = make_planet(speed=1.0)
    for _ in range(100):
        update_orbit(planet, 1.0, anchor)
    assert planet.orbit.angle == pytest.approx(100.0)
    expected = np.array([400.0 * math.cos(100.0), 400.0 * math.sin(100.0)])
    assert np.allclose(planet.position.as_array(), expected)


def test_orbit_update_records_trail():
    anchor = Body(name="Sun", mass=1e6, fixed=True)
    planet = Body(name="Earth", mass=5.0, radius=13.0, max_trail_length=3,
                  orbit=OrbitParams(radius=100.0, angular_speed=0.5))

    points = []
    for _ in range(5):
        update_orbit(planet, 1.0, anchor)
        points.append(planet.position)

    assert planet.trail == tuple(points[-3:])
