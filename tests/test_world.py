# MIT License (see LICENSE)
import pytest
from gravity_lander.world import World
from gravity_lander.types import Body
from gravity_lander.profiler import Profiler
from gravity_lander.vector import Vec2


def test_add_assigns_ids_and_remove_absent_is_noop():
    world = World()
    a, b = Body(name="a"), Body(name="b")
    assert world.add_body(a) == 1
    assert world.add_body(b) == 2

    stranger = Body(name="a")  # same state as `a`, different body
    assert not world.remove_body(stranger)
    assert world.bodies == [a, b]

    assert world.remove_body(a)
    assert world.bodies == [b]
    assert not world.remove_body(a)


def test_clear_drops_everything():
    world = World()
    for i in range(4):
        world.add_body(Body(name=str(i), position=(100.0 * i, 0.0)))
    world.step(0.1)
    world.clear()
    assert world.bodies == []
    assert world.time == 0.0


def test_detect_collisions_lists_each_pair_once():
    world = World(g=0.0)
    a = Body(name="a", radius=5.0, position=(0.0, 0.0))
    b = Body(name="b", radius=5.0, position=(8.0, 0.0))
    c = Body(name="c", radius=5.0, position=(4.0, 6.0))
    far = Body(name="far", radius=1.0, position=(1000.0, 0.0))
    for body in (a, b, c, far):
        world.add_body(body)

    pairs = [(col.a.name, col.b.name) for col in world.detect_collisions()]
    assert pairs == [("a", "b"), ("a", "c"), ("b", "c")]
    assert all(col.depth > 0 for col in world.detect_collisions())


def test_find_collision_partner_first_in_order():
    world = World(g=0.0)
    ship = Body(name="ship", radius=5.0, position=(0.0, 0.0))
    p1 = Body(name="p1", radius=5.0, position=(9.0, 0.0))
    p2 = Body(name="p2", radius=5.0, position=(-9.0, 0.0))
    world.add_body(p1)
    world.add_body(ship)
    world.add_body(p2)

    assert world.find_collision_partner(ship) is p1
    p1.position = Vec2(50.0, 0.0)
    assert world.find_collision_partner(ship) is p2
    p2.position = Vec2(-50.0, 0.0)
    assert world.find_collision_partner(ship) is None


def test_tunneling_is_not_detected():
    """Discrete test only: a fast body can skip over a small target in one step."""
    world = World(g=0.0)
    target = Body(name="target", radius=1.0, position=(0.0, 0.0))
    bullet = Body(name="bullet", radius=1.0, position=(-10.0, 0.0), velocity=(100.0, 0.0))
    world.add_body(target)
    world.add_body(bullet)

    world.step(0.2)
    assert bullet.position.x == pytest.approx(10.0)
    assert world.find_collision_partner(bullet) is None


def test_profiler_sections():
    prof = Profiler()
    world = World(profiler=prof)
    world.add_body(Body(mass=10.0))
    world.add_body(Body(mass=10.0, position=(50.0, 0.0)))
    for _ in range(5):
        world.step(0.1)
    summary = prof.stats.summary()
    assert summary["gravity"]["n"] == 5
    assert summary["integrate"]["n"] == 5
    assert prof.stats.total("gravity") >= 0.0
    assert world.time == pytest.approx(0.5)


def test_find_by_name():
    world = World()
    earth = Body(name="Earth")
    world.add_body(earth)
    assert world.find("Earth") is earth
    assert world.find("Pluto") is None
