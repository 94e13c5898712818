# examples/two_body.py
# A moon on a circular orbit around a heavy planet, integrated by the world
# step alone. Prints radius drift and momentum as a quick stability check.
import math

from gravity_lander import Body, World
from gravity_lander.core import kinetic_energy, linear_momentum

world = World(g=100.0)

planet = Body(name="Planet", mass=5000.0, radius=20.0)
r = 200.0
v = math.sqrt(world.g * planet.mass / r)
moon = Body(name="Moon", mass=1.0, radius=3.0, position=(r, 0.0), velocity=(0.0, v))
world.add_body(planet)
world.add_body(moon)

dt = 1 / 60
period = 2 * math.pi * r / v
while world.time < period:
    world.step(dt)

print("t:", round(world.time, 3), "period:", round(period, 3))
print("radius drift:", moon.distance_to(planet) - r)
print("momentum:", linear_momentum(world.bodies))
print("kinetic energy:", kinetic_energy(world.bodies))
print("trail points:", len(moon.trail))
