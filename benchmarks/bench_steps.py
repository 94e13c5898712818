"""
Microbenchmark: time per world step vs number of bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from gravity_lander.world import World
from gravity_lander.types import Body
from gravity_lander.profiler import Profiler

def run(n: int, steps: int = 300):
    prof = Profiler()
    world = World(g=100.0, profiler=prof)

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # scatter bodies in a disc with small random velocities
    radii = 1000.0 * np.sqrt(rng.random(n))
    angles = rng.uniform(0.0, 2 * np.pi, n)
    for k in range(n):
        x = float(radii[k] * np.cos(angles[k]))
        y = float(radii[k] * np.sin(angles[k]))
        vx, vy = (float(c) for c in rng.normal(0.0, 1.0, 2))
        world.add_body(Body(name=f"b{k}", mass=10.0, radius=2.0, position=(x, y), velocity=(vx, vy)))

    # warmup
    for _ in range(30):
        world.step(1 / 60)
    prof.stats.reset()

    t0 = time.perf_counter()
    for _ in range(steps):
        world.step(1 / 60)
    t1 = time.perf_counter()

    total = t1 - t0
    per_step = total / steps
    return per_step, prof.stats.summary()

if __name__ == "__main__":
    for n in [10, 50, 100, 250]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["gravity", "integrate"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
