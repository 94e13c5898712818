# MIT License (see LICENSE)
"""
Lightweight timing of world step phases.

World.step() times its "gravity" and "integrate" phases when a Profiler is
attached. No external dependencies.

Example:
    profiler = Profiler()
    world = World(profiler=profiler)
    for _ in range(600):
        world.step(1 / 60)
    print(profiler.stats.summary()["gravity"]["mean_ms"])
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """Raw timing samples per named section, with summary statistics."""
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, seconds: float) -> None:
        self.samples.setdefault(name, []).append(seconds)

    def total(self, name: str) -> float:
        """Total seconds spent in a section (0.0 if never entered)."""
        return sum(self.samples.get(name, ()))

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to {'n', 'mean_ms', 'max_ms'}.
        """
        out = {}
        for name, times in self.samples.items():
            out[name] = {
                "n": len(times),
                "mean_ms": 1e3 * sum(times) / len(times),
                "max_ms": 1e3 * max(times),
            }
        return out

    def reset(self) -> None:
        self.samples.clear()


class Profiler:
    """Times `with profiler.section(name):` blocks into `stats`."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
