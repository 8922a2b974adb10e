# MIT License (see LICENSE)
"""
Simple profiling utilities for the particle tick.

ParticleWorld.step() times its two phases ("forces" and "integrate") when a
Profiler is attached. Timings are kept in memory and can be summarised or
written to the package logger.

Example:
    profiler = Profiler()
    world = ParticleWorld(profiler=profiler)
    for _ in range(100):
        world.step(1 / 60)
    profiler.log_summary()
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
import logging
import time
from typing import Iterator

logger = logging.getLogger(__name__)


@dataclass
class ProfileStats:
    """
    Accumulates timing samples for named sections.

    Stores raw timing data and provides summary statistics.
    """
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        """Record a timing sample (in seconds) for a named section."""
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Per-section statistics.

        Returns:
            Dict mapping section name to a dict with keys 'n', 'total_ms',
            'mean_ms' and 'max_ms'.
        """
        out = {}
        for name, times in self.samples.items():
            total = sum(times)
            out[name] = {
                "n": len(times),
                "total_ms": 1e3 * total,
                "mean_ms": 1e3 * total / len(times),
                "max_ms": 1e3 * max(times),
            }
        return out

    def clear(self) -> None:
        self.samples.clear()


class Profiler:
    """Context-manager based profiler for timing code sections."""

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under name (recorded even if it raises)."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)

    def log_summary(self, level: int = logging.INFO) -> None:
        """Write one line per section to the package logger."""
        for name, s in sorted(self.stats.summary().items()):
            logger.log(
                level, "%s: n=%d mean=%.3fms max=%.3fms total=%.1fms",
                name, s["n"], s["mean_ms"], s["max_ms"], s["total_ms"],
            )
