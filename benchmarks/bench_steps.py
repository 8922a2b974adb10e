"""
Microbenchmark: time per step vs number of particles.
Run:
  python benchmarks/bench_steps.py
"""
import time

import numpy as np

from particle_sim import Particle, ParticleWorld, Gravity, Drag, Spring
from particle_sim.profiler import Profiler


def run(n: int, steps: int = 300):
    prof = Profiler()
    world = ParticleWorld(profiler=prof)

    rng = np.random.default_rng(12345)  # deterministic jitter
    gravity = Gravity()
    drag = Drag(k1=0.05, k2=0.01)

    # a chain of particles, each tied to the previous one
    prev = None
    for i in range(n):
        jitter = 0.01 * rng.normal(size=3)
        p = world.add_particle(Particle(position=(0.5 * i, 10.0, 0.0) + jitter, damping=0.99))
        p.set_mass(1.0)
        world.add_force(p, gravity)
        world.add_force(p, drag)
        if prev is not None:
            world.add_force(p, Spring(prev, spring_constant=50.0, rest_length=0.5))
            world.add_force(prev, Spring(p, spring_constant=50.0, rest_length=0.5))
        prev = p

    # warmup
    for _ in range(30):
        world.step(1 / 240)
    prof.stats.clear()

    t0 = time.perf_counter()
    for _ in range(steps):
        world.step(1 / 240)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [10, 50, 100, 250, 500]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["forces", "integrate"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
