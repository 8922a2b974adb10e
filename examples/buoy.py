# examples/buoy.py
"""Load a floating buoy from JSON and watch it bob on the surface."""
from pathlib import Path

from particle_sim.io import load_world

world = load_world(str(Path(__file__).parent / "worlds" / "buoy.json"))
buoy = world.particles[0]

for i in range(301):
    if i % 30 == 0:
        print(f"t={world.time:5.2f}  y={buoy.position.y:+.3f}  vy={buoy.velocity.y:+.3f}")
    world.step(1 / 60)
