# examples/ballistic.py
"""
Headless ballistics demo: fire one shot of each ammunition type and report
where it lands. Shots are despawned after 5 s or when they hit the ground
(y < 0) or leave the range (z > 200), exactly as a game loop would.
"""
import logging

from particle_sim import Particle, ParticleWorld, setup_logging

logger = logging.getLogger("particle_sim.examples.ballistic")

# name: (mass, (vy, vz), gravity_y, damping)
SHOT_TYPES = {
    "pistol": (2.0, (0.0, 35.0), -1.0, 0.99),
    "artillery": (200.0, (30.0, 40.0), -20.0, 0.99),
    "fireball": (1.0, (0.0, 10.0), 0.6, 0.9),
    "laser": (0.1, (0.0, 100.0), 0.0, 0.99),
}

LIFETIME = 5.0
DT = 1 / 60


def fire(world: ParticleWorld, shot: str) -> Particle:
    mass, (vy, vz), gy, damping = SHOT_TYPES[shot]
    p = Particle(position=(0.0, 1.5, 0.0), damping=damping)
    p.set_mass(mass)
    p.set_velocity(0.0, vy, vz)
    p.set_acceleration(0.0, gy, 0.0)
    return world.add_particle(p)


def main() -> None:
    setup_logging()
    for shot in SHOT_TYPES:
        world = ParticleWorld()
        p = fire(world, shot)
        while world.particles:
            world.step(DT)
            pos = p.get_position()
            if world.time >= LIFETIME or pos.y < 0.0 or pos.z > 200.0:
                world.remove_particle(p)
        logger.info("%s despawned at t=%.2fs", shot, world.time)
        print(f"{shot:10s} t={world.time:5.2f}s  pos=({pos.x:.2f}, {pos.y:.2f}, {pos.z:.2f})")


if __name__ == "__main__":
    main()
