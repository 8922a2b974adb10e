# MIT License (see LICENSE)
"""
particle_sim - A point-mass particle physics kernel.

This package advances particle state over time and lets independent force
generators push on particles before each advance. It is meant to run inside
a larger game or rendering loop that owns entities and reads positions back.

Main entry points:
    - Vector3: 3D vector algebra.
    - Particle: Point mass with damping and a per-tick force accumulator.
    - ForceRegistry: Binds force generators to particles.
    - ParticleWorld: Owns particles and registry, runs the two-phase tick.

Submodules:
    - core: Force generators, registry and invariants.
    - io: JSON serialization/deserialization of worlds.

Example:
    from particle_sim import ParticleWorld, Particle, Gravity

    world = ParticleWorld()
    ball = world.add_particle(Particle(position=(0, 10, 0), damping=0.99))
    ball.set_mass(1.0)
    world.add_force(ball, Gravity())
    world.step(1 / 60)
"""
from .vector import Vector3
from .particle import Particle
from .core.forces import ForceGenerator, Gravity, Drag, Buoyancy
from .core.springs import Spring, AnchoredSpring, Bungee, FakeSpring
from .core.registry import ForceRegistry
from .world import ParticleWorld
from .logging_config import setup_logging

__version__ = "0.1.0"

__all__ = [
    # Core simulation
    "Vector3",
    "Particle",
    "ParticleWorld",
    "ForceRegistry",
    # Force generators
    "ForceGenerator",
    "Gravity",
    "Drag",
    "Buoyancy",
    "Spring",
    "AnchoredSpring",
    "Bungee",
    "FakeSpring",
    # Logging
    "setup_logging",
]
