# MIT License (see LICENSE)
"""
Core force machinery for the particle kernel.

This subpackage provides:
    - Force generators: Gravity, Drag, Buoyancy and the spring family
      (Spring, AnchoredSpring, Bungee, FakeSpring).
    - ForceRegistry: the ordered (particle, generator) table driven each tick.
    - Invariants: kinetic energy, momentum and centre of mass.

Typical usage:
    from particle_sim.core import ForceRegistry, Gravity

    registry = ForceRegistry()
    registry.add(particle, Gravity())
    registry.update_forces(dt)
    particle.integrate(dt)
"""
from .forces import ForceGenerator, Gravity, Drag, Buoyancy
from .springs import Spring, AnchoredSpring, Bungee, FakeSpring
from .registry import ForceRegistry, ForceRegistration
from .invariants import kinetic_energy, linear_momentum, center_of_mass

__all__ = [
    # Generators
    "ForceGenerator",
    "Gravity",
    "Drag",
    "Buoyancy",
    "Spring",
    "AnchoredSpring",
    "Bungee",
    "FakeSpring",
    # Registry
    "ForceRegistry",
    "ForceRegistration",
    # Invariants
    "kinetic_energy",
    "linear_momentum",
    "center_of_mass",
]
