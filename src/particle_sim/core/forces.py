# MIT License (see LICENSE)
"""
Force generators for particle simulation.

A force generator is a rule that, given a particle and the length of the
coming timestep, computes a force and adds it to that particle's
accumulator. Generators are bound to particles through a ForceRegistry and
run once per tick, before any particle is integrated.

This module holds the abstract interface and the single-particle laws:
    - Gravity:  F = m·g (skipped for infinite mass)
    - Drag:     F = -v̂ (k1|v| + k2|v|²)
    - Buoyancy: linear ramp from 0 to ρ·V across a band around the surface

The spring family lives in springs.py.

Key concepts:
- Generators only call particle.add_force(); they never integrate and never
  clear accumulators.
- Generators keep no per-tick state, so one instance may be registered
  against many particles.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..constants import GRAVITY_EARTH, WATER_DENSITY
from ..particle import Particle
from ..vector import Vector3


class ForceGenerator(ABC):
    """
    Abstract base class for anything that can push on a particle.

    Subclasses implement update_force(), which must only add force to the
    particle it is given.
    """

    @abstractmethod
    def update_force(self, particle: Particle, dt: float) -> None:
        """
        Compute this generator's force and add it to particle.

        Args:
            particle: The target particle (its accumulator is modified).
            dt: Length of the coming timestep in seconds.
        """
        ...


@dataclass(eq=False)
class Gravity(ForceGenerator):
    """
    Constant gravitational field.

    Implements F = m·g. Particles with infinite mass are left untouched,
    which keeps immovable anchors in place.

    Attributes:
        gravity: Gravitational acceleration in m/s².
    """
    gravity: Vector3 = field(default_factory=lambda: Vector3(*GRAVITY_EARTH))

    def __post_init__(self) -> None:
        if not isinstance(self.gravity, Vector3):
            self.gravity = Vector3.from_array(self.gravity)

    def update_force(self, particle: Particle, dt: float) -> None:
        if not particle.has_finite_mass():
            return
        particle.add_force(self.gravity * particle.get_mass())


@dataclass(eq=False)
class Drag(ForceGenerator):
    """
    Velocity-dependent drag with a linear and a quadratic term.

    Implements F = -v̂ · (k1·|v| + k2·|v|²). A particle at rest has no
    direction of travel, so it receives no drag.

    Attributes:
        k1: Linear drag coefficient.
        k2: Quadratic drag coefficient.
    """
    k1: float
    k2: float

    def update_force(self, particle: Particle, dt: float) -> None:
        velocity = particle.get_velocity()
        speed = velocity.magnitude()
        if speed == 0.0:
            return

        drag_coeff = self.k1 * speed + self.k2 * speed * speed
        velocity.normalize()
        particle.add_force(velocity * -drag_coeff)


@dataclass(eq=False)
class Buoyancy(ForceGenerator):
    """
    Buoyancy relative to a horizontal plane of liquid at y = liquid_height.

    The particle is treated as submerged across a band of half-width
    max_depth around the surface:
      y >= h + D          →  no force (out of the liquid)
      y <= h - D          →  full force ρ·V, upward
      otherwise           →  ρ·V · (h + D - y) / (2D), upward

    The force is therefore non-decreasing with depth and saturates at ρ·V.

    Attributes:
        max_depth: Depth (D) at which the maximal force is reached.
        volume: Displaced volume of the object (m³).
        liquid_height: Height (h) of the liquid surface above y = 0.
        liquid_density: Density of the liquid (kg/m³), water by default.
    """
    max_depth: float
    volume: float
    liquid_height: float
    liquid_density: float = WATER_DENSITY

    @classmethod
    def water(cls, max_depth: float, volume: float, liquid_height: float) -> "Buoyancy":
        """Buoyancy in fresh water."""
        return cls(max_depth, volume, liquid_height, WATER_DENSITY)

    def force_at(self, height: float) -> float:
        """Upward force magnitude for a particle at the given y coordinate."""
        if height >= self.liquid_height + self.max_depth:
            return 0.0

        full = self.liquid_density * self.volume
        if height <= self.liquid_height - self.max_depth:
            return full

        submerged = (self.liquid_height + self.max_depth - height) / (2.0 * self.max_depth)
        return full * submerged

    def update_force(self, particle: Particle, dt: float) -> None:
        force = self.force_at(particle.position.y)
        if force == 0.0:
            return
        particle.add_force(Vector3(0.0, force, 0.0))
