# MIT License (see LICENSE)
"""
The particle world: simulation context and tick driver.

ParticleWorld owns the list of live particles and the force registry that
binds generators to them. It does not decide when a particle dies; the
embedding application adds and removes particles as its own entities come
and go.

A tick is always two phases, in this order:
    1. Forces:    registry.update_forces(dt) for every registration.
    2. Integrate: particle.integrate(dt) for every live particle.

No particle is integrated before every force of the tick has been
accumulated, so every generator sees start-of-tick positions.

Structure:
    - Application creates a ParticleWorld.
    - Application adds particles and (particle, generator) registrations.
    - Application calls world.step(dt) once per frame, then reads positions.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .particle import Particle
from .profiler import Profiler
from .core.forces import ForceGenerator
from .core.registry import ForceRegistry

logger = logging.getLogger(__name__)


@dataclass
class ParticleWorld:
    """
    Container for particles, their force registrations and simulation time.

    Attributes:
        particles: Live particles, integrated in insertion order.
        registry: Force registrations driven at the start of each step.
        profiler: Optional Profiler timing the "forces" and "integrate" phases.
        time: Total simulated time in seconds.
    """
    particles: list[Particle] = field(default_factory=list)
    registry: ForceRegistry = field(default_factory=ForceRegistry)
    profiler: Profiler | None = None
    time: float = 0.0

    def add_particle(self, particle: Particle) -> Particle:
        """Add a particle to the world and return it."""
        self.particles.append(particle)
        logger.debug("Added particle %#x (%d live)", id(particle), len(self.particles))
        return particle

    def remove_particle(self, particle: Particle) -> None:
        """
        Remove a particle and every registration that targets it.

        Unknown particles are ignored. Generators that merely reference the
        particle as a partner (springs, bungees) are left in place.
        """
        for i, p in enumerate(self.particles):
            if p is particle:
                del self.particles[i]
                break
        else:
            return
        dropped = self.registry.remove_particle(particle)
        logger.debug(
            "Removed particle %#x and %d registration(s) (%d live)",
            id(particle), dropped, len(self.particles),
        )

    def add_force(self, particle: Particle, generator: ForceGenerator) -> None:
        """Register generator on particle (see ForceRegistry.add)."""
        self.registry.add(particle, generator)

    def remove_force(self, particle: Particle, generator: ForceGenerator) -> None:
        """Unregister one (particle, generator) pair (see ForceRegistry.remove)."""
        self.registry.remove(particle, generator)

    def start_frame(self) -> None:
        """
        Clear every particle's force accumulator.

        Call at the start of a frame when the application adds forces
        directly with particle.add_force() and wants a clean slate.
        """
        for p in self.particles:
            p.clear_accumulator()

    def run_forces(self, dt: float) -> None:
        """Phase 1: accumulate the forces of every registration."""
        self.registry.update_forces(dt)

    def integrate(self, dt: float) -> None:
        """Phase 2: integrate every live particle (clears accumulators)."""
        for p in self.particles:
            p.integrate(dt)

    def step(self, dt: float) -> None:
        """
        Advance the simulation by dt.

        Args:
            dt: Timestep in seconds, shared by both phases.

        Raises:
            ValueError: If dt <= 0. Nothing is modified in that case.
        """
        dt = float(dt)
        if not dt > 0.0:
            raise ValueError(f"Timestep must be positive, got {dt}")

        prof = self.profiler
        if prof:
            with prof.section("forces"):
                self.run_forces(dt)
            with prof.section("integrate"):
                self.integrate(dt)
        else:
            self.run_forces(dt)
            self.integrate(dt)

        self.time += dt
