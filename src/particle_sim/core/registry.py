# MIT License (see LICENSE)
"""
Registry binding force generators to the particles they act on.

The registry is an ordered list of (particle, generator) registrations.
Both sides are shared references: the same particle can be targeted by
several generators and be the partner of a spring registered elsewhere,
and one generator can be registered against many particles.

Per tick, update_forces(dt) walks the registrations in insertion order
and lets each generator add its force. It must complete before any
particle is integrated.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import logging
from typing import Iterator

from ..particle import Particle
from .forces import ForceGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class ForceRegistration:
    """One active association between a particle and a generator."""
    particle: Particle
    generator: ForceGenerator

    def matches(self, particle: Particle, generator: ForceGenerator) -> bool:
        """Identity match on both sides."""
        return self.particle is particle and self.generator is generator


@dataclass
class ForceRegistry:
    """
    Ordered table of active (particle, generator) registrations.

    Note:
        add() does not deduplicate: registering the same pair twice applies
        the force twice per tick. remove() drops the first identical pair.
    """
    registrations: list[ForceRegistration] = field(default_factory=list)

    def add(self, particle: Particle, generator: ForceGenerator) -> None:
        """Register generator to act on particle from the next tick on."""
        self.registrations.append(ForceRegistration(particle, generator))
        logger.debug(
            "Registered %s on particle %#x (%d registrations)",
            type(generator).__name__, id(particle), len(self.registrations),
        )

    def remove(self, particle: Particle, generator: ForceGenerator) -> None:
        """
        Remove the first registration of exactly this (particle, generator) pair.

        Matching is by identity, not by value. Unknown pairs are ignored.
        """
        for i, reg in enumerate(self.registrations):
            if reg.matches(particle, generator):
                del self.registrations[i]
                logger.debug("Removed %s from particle %#x", type(generator).__name__, id(particle))
                return

    def remove_particle(self, particle: Particle) -> int:
        """
        Drop every registration that targets particle.

        Registrations where the particle is only a spring partner are kept;
        those generators still hold a reference to it.

        Returns:
            Number of registrations removed.
        """
        before = len(self.registrations)
        self.registrations[:] = [r for r in self.registrations if r.particle is not particle]
        removed = before - len(self.registrations)
        if removed:
            logger.debug("Dropped %d registration(s) of particle %#x", removed, id(particle))
        return removed

    def registrations_for(self, particle: Particle) -> list[ForceGenerator]:
        """Generators acting on particle, in registration order."""
        return [r.generator for r in self.registrations if r.particle is particle]

    def clear(self) -> None:
        """Drop all registrations."""
        self.registrations.clear()

    def update_forces(self, dt: float) -> None:
        """
        Let every registered generator add its force for the coming dt.

        Args:
            dt: Timestep in seconds, the same value later passed to integrate().
        """
        for reg in self.registrations:
            reg.generator.update_force(reg.particle, dt)

    def __len__(self) -> int:
        return len(self.registrations)

    def __iter__(self) -> Iterator[ForceRegistration]:
        return iter(self.registrations)
