# MIT License (see LICENSE)
"""
Utilities for calculating physical invariants of a particle set.

Used for verifying simulation correctness and debugging stability issues.
With no damping and no external forces, total momentum should remain
constant; springs registered symmetrically on both ends conserve it too.
Particles with infinite mass are skipped everywhere.
"""
from __future__ import annotations
from typing import Iterable

from ..particle import Particle
from ..vector import Vector3


def kinetic_energy(particles: Iterable[Particle]) -> float:
    """
    Total kinetic energy T = Σ ½·m·v² in Joules.

    Args:
        particles: Particles to sum over.
    """
    ke = 0.0
    for p in particles:
        if not p.has_finite_mass():
            continue
        ke += 0.5 * p.get_mass() * p.velocity.square_magnitude()
    return ke


def linear_momentum(particles: Iterable[Particle]) -> Vector3:
    """
    Total linear momentum P = Σ m·v in kg·m/s.

    Args:
        particles: Particles to sum over.
    """
    total = Vector3()
    for p in particles:
        if not p.has_finite_mass():
            continue
        total.add_scaled_vector(p.velocity, p.get_mass())
    return total


def center_of_mass(particles: Iterable[Particle]) -> Vector3:
    """
    Mass-weighted mean position of the finite-mass particles.

    Raises:
        ValueError: If no particle has finite mass.
    """
    weighted = Vector3()
    total_mass = 0.0
    for p in particles:
        if not p.has_finite_mass():
            continue
        m = p.get_mass()
        weighted.add_scaled_vector(p.position, m)
        total_mass += m
    if total_mass == 0.0:
        raise ValueError("center of mass is undefined without a finite-mass particle")
    return weighted * (1.0 / total_mass)
