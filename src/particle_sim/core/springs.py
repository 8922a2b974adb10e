# MIT License (see LICENSE)
"""
Spring-like force generators.

All springs follow Hooke's law on the separation d between the target
particle and its other end (a partner particle or a fixed anchor):

    Spring, AnchoredSpring:  |F| = k · |d - L|, always toward the other end
    Bungee:                  |F| = k · (d - L) when d > L, else 0 (slack)
    FakeSpring:              closed-form damped oscillator, see below

Two-body variants read the partner's position but only push on the
particle they are registered against. A symmetric spring needs a second
generator, pointing back, registered on the partner.

The separation vector is normalised to get the direction, so the two ends
must not coincide (Vector3.normalize raises ValueError).
"""
from __future__ import annotations
from dataclasses import dataclass
import math

from ..particle import Particle
from ..vector import Vector3
from .forces import ForceGenerator


def _spring_pull(difference: Vector3, magnitude: float) -> Vector3:
    """Force of the given magnitude pointing against difference (toward the other end)."""
    direction = difference.normalized()
    return direction * -magnitude


@dataclass(eq=False)
class Spring(ForceGenerator):
    """
    Spring connecting the target particle to another particle.

    Attributes:
        other: The particle at the other end (shared, not owned).
        spring_constant: Stiffness k in N/m.
        rest_length: Natural length L in m.
    """
    other: Particle
    spring_constant: float
    rest_length: float

    def update_force(self, particle: Particle, dt: float) -> None:
        difference = particle.position - self.other.position
        distance = difference.magnitude()
        magnitude = self.spring_constant * abs(distance - self.rest_length)
        particle.add_force(_spring_pull(difference, magnitude))


@dataclass(eq=False)
class AnchoredSpring(ForceGenerator):
    """
    Spring connecting the target particle to a fixed point in space.

    Attributes:
        anchor: World-space anchor point.
        spring_constant: Stiffness k in N/m.
        rest_length: Natural length L in m.
    """
    anchor: Vector3
    spring_constant: float
    rest_length: float

    def __post_init__(self) -> None:
        if not isinstance(self.anchor, Vector3):
            self.anchor = Vector3.from_array(self.anchor)

    def update_force(self, particle: Particle, dt: float) -> None:
        difference = particle.position - self.anchor
        distance = difference.magnitude()
        magnitude = self.spring_constant * abs(distance - self.rest_length)
        particle.add_force(_spring_pull(difference, magnitude))


@dataclass(eq=False)
class Bungee(ForceGenerator):
    """
    Elastic rope to another particle: pulls only when stretched.

    Attributes:
        other: The particle at the other end (shared, not owned).
        spring_constant: Stiffness k in N/m.
        rest_length: Slack length L in m.
    """
    other: Particle
    spring_constant: float
    rest_length: float

    def update_force(self, particle: Particle, dt: float) -> None:
        difference = particle.position - self.other.position
        distance = difference.magnitude()
        if distance <= self.rest_length:
            return

        magnitude = self.spring_constant * (distance - self.rest_length)
        particle.add_force(_spring_pull(difference, magnitude))


@dataclass(eq=False)
class FakeSpring(ForceGenerator):
    """
    Stiff spring to an anchor, solved in closed form over one timestep.

    A literal stiff spring explodes under large timesteps. Instead, the
    damped harmonic oscillator
        p'' = -k·p - c·p'
    is solved analytically for the coming dt, and the force that would
    carry the particle to that predicted position is applied:

        a = (target - p) / dt² - v / dt
        F = a · m

    where p is the offset from the anchor. With u = v + ½·c·p and
    D = 4k - c², the predicted offset is

        D > 0:  target = e^(-½c·dt) · (p·cos(γ·dt) + u·sin(γ·dt)/γ),   γ = ½·sqrt(D)
        D = 0:  target = e^(-½c·dt) · (p + u·dt)
        D < 0:  target = e^(-½c·dt) · (p·cosh(β·dt) + u·sinh(β·dt)/β), β = ½·sqrt(-D)

    so the under, critically and over-damped regimes all pull toward the
    anchor. Nothing is applied to particles with infinite mass.

    Attributes:
        anchor: World-space anchor point.
        spring_constant: Stiffness k.
        damping: Damping coefficient c.
    """
    anchor: Vector3
    spring_constant: float
    damping: float

    def __post_init__(self) -> None:
        if not isinstance(self.anchor, Vector3):
            self.anchor = Vector3.from_array(self.anchor)

    def predict_offset(self, offset: Vector3, velocity: Vector3, dt: float) -> Vector3:
        """Offset from the anchor after dt of free damped oscillation."""
        k, c = self.spring_constant, self.damping
        u = velocity + offset * (0.5 * c)
        discriminant = 4.0 * k - c * c
        if discriminant > 0.0:
            gamma = 0.5 * math.sqrt(discriminant)
            target = offset * math.cos(gamma * dt) + u * (math.sin(gamma * dt) / gamma)
        elif discriminant < 0.0:
            beta = 0.5 * math.sqrt(-discriminant)
            target = offset * math.cosh(beta * dt) + u * (math.sinh(beta * dt) / beta)
        else:
            target = offset + u * dt
        return target * math.exp(-0.5 * c * dt)

    def update_force(self, particle: Particle, dt: float) -> None:
        if not particle.has_finite_mass():
            return

        offset = particle.position - self.anchor
        velocity = particle.get_velocity()
        target = self.predict_offset(offset, velocity, dt)

        accel = (target - offset) * (1.0 / (dt * dt)) - velocity * (1.0 / dt)
        particle.add_force(accel * particle.get_mass())
