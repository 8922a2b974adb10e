# MIT License (see LICENSE)
"""
Point-mass particle: kinematic state, force accumulator and integration.

A particle stores its mass inverted so that an immovable object is simply
``inverse_mass == 0`` (infinite mass) with no division by infinity anywhere.

The integration step is semi-implicit Euler with frame-rate independent
damping:
  x  ← x + v·dt                      (start-of-step velocity)
  a' = a + F·m⁻¹                     (base acceleration + accumulated force)
  v  ← (v + a'·dt) · damping^dt
  F  ← 0                             (accumulator is per-tick scratch)
"""
from __future__ import annotations
from dataclasses import dataclass, field
import math
import numbers

from .constants import DEFAULT_DAMPING
from .vector import Vector3


def _as_vector(args: tuple) -> Vector3:
    """Accept set_xxx(vector), set_xxx((x, y, z)) or set_xxx(x, y, z)."""
    if len(args) == 3 and all(isinstance(a, numbers.Real) for a in args):
        return Vector3(*args)
    if len(args) == 1:
        value = args[0]
        if isinstance(value, Vector3):
            return value.copy()
        return Vector3.from_array(value)
    raise TypeError(f"Expected a Vector3, a 3-sequence or three scalars, got {args!r}")


@dataclass(eq=False)
class Particle:
    """
    The simplest object that can be simulated: a point mass.

    Attributes:
        position: Position in world space (m).
        velocity: Linear velocity (m/s).
        acceleration: Constant base acceleration (m/s²), e.g. a per-projectile
                      gravity. Force generators are the other way to move it.
        damping: Proportion of velocity kept per second, applied as
                 ``damping ** dt`` (1.0 = all, 0.0 = none). Defaults to 1.0,
                 not 0.0, so a particle built without an explicit damping
                 keeps moving; every other field starts at zero.
        inverse_mass: 1/m. Zero means infinite mass.
        force_accum: Force accumulated for the next integrate() call.

    Note:
        Particles compare by identity. The registry, the world and spring
        generators all hold references to the same particle object.
    """
    position: Vector3 = field(default_factory=Vector3)
    velocity: Vector3 = field(default_factory=Vector3)
    acceleration: Vector3 = field(default_factory=Vector3)
    damping: float = DEFAULT_DAMPING
    inverse_mass: float = 0.0
    force_accum: Vector3 = field(default_factory=Vector3)

    def __post_init__(self) -> None:
        """Accept tuples/lists for the vector fields."""
        self.position = _as_vector((self.position,))
        self.velocity = _as_vector((self.velocity,))
        self.acceleration = _as_vector((self.acceleration,))
        self.force_accum = _as_vector((self.force_accum,))
        self.damping = float(self.damping)
        self.inverse_mass = float(self.inverse_mass)

    # -------------------------------------------------------------------------
    # Integration
    # -------------------------------------------------------------------------

    def integrate(self, dt: float) -> None:
        """
        Advance position and velocity by dt, then clear the accumulator.

        Args:
            dt: Timestep in seconds. Must be strictly positive.

        Raises:
            ValueError: If dt <= 0.
        """
        if not dt > 0.0:
            raise ValueError(f"attempted to integrate over a non-positive duration: {dt}")

        self.position.add_scaled_vector(self.velocity, dt)

        resultant = self.acceleration.copy()
        resultant.add_scaled_vector(self.force_accum, self.inverse_mass)

        self.velocity.add_scaled_vector(resultant, dt)
        self.velocity *= math.pow(self.damping, dt)

        self.clear_accumulator()

    def add_force(self, force: Vector3) -> None:
        """Add a force to be applied at the next integrate() only."""
        self.force_accum += force

    def clear_accumulator(self) -> None:
        """Reset the accumulated force to zero."""
        self.force_accum.clear()

    # -------------------------------------------------------------------------
    # Mass
    # -------------------------------------------------------------------------

    def get_mass(self) -> float:
        """Mass in kg, or +inf when the inverse mass is zero."""
        if self.inverse_mass == 0.0:
            return math.inf
        return 1.0 / self.inverse_mass

    def set_mass(self, mass: float) -> None:
        """
        Set the mass (stored inverted).

        Raises:
            ValueError: If mass is exactly zero. Infinite mass is expressed
                        with set_inverse_mass(0) instead.
        """
        if mass == 0.0:
            raise ValueError("attempted to set mass to zero")
        self.inverse_mass = 1.0 / float(mass)

    @property
    def mass(self) -> float:
        return self.get_mass()

    @mass.setter
    def mass(self, value: float) -> None:
        self.set_mass(value)

    def get_inverse_mass(self) -> float:
        return self.inverse_mass

    def set_inverse_mass(self, inverse_mass: float) -> None:
        self.inverse_mass = float(inverse_mass)

    def has_finite_mass(self) -> bool:
        """True unless the particle is immovable (inverse mass of zero)."""
        return self.inverse_mass != 0.0

    # -------------------------------------------------------------------------
    # Plain accessors (getters return copies)
    # -------------------------------------------------------------------------

    def get_position(self) -> Vector3:
        return self.position.copy()

    def set_position(self, *args) -> None:
        self.position = _as_vector(args)

    def get_velocity(self) -> Vector3:
        return self.velocity.copy()

    def set_velocity(self, *args) -> None:
        self.velocity = _as_vector(args)

    def get_acceleration(self) -> Vector3:
        return self.acceleration.copy()

    def set_acceleration(self, *args) -> None:
        self.acceleration = _as_vector(args)

    def get_damping(self) -> float:
        return self.damping

    def set_damping(self, damping: float) -> None:
        self.damping = float(damping)
