# MIT License (see LICENSE)
"""
Three-component vector algebra for the particle kernel.

Vector3 wraps a float64 numpy array of shape (3,) and exposes the small set
of operations the rest of the kernel relies on:

- Component-wise arithmetic: add, sub, scale (and +, -, *, unary -).
- Fused in-place accumulation: add_scaled_vector (the integration primitive).
- Products: component_product, scalar_product (dot, also ``a * b``) and
  vector_product (cross, also ``a % b``).
- Length: magnitude, square_magnitude, normalize, invert.

Vectors are value-like: equality compares components, and copies are
explicit via copy(). The augmented operators (+=, -=, *=, %=) mutate in place,
exactly like numpy arrays do.

Example:
    from particle_sim.vector import Vector3

    a = Vector3(1.0, 0.0, 0.0)
    b = Vector3(0.0, 1.0, 0.0)
    a % b            # Vector3(0.0, 0.0, 1.0)
    a * b            # 0.0
    (a + b).magnitude()
"""
from __future__ import annotations
import numbers
from typing import Iterator

import numpy as np

from .util import norm2, vec3


class Vector3:
    """
    A 3D vector with float64 components.

    Attributes:
        x, y, z: Components, readable and writable as plain floats.

    Note:
        normalize() raises ValueError on the zero vector; callers computing a
        direction from a difference of two points must make sure the points
        do not coincide.
    """

    __slots__ = ("_v",)

    # Make numpy defer to our reflected operators (np.float64(2) * v -> Vector3).
    __array_ufunc__ = None

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self._v = np.array([x, y, z], dtype=np.float64)

    # -------------------------------------------------------------------------
    # Construction / conversion
    # -------------------------------------------------------------------------

    @classmethod
    def from_array(cls, values) -> "Vector3":
        """Build a vector from any 3-element array-like (tuple, list, ndarray)."""
        obj = cls.__new__(cls)
        obj._v = vec3(values)
        return obj

    @classmethod
    def zero(cls) -> "Vector3":
        """Return a new zero vector."""
        return cls()

    def copy(self) -> "Vector3":
        """Return an independent copy of this vector."""
        return Vector3.from_array(self._v)

    def as_array(self) -> np.ndarray:
        """Return the components as a new float64 array of shape (3,)."""
        return self._v.copy()

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        if copy is False:
            if dtype is not None and np.dtype(dtype) != self._v.dtype:
                raise ValueError("Unable to avoid a copy while converting Vector3 to a different dtype")
            return self._v
        return np.array(self._v, dtype=dtype, copy=True)

    def __iter__(self) -> Iterator[float]:
        return iter(self._v.tolist())

    def __repr__(self) -> str:
        x, y, z = self._v.tolist()
        return f"Vector3({x!r}, {y!r}, {z!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    # Mutable, so not hashable.
    __hash__ = None  # type: ignore[assignment]

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    @property
    def x(self) -> float:
        return float(self._v[0])

    @x.setter
    def x(self, value: float) -> None:
        self._v[0] = value

    @property
    def y(self) -> float:
        return float(self._v[1])

    @y.setter
    def y(self, value: float) -> None:
        self._v[1] = value

    @property
    def z(self) -> float:
        return float(self._v[2])

    @z.setter
    def z(self, value: float) -> None:
        self._v[2] = value

    def set(self, x: float, y: float, z: float) -> None:
        """Assign all three components in place."""
        self._v[:] = (x, y, z)

    def clear(self) -> None:
        """Zero all components in place."""
        self._v.fill(0.0)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: "Vector3") -> "Vector3":
        """Component-wise sum, returned as a new vector."""
        return Vector3.from_array(self._v + other._v)

    def sub(self, other: "Vector3") -> "Vector3":
        """Component-wise difference, returned as a new vector."""
        return Vector3.from_array(self._v - other._v)

    def scale(self, k: float) -> "Vector3":
        """Multiply every component by a scalar, returned as a new vector."""
        return Vector3.from_array(self._v * float(k))

    def add_scaled_vector(self, other: "Vector3", k: float) -> None:
        """
        Accumulate a scaled contribution in place: self += other * k.

        This is the only primitive the integrator uses, so it must not
        allocate a new Vector3.
        """
        self._v += other._v * float(k)

    def invert(self) -> None:
        """Negate every component in place."""
        np.negative(self._v, out=self._v)

    def component_product(self, other: "Vector3") -> "Vector3":
        """Return the component-wise (Hadamard) product."""
        return Vector3.from_array(self._v * other._v)

    def component_product_update(self, other: "Vector3") -> None:
        """Multiply each component by the matching component of other."""
        self._v *= other._v

    def scalar_product(self, other: "Vector3") -> float:
        """Dot product: x·x2 + y·y2 + z·z2."""
        a, b = self._v, other._v
        return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])

    def vector_product(self, other: "Vector3") -> "Vector3":
        """
        Cross product using the right-hand rule.

            (y·z2 − z·y2, z·x2 − x·z2, x·y2 − y·x2)
        """
        x, y, z = self._v
        x2, y2, z2 = other._v
        return Vector3(y * z2 - z * y2, z * x2 - x * z2, x * y2 - y * x2)

    # -------------------------------------------------------------------------
    # Length
    # -------------------------------------------------------------------------

    def square_magnitude(self) -> float:
        """Sum of the squared components (x² + y² + z²)."""
        return norm2(self._v)

    def magnitude(self) -> float:
        """Euclidean length."""
        return float(np.sqrt(self.square_magnitude()))

    def normalize(self) -> None:
        """
        Scale this vector to unit length in place.

        Raises:
            ValueError: If the vector has zero magnitude.
        """
        mag = self.magnitude()
        if mag == 0.0:
            raise ValueError("attempted to normalize a zero vector")
        self._v /= mag

    def normalized(self) -> "Vector3":
        """Return a unit-length copy (same failure mode as normalize)."""
        out = self.copy()
        out.normalize()
        return out

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.sub(other)

    def __iadd__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        self._v += other._v
        return self

    def __isub__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        self._v -= other._v
        return self

    def __neg__(self) -> "Vector3":
        return Vector3.from_array(-self._v)

    def __mul__(self, other):
        # vector * vector is the scalar product, vector * scalar scales
        if isinstance(other, Vector3):
            return self.scalar_product(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __imul__(self, other):
        if not isinstance(other, numbers.Real):
            return NotImplemented
        self._v *= float(other)
        return self

    def __mod__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.vector_product(other)

    def __imod__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        self._v[:] = self.vector_product(other)._v
        return self
