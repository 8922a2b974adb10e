# MIT License (see LICENSE)
"""
Low-level numeric helpers shared by the vector and particle modules.

Vectors are stored as float64 numpy arrays of shape (3,); these helpers keep
the conversion and the scalar reductions in one place.
"""
from __future__ import annotations
import os

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Used throughout the codebase to ensure consistent numeric precision
    and allow tuple/list inputs for positions and velocities.
    """
    return np.array(x, dtype=np.float64)


def vec3(x) -> np.ndarray:
    """Convert a 3-element array-like to a float64 array, checking its shape."""
    arr = f64(x)
    if arr.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {arr.shape}")
    return arr


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 3D vector. Avoids sqrt for performance."""
    return float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def env_str(name: str, default: str) -> str:
    """Read a string setting from the environment, stripped and upper-cased."""
    return os.environ.get(name, default).strip().upper()
