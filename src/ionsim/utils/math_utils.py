"""
Mathematical Utilities
======================

3-vectors for laser geometry.

Polarization and propagation directions are stored as ``Vec3`` named tuples
with components ``(x, y, z)``. Being tuples they are immutable and compare by
value, so two lasers built from the same geometry compare equal.

Functions:
    - as_vec3: Coerce sequences, arrays or x/y/z objects to Vec3
    - norm: Euclidean norm
    - dot: Scalar product
    - normalize: Rescale to unit length

Example
-------
>>> eps = normalize(Vec3(1, 1, 0))   # (x̂ + ŷ)/√2
>>> dot(eps, Z_HAT)
0.0
"""

from numbers import Real
from typing import NamedTuple

import numpy as np


class Vec3(NamedTuple):
    """Cartesian 3-vector with named components."""
    x: float
    y: float
    z: float


X_HAT = Vec3(1.0, 0.0, 0.0)
Y_HAT = Vec3(0.0, 1.0, 0.0)
Z_HAT = Vec3(0.0, 0.0, 1.0)


def as_vec3(v) -> Vec3:
    """
    Convert ``v`` to a Vec3 of floats.

    Parameters
    ----------
    v : Vec3, sequence, np.ndarray or object with x, y, z attributes
        Three real components.

    Returns
    -------
    Vec3

    Raises
    ------
    ValueError
        If ``v`` does not have exactly three components.
    TypeError
        If a component is not a real number.
    """
    if isinstance(v, Vec3):
        components = tuple(v)
    elif all(hasattr(v, name) for name in Vec3._fields):
        components = (v.x, v.y, v.z)
    elif isinstance(v, np.ndarray):
        if v.shape != (3,):
            raise ValueError(f"Expected an array of shape (3,), got shape {v.shape}")
        components = tuple(v.tolist())
    else:
        components = tuple(v)

    if len(components) != 3:
        raise ValueError(f"Expected 3 components (x, y, z), got {len(components)}: {v!r}")
    for comp in components:
        if isinstance(comp, bool) or not isinstance(comp, Real):
            raise TypeError(f"Vector components must be real numbers, got {comp!r} in {v!r}")
    return Vec3(*(float(comp) for comp in components))


def norm(v) -> float:
    """Euclidean norm |v|."""
    return float(np.linalg.norm(np.asarray(tuple(v), dtype=float)))


def dot(a, b) -> float:
    """Scalar product a·b."""
    return float(np.dot(np.asarray(tuple(a), dtype=float), np.asarray(tuple(b), dtype=float)))


def normalize(v) -> Vec3:
    """
    Return v/|v| as a Vec3.

    Raises
    ------
    ValueError
        If ``v`` is the zero vector.
    """
    vec = as_vec3(v)
    length = norm(vec)
    if length == 0:
        raise ValueError("Cannot normalize the zero vector")
    return Vec3(*(comp / length for comp in vec))
