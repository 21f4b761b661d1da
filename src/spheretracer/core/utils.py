# core/utils.py
import math
from typing import Optional

import numpy as np

from spheretracer.core.vector import Vector3


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Returns the random generator threaded through camera and material calls.
    The same seed reproduces the same image.
    """
    return np.random.default_rng(seed)


def random_double(rng, lo: float = 0.0, hi: float = 1.0) -> float:
    return lo + (hi - lo) * rng.random()


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def random_unit_vector(rng) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    Points too close to the origin are rejected so normalizing stays finite.
    """
    while True:
        p = Vector3.random(rng, -1.0, 1.0)
        len_sq = p.length_squared()
        if 1e-160 < len_sq <= 1.0:
            return p / math.sqrt(len_sq)


def random_on_hemisphere(normal: Vector3, rng) -> Vector3:
    """
    Returns a random unit vector in the hemisphere around normal.
    """
    on_unit_sphere = random_unit_vector(rng)
    if on_unit_sphere.dot(normal) > 0.0:
        return on_unit_sphere
    return -on_unit_sphere


def random_in_unit_disk(rng) -> Vector3:
    """Random point (x, y, 0) strictly inside the unit disk."""
    while True:
        p = Vector3(rng.uniform(-1, 1), rng.uniform(-1, 1), 0.0)
        if p.length_squared() < 1.0:
            return p


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * (2 * v.dot(n))


def refract(uv: Vector3, n: Vector3, eta_ratio: float) -> Vector3:
    """
    Bends a unit direction through a surface with unit normal n by Snell's
    law. eta_ratio is the incident index over the transmitted index.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * eta_ratio
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel
