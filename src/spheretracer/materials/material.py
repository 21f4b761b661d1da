# materials/material.py
from typing import NamedTuple, Optional

from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3
from spheretracer.geometry.hittable import HitRecord


class ScatterRecord(NamedTuple):
    """Outcome of a scatter event that was not absorbed."""
    attenuation: Vector3
    scattered: Ray


class Material:
    """
    Abstract material class. Subclasses must implement scatter().
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterRecord]:
        """
        Computes the scattered ray and attenuation.
        Returns a ScatterRecord, or None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")
