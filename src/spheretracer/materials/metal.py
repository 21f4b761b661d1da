# materials/metal.py
from typing import Optional

from spheretracer.core.ray import Ray
from spheretracer.core.utils import random_unit_vector, reflect
from spheretracer.core.vector import Vector3
from spheretracer.geometry.hittable import HitRecord
from spheretracer.materials.material import Material, ScatterRecord


class Metal(Material):
    """
    Specular reflector. fuzz (capped at 1) jitters the mirror direction;
    0 is a perfect mirror.
    """
    def __init__(self, albedo: Vector3, fuzz: float = 0.0):
        self.albedo = albedo
        self.fuzz = min(fuzz, 1)

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> Optional[ScatterRecord]:
        # Reflecting the unit direction keeps the fuzz radius scale-independent.
        reflected = reflect(ray_in.direction.normalize(), rec.normal)
        scattered = Ray(rec.p, reflected + random_unit_vector(rng) * self.fuzz)

        if scattered.direction.dot(rec.normal) > 0:
            return ScatterRecord(self.albedo, scattered)

        return None  # Absorb the ray if it does not scatter forward

    def __repr__(self) -> str:
        return f"Metal({self.albedo!r}, fuzz={self.fuzz})"
