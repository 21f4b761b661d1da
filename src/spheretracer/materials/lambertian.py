# materials/lambertian.py
from spheretracer.core.ray import Ray
from spheretracer.core.utils import random_on_hemisphere
from spheretracer.core.vector import Vector3
from spheretracer.geometry.hittable import HitRecord
from spheretracer.materials.material import Material, ScatterRecord


class Lambertian(Material):
    """
    Diffuse material. Always scatters, tinting the bounce by its reflectance.
    """

    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterRecord:
        """
        Scatter a ray uniformly over the hemisphere around the normal.
        """
        scatter_direction = random_on_hemisphere(rec.normal, rng)

        # If scatter_direction is degenerate, just use the normal.
        if scatter_direction.near_zero():
            scatter_direction = rec.normal

        return ScatterRecord(self.albedo, Ray(rec.p, scatter_direction))

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
