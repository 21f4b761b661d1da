# materials/dielectric.py
import math

from spheretracer.core.ray import Ray
from spheretracer.core.utils import reflect, refract
from spheretracer.core.vector import Vector3
from spheretracer.geometry.hittable import HitRecord
from spheretracer.materials.material import Material, ScatterRecord


class Dielectric(Material):
    """
    Clear refractive material (glass, water). Chooses between reflection and
    refraction per ray; never absorbs and never tints.
    """
    def __init__(self, refraction_index: float):
        if refraction_index <= 0:
            raise ValueError(
                f"Refraction index = {refraction_index} must be positive."
            )
        self.refraction_index = refraction_index

    def scatter(self, ray_in: Ray, rec: HitRecord, rng) -> ScatterRecord:
        attenuation = Vector3(1.0, 1.0, 1.0)  # Glass doesn't absorb light

        # Entering the medium from outside vs leaving it
        ri = 1.0 / self.refraction_index if rec.front_face else self.refraction_index

        unit_direction = ray_in.direction.normalize()
        cos_theta = min(-unit_direction.dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ri * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ri) > rng.random():
            direction = reflect(unit_direction, rec.normal)
        else:
            direction = refract(unit_direction, rec.normal, ri)

        return ScatterRecord(attenuation, Ray(rec.p, direction))

    def __repr__(self) -> str:
        return f"Dielectric({self.refraction_index})"


def reflectance(cosine: float, eta_ratio: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - eta_ratio) / (1.0 + eta_ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cosine), 5)
