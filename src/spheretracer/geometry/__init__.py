from spheretracer.geometry.hittable import HitRecord, Hittable
from spheretracer.geometry.sphere import Sphere
from spheretracer.geometry.world import HittableList

__all__ = ["HitRecord", "Hittable", "Sphere", "HittableList"]
