# geometry/hittable.py
from typing import Optional

from spheretracer.core.interval import Interval
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3


class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    def __init__(self, p: Vector3 = None, normal: Vector3 = None,
                 t: float = 0, front_face: bool = True, material=None):
        self.p = p                    # Intersection point
        self.normal = normal          # Unit normal, always against the ray
        self.t = t                    # Ray parameter at intersection
        self.front_face = front_face  # Whether the ray came from outside
        self.material = material      # Borrowed from the surface that was hit

    def set_face_normal(self, ray: Ray, outward_normal: Vector3):
        """
        Ensures that the normal always points against the ray.
        outward_normal must be unit length.
        """
        self.front_face = ray.direction.dot(outward_normal) < 0
        self.normal = outward_normal if self.front_face else -outward_normal

    def __repr__(self) -> str:
        return (f"HitRecord(t={self.t}, p={self.p!r}, normal={self.normal!r}, "
                f"front_face={self.front_face})")


class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
