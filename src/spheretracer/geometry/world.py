# geometry/world.py
from typing import Iterator, List, Optional

from spheretracer.core.interval import Interval
from spheretracer.core.ray import Ray
from spheretracer.geometry.hittable import Hittable, HitRecord


class HittableList(Hittable):
    """
    A list of Hittable objects. hit() scans every member and reports the
    closest intersection; there is no acceleration structure, so each query
    costs O(n).
    """
    def __init__(self, obj: Optional[Hittable] = None):
        self.objects: List[Hittable] = []
        if obj is not None:
            self.add(obj)

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self.objects)

    def hit(self, ray: Ray, ray_t: Interval) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = ray_t.max
        for obj in self.objects:
            # Later objects must be strictly closer to replace the current best.
            rec = obj.hit(ray, Interval(ray_t.min, closest_so_far))
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
