from spheretracer.core.interval import Interval
from spheretracer.core.ray import Ray
from spheretracer.core.utils import (
    degrees_to_radians,
    make_rng,
    random_double,
    random_in_unit_disk,
    random_on_hemisphere,
    random_unit_vector,
    reflect,
    refract,
)
from spheretracer.core.vector import Vector3

__all__ = [
    "Vector3",
    "Ray",
    "Interval",
    "make_rng",
    "random_double",
    "random_unit_vector",
    "random_on_hemisphere",
    "random_in_unit_disk",
    "reflect",
    "refract",
    "degrees_to_radians",
]
