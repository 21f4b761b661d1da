# renderer/integrator.py
import math

from spheretracer.core.interval import Interval
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3
from spheretracer.geometry.hittable import Hittable

# Lower bound on hit distance so a scattered ray does not re-hit the
# surface it starts on.
SELF_INTERSECTION_EPSILON = 0.001

SKY_WHITE = Vector3(1.0, 1.0, 1.0)
SKY_BLUE = Vector3(0.5, 0.7, 1.0)


def background_color(ray: Ray) -> Vector3:
    """
    Vertical white-to-blue gradient seen by rays that escape the scene.
    """
    unit_direction = ray.direction.normalize()
    a = 0.5 * (unit_direction.y + 1.0)
    return SKY_WHITE * (1.0 - a) + SKY_BLUE * a


def ray_color(ray: Ray, depth: int, world: Hittable, rng) -> Vector3:
    """
    Returns the color seen along the ray. If the ray hits an object, the
    material scatter is followed recursively for at most 'depth' bounces.
    """
    if depth <= 0:
        return Vector3(0, 0, 0)  # Exceeded bounce budget

    rec = world.hit(ray, Interval(SELF_INTERSECTION_EPSILON, math.inf))
    if rec is None:
        return background_color(ray)

    scatter = rec.material.scatter(ray, rec, rng)
    if scatter is None:
        return Vector3(0, 0, 0)
    return scatter.attenuation * ray_color(scatter.scattered, depth - 1, world, rng)
