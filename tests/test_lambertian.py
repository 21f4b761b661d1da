"""Unit tests for the Lambertian (diffuse) material.

Tests cover:
- Scattering never absorbs
- Scattered directions stay in the normal's hemisphere
- Attenuation equals the albedo
"""

import pytest

from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3
from spheretracer.geometry.hittable import HitRecord
from spheretracer.materials.lambertian import Lambertian


def _hit_on_plane():
    return HitRecord(p=Vector3(1.0, 0.0, 2.0), normal=Vector3(0.0, 1.0, 0.0),
                     t=1.0, front_face=True)


class TestLambertianScatter:
    def test_never_absorbs(self, rng):
        material = Lambertian(Vector3(0.8, 0.3, 0.3))
        ray_in = Ray(Vector3(0.0, 1.0, 0.0), Vector3(1.0, -1.0, 2.0))
        for _ in range(300):
            assert material.scatter(ray_in, _hit_on_plane(), rng) is not None

    def test_direction_in_hemisphere(self, rng):
        material = Lambertian(Vector3(0.5, 0.5, 0.5))
        rec = _hit_on_plane()
        for _ in range(300):
            result = material.scatter(Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), rec, rng)
            assert result.scattered.direction.dot(rec.normal) >= 0.0
            assert result.scattered.direction.length() == pytest.approx(1.0)

    def test_scattered_ray_starts_at_hit_point(self, rng):
        rec = _hit_on_plane()
        result = Lambertian(Vector3(0.5, 0.5, 0.5)).scatter(
            Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), rec, rng)
        assert result.scattered.origin == rec.p

    def test_attenuation_is_albedo(self, rng):
        albedo = Vector3(0.1, 0.2, 0.5)
        result = Lambertian(albedo).scatter(
            Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), _hit_on_plane(), rng)
        assert result.attenuation == albedo

    def test_record_unpacks(self, scripted_rng):
        rng = scripted_rng(uniform=[0.0, 1.0, 0.0])
        attenuation, scattered = Lambertian(Vector3(1.0, 1.0, 1.0)).scatter(
            Ray(Vector3(0, 1, 0), Vector3(0, -1, 0)), _hit_on_plane(), rng)
        assert scattered.direction == Vector3(0.0, 1.0, 0.0)
        assert attenuation == Vector3(1.0, 1.0, 1.0)
