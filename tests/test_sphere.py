"""Unit tests for sphere intersection.

Tests cover:
- Ray hitting sphere from outside (front face)
- Ray missing sphere
- Ray starting inside sphere (back face)
- Roots on the interval bounds being rejected
- Radius clamping and the material reference
"""

import math

import pytest

from spheretracer.core.interval import Interval
from spheretracer.core.ray import Ray
from spheretracer.core.vector import Vector3
from spheretracer.geometry.sphere import Sphere
from spheretracer.materials.lambertian import Lambertian

FORWARD = Interval(0.001, math.inf)


@pytest.fixture
def material():
    return Lambertian(Vector3(0.5, 0.5, 0.5))


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_direct_hit(self, material):
        """Ray from z=5 toward a unit sphere at the origin hits at t=4."""
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, material)
        rec = sphere.hit(Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0)), FORWARD)

        assert rec is not None
        assert rec.t == pytest.approx(4.0)
        assert rec.p.z == pytest.approx(1.0)
        assert rec.normal.z == pytest.approx(1.0)
        assert rec.front_face

    @pytest.mark.parametrize(
        "origin, center, radius",
        [
            ((0.0, 0.0, 0.0), (0.0, 0.0, -3.0), 0.5),
            ((1.0, 2.0, 3.0), (-4.0, 0.5, 7.0), 1.25),
            ((-10.0, 3.0, 0.0), (10.0, -3.0, 2.0), 4.0),
        ],
    )
    def test_hit_through_center(self, material, origin, center, radius):
        """A ray aimed at the center hits at distance-to-center minus radius."""
        origin = Vector3(*origin)
        center = Vector3(*center)
        direction = (center - origin).normalize()
        sphere = Sphere(center, radius, material)

        rec = sphere.hit(Ray(origin, direction), FORWARD)

        assert rec is not None
        assert rec.t == pytest.approx((center - origin).length() - radius)

    def test_unnormalized_direction(self, material):
        """t is measured in units of the direction vector."""
        sphere = Sphere(Vector3(0.0, 0.0, -5.0), 1.0, material)
        rec = sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -2.0)), FORWARD)
        assert rec.t == pytest.approx(2.0)
        assert rec.p.z == pytest.approx(-4.0)

    def test_miss(self, material):
        sphere = Sphere(Vector3(0.0, 0.0, -5.0), 1.0, material)
        assert sphere.hit(Ray(Vector3(0.0, 2.0, 0.0), Vector3(0.0, 0.0, -1.0)), FORWARD) is None

    def test_sphere_behind_ray(self, material):
        sphere = Sphere(Vector3(0.0, 0.0, 5.0), 1.0, material)
        assert sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), FORWARD) is None

    def test_inside_hits_back_face(self, material):
        """From inside, the far root is used and the normal faces the ray."""
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 2.0, material)
        rec = sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0)), FORWARD)

        assert rec is not None
        assert rec.t == pytest.approx(2.0)
        assert not rec.front_face
        assert rec.normal.x == pytest.approx(-1.0)
        assert rec.normal.length() == pytest.approx(1.0)

    def test_normal_opposes_ray(self, material, rng):
        sphere = Sphere(Vector3(0.0, 0.0, -3.0), 1.0, material)
        origin = Vector3(0.0, 0.0, 0.0)
        for _ in range(50):
            target = sphere.center + Vector3.random(rng, -0.5, 0.5)
            ray = Ray(origin, target - origin)
            rec = sphere.hit(ray, FORWARD)
            assert rec is not None
            assert rec.normal.dot(ray.direction) < 0
            assert rec.normal.length() == pytest.approx(1.0)

    def test_root_on_bound_rejected(self, material):
        """Hits exactly at the interval limits do not count."""
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, material)
        ray = Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0))
        assert sphere.hit(ray, Interval(0.001, 4.0)) is None
        assert sphere.hit(ray, Interval(4.0, 6.0)) is None

    def test_far_root_when_near_root_excluded(self, material):
        sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, material)
        ray = Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0))
        rec = sphere.hit(ray, Interval(4.5, 10.0))
        assert rec.t == pytest.approx(6.0)
        assert not rec.front_face


class TestSphereConstruction:
    def test_negative_radius_clamped(self, material):
        assert Sphere(Vector3(0.0, 0.0, 0.0), -2.0, material).radius == 0.0

    def test_zero_radius_never_hit(self, material):
        sphere = Sphere(Vector3(0.0, 0.0, -1.0), 0.0, material)
        assert sphere.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), FORWARD) is None

    def test_material_is_shared(self, material):
        a = Sphere(Vector3(0.0, 0.0, -2.0), 0.5, material)
        b = Sphere(Vector3(3.0, 0.0, -2.0), 0.5, material)
        rec = a.hit(Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, -1.0)), FORWARD)
        assert rec.material is material
        assert b.material is material
