# materials/presets.py
from spheretracer.core.vector import Vector3
from spheretracer.materials.dielectric import Dielectric
from spheretracer.materials.lambertian import Lambertian
from spheretracer.materials.metal import Metal


class MetalPresets:
    """Predefined metal materials."""

    @staticmethod
    def brushed() -> Metal:
        return Metal(Vector3(0.8, 0.6, 0.2), fuzz=1.0)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Vector3(0.7, 0.6, 0.5), fuzz=0.0)


class DielectricPresets:
    """Predefined dielectric materials."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def air_bubble() -> Dielectric:
        # Air inside glass: the ratio of air to the surrounding glass.
        return Dielectric(1.0 / 1.5)


class DiffusePresets:
    """Predefined Lambertian surfaces."""

    @staticmethod
    def ground() -> Lambertian:
        return Lambertian(Vector3(0.8, 0.8, 0.0))

    @staticmethod
    def gray() -> Lambertian:
        return Lambertian(Vector3(0.5, 0.5, 0.5))

    @staticmethod
    def blue() -> Lambertian:
        return Lambertian(Vector3(0.1, 0.2, 0.5))

    @staticmethod
    def brown() -> Lambertian:
        return Lambertian(Vector3(0.4, 0.2, 0.1))
