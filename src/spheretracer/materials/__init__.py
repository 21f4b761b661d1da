from spheretracer.materials.dielectric import Dielectric, reflectance
from spheretracer.materials.lambertian import Lambertian
from spheretracer.materials.material import Material, ScatterRecord
from spheretracer.materials.metal import Metal
from spheretracer.materials.presets import DielectricPresets, DiffusePresets, MetalPresets

__all__ = [
    "Material",
    "ScatterRecord",
    "Lambertian",
    "Metal",
    "Dielectric",
    "reflectance",
    "MetalPresets",
    "DielectricPresets",
    "DiffusePresets",
]
