"""Recursive Monte Carlo ray tracer for scenes made of spheres.

Subpackages:
    core: Vector math, rays, intervals and random sampling helpers
    geometry: Hittable surfaces (spheres) and the scene aggregate
    materials: Lambertian, metal and dielectric scattering models
    camera: Look-at camera with defocus blur that drives the render
    renderer: Radiance integrator, gamma mapping and pixel sinks
"""

__version__ = "0.1.0"
