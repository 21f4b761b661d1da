# scenes.py
"""Scene builders. Each returns a (world, camera) pair ready to render."""
from typing import Callable, Dict, Optional, Tuple

from spheretracer.camera.camera import Camera
from spheretracer.core.utils import make_rng, random_double
from spheretracer.core.vector import Vector3
from spheretracer.geometry.sphere import Sphere
from spheretracer.geometry.world import HittableList
from spheretracer.materials.dielectric import Dielectric
from spheretracer.materials.lambertian import Lambertian
from spheretracer.materials.metal import Metal
from spheretracer.materials.presets import DielectricPresets, DiffusePresets, MetalPresets

Scene = Tuple[HittableList, Camera]


def quick_scene(seed: Optional[int] = None) -> Scene:
    """
    A single diffuse sphere resting on a large ground sphere, seen from the
    origin looking down -Z.
    """
    world = HittableList()
    world.add(Sphere(Vector3(0, 0, -1), 0.5, Lambertian(Vector3(0.5, 0.5, 0.5))))
    world.add(Sphere(Vector3(0, -100.5, -1), 100, DiffusePresets.gray()))

    camera = Camera(aspect_ratio=16.0 / 9.0, image_width=400,
                    samples_per_pixel=100, max_depth=50, seed=seed)
    return world, camera


def materials_scene(seed: Optional[int] = None) -> Scene:
    """
    One sphere of each material: a hollow glass sphere on the left, diffuse
    in the middle and fuzzy metal on the right.
    """
    world = HittableList()
    world.add(Sphere(Vector3(0.0, -100.5, -1.0), 100.0, DiffusePresets.ground()))
    world.add(Sphere(Vector3(0.0, 0.0, -1.2), 0.5, DiffusePresets.blue()))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.5, DielectricPresets.glass()))
    world.add(Sphere(Vector3(-1.0, 0.0, -1.0), 0.4, DielectricPresets.air_bubble()))
    world.add(Sphere(Vector3(1.0, 0.0, -1.0), 0.5, MetalPresets.brushed()))

    camera = Camera(aspect_ratio=16.0 / 9.0, image_width=400,
                    samples_per_pixel=100, max_depth=50,
                    vfov=20, lookfrom=(-2, 2, 1), lookat=(0, 0, -1), vup=(0, 1, 0),
                    defocus_angle=10.0, focus_dist=3.4, seed=seed)
    return world, camera


def final_scene(seed: Optional[int] = None) -> Scene:
    """
    A field of small random spheres around three large ones. The layout is
    drawn from its own generator so the same seed gives the same scene.
    """
    rng = make_rng(seed)
    world = HittableList()
    world.add(Sphere(Vector3(0, -1000, 0), 1000, DiffusePresets.gray()))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose_mat = random_double(rng)
            center = Vector3(a + 0.9 * random_double(rng), 0.2, b + 0.9 * random_double(rng))

            if (center - Vector3(4, 0.2, 0)).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                albedo = Vector3.random(rng) * Vector3.random(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                albedo = Vector3.random(rng, 0.5, 1)
                material = Metal(albedo, random_double(rng, 0, 0.5))
            else:
                material = DielectricPresets.glass()
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Vector3(0, 1, 0), 1.0, Dielectric(1.5)))
    world.add(Sphere(Vector3(-4, 1, 0), 1.0, DiffusePresets.brown()))
    world.add(Sphere(Vector3(4, 1, 0), 1.0, MetalPresets.mirror()))

    camera = Camera(aspect_ratio=16.0 / 9.0, image_width=400,
                    samples_per_pixel=50, max_depth=50,
                    vfov=20, lookfrom=(13, 2, 3), lookat=(0, 0, 0), vup=(0, 1, 0),
                    defocus_angle=0.6, focus_dist=10.0, seed=seed)
    return world, camera


SCENES: Dict[str, Callable[[Optional[int]], Scene]] = {
    "quick": quick_scene,
    "materials": materials_scene,
    "final": final_scene,
}


def build_scene(name: str, seed: Optional[int] = None) -> Scene:
    if name not in SCENES:
        raise ValueError(f"Unknown scene: {name}")
    return SCENES[name](seed)
