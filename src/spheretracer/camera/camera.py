# camera/camera.py
"""Look-at camera with defocus blur that renders a world to a pixel sink.

The camera is configured through constructor arguments (or by editing the
public attributes), then ``initialize()`` derives the image height, the
orthonormal basis (u, v, w), the viewport pixel grid and the defocus disk.
``render()`` calls ``initialize()`` itself.

Example:
    >>> camera = Camera(aspect_ratio=16 / 9, image_width=400, seed=7)
    >>> camera.render(world, PPMFileWriter("image.ppm"))
"""
import math
import sys
from typing import Optional, Sequence, TextIO, Union

from spheretracer.core.ray import Ray
from spheretracer.core.utils import degrees_to_radians, make_rng, random_in_unit_disk
from spheretracer.core.vector import Vector3
from spheretracer.geometry.hittable import Hittable
from spheretracer.renderer.image_writer import ImageWriteError, PixelSink, PPMWriter
from spheretracer.renderer.integrator import ray_color

VectorLike = Union[Vector3, Sequence[float]]


def _as_vector(v: VectorLike) -> Vector3:
    if isinstance(v, Vector3):
        return v
    x, y, z = v
    return Vector3(float(x), float(y), float(z))


class Camera:
    def __init__(self, aspect_ratio: float = 1.0, image_width: int = 100,
                 samples_per_pixel: int = 10, max_depth: int = 10,
                 vfov: float = 90.0,
                 lookfrom: VectorLike = (0.0, 0.0, 0.0),
                 lookat: VectorLike = (0.0, 0.0, -1.0),
                 vup: VectorLike = (0.0, 1.0, 0.0),
                 defocus_angle: float = 0.0, focus_dist: float = 10.0,
                 seed: Optional[int] = None):
        self.aspect_ratio = aspect_ratio        # Width over height
        self.image_width = image_width          # Rendered width in pixels
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth              # Ray bounce limit
        self.vfov = vfov                        # Vertical field of view in degrees
        self.lookfrom = _as_vector(lookfrom)
        self.lookat = _as_vector(lookat)
        self.vup = _as_vector(vup)
        self.defocus_angle = defocus_angle      # Cone angle of rays through each pixel, degrees
        self.focus_dist = focus_dist            # Distance to the plane of perfect focus
        self.seed = seed
        self.validate()

        self.image_height = None

    def validate(self):
        """
        Rejects settings that would break the render before any pixel is
        traced.
        """
        if self.image_width <= 0:
            raise ValueError(f"image_width = {self.image_width} must be positive.")
        if self.aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio = {self.aspect_ratio} must be positive.")
        if self.samples_per_pixel <= 0:
            raise ValueError(
                f"samples_per_pixel = {self.samples_per_pixel} must be positive."
            )
        if self.max_depth < 0:
            raise ValueError(f"max_depth = {self.max_depth} must not be negative.")
        if not 0 < self.vfov < 180:
            raise ValueError(f"vfov = {self.vfov} must lie strictly between 0 and 180 degrees.")
        if self.defocus_angle < 0:
            raise ValueError(f"defocus_angle = {self.defocus_angle} must not be negative.")
        if self.focus_dist <= 0:
            raise ValueError(f"focus_dist = {self.focus_dist} must be positive.")
        if (self.lookfrom - self.lookat).near_zero():
            raise ValueError("lookfrom and lookat must be different points.")
        if self.vup.cross(self.lookfrom - self.lookat).near_zero():
            raise ValueError("vup must not be parallel to the viewing direction.")

    def initialize(self):
        """Derives viewport and lens geometry from the current settings."""
        self.validate()

        self.image_height = max(1, int(self.image_width / self.aspect_ratio))
        self.pixel_samples_scale = 1.0 / self.samples_per_pixel
        self.center = self.lookfrom

        # Viewport dimensions at the focus plane
        theta = degrees_to_radians(self.vfov)
        h = math.tan(theta / 2)
        viewport_height = 2 * h * self.focus_dist
        viewport_width = viewport_height * (self.image_width / self.image_height)

        # Orthonormal camera basis
        self.w = (self.lookfrom - self.lookat).normalize()
        self.u = self.vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        # Vectors across the horizontal and down the vertical viewport edges
        viewport_u = self.u * viewport_width
        viewport_v = -self.v * viewport_height

        self.pixel_delta_u = viewport_u / self.image_width
        self.pixel_delta_v = viewport_v / self.image_height

        viewport_upper_left = (self.center
                               - self.w * self.focus_dist
                               - viewport_u / 2
                               - viewport_v / 2)
        self.pixel00_loc = viewport_upper_left + (self.pixel_delta_u + self.pixel_delta_v) * 0.5

        defocus_radius = self.focus_dist * math.tan(degrees_to_radians(self.defocus_angle / 2))
        self.defocus_disk_u = self.u * defocus_radius
        self.defocus_disk_v = self.v * defocus_radius

    def get_ray(self, i: int, j: int, rng) -> Ray:
        """
        Ray from the lens toward a random point inside pixel (i, j), where i
        is the column and j the row counted from the top.
        """
        offset = self.sample_square(rng)
        pixel_sample = (self.pixel00_loc
                        + self.pixel_delta_u * (i + offset.x)
                        + self.pixel_delta_v * (j + offset.y))

        ray_origin = self.center if self.defocus_angle <= 0 else self.defocus_disk_sample(rng)
        return Ray(ray_origin, pixel_sample - ray_origin)

    @staticmethod
    def sample_square(rng) -> Vector3:
        """Offset to a random point in the [-.5,-.5]-[+.5,+.5] unit square."""
        return Vector3(rng.random() - 0.5, rng.random() - 0.5, 0.0)

    def defocus_disk_sample(self, rng) -> Vector3:
        p = random_in_unit_disk(rng)
        return self.center + self.defocus_disk_u * p.x + self.defocus_disk_v * p.y

    def render_pixel(self, i: int, j: int, world: Hittable, rng) -> Vector3:
        """Averaged linear color of pixel (i, j). initialize() must have run."""
        pixel_color = Vector3(0, 0, 0)
        for _ in range(self.samples_per_pixel):
            ray = self.get_ray(i, j, rng)
            pixel_color = pixel_color + ray_color(ray, self.max_depth, world, rng)
        return pixel_color * self.pixel_samples_scale

    def render(self, world: Hittable, sink: Optional[PixelSink] = None,
               rng=None, status: Optional[TextIO] = sys.stderr):
        """
        Renders world row by row into sink (ASCII PPM on stdout by default).
        Progress lines go to status; pass None to silence them.
        """
        self.initialize()
        if sink is None:
            sink = PPMWriter()
        if rng is None:
            rng = make_rng(self.seed)

        try:
            sink.begin(self.image_width, self.image_height)
            for j in range(self.image_height):
                if status is not None:
                    print(f"Scanlines remaining: {self.image_height - j}", file=status)
                for i in range(self.image_width):
                    sink.write_pixel(self.render_pixel(i, j, world, rng))
            sink.end()
        except OSError as exc:
            self._abort(sink)
            if isinstance(exc, ImageWriteError):
                raise
            raise ImageWriteError(f"Error writing image: {exc}") from exc
        except BaseException:
            self._abort(sink)
            raise

        if status is not None:
            print("Done.", file=status)

    @staticmethod
    def _abort(sink: PixelSink):
        """Discards partial output without masking the error that stopped the render."""
        try:
            sink.abort()
        except Exception as exc:
            print(f"Could not discard partial image: {exc}", file=sys.stderr)
