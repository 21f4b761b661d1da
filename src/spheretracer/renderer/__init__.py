from spheretracer.renderer.color import format_color, linear_to_gamma, to_bytes
from spheretracer.renderer.image_writer import (
    ImageBuffer,
    ImageWriteError,
    PixelSink,
    PPMFileWriter,
    PPMWriter,
)
from spheretracer.renderer.integrator import background_color, ray_color

__all__ = [
    "ray_color",
    "background_color",
    "linear_to_gamma",
    "to_bytes",
    "format_color",
    "PixelSink",
    "PPMWriter",
    "PPMFileWriter",
    "ImageBuffer",
    "ImageWriteError",
]
