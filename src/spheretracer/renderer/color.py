# renderer/color.py
import math
from typing import Tuple

from spheretracer.core.interval import Interval
from spheretracer.core.vector import Vector3

INTENSITY = Interval(0.000, 0.999)


def linear_to_gamma(linear_component: float) -> float:
    """
    Gamma 2 transform. Non-positive and NaN inputs map to 0.
    """
    if linear_component > 0:
        return math.sqrt(linear_component)
    return 0.0


def to_bytes(pixel_color: Vector3) -> Tuple[int, int, int]:
    """
    Converts a linear color to gamma-corrected byte values in [0, 255].
    """
    r = linear_to_gamma(pixel_color.x)
    g = linear_to_gamma(pixel_color.y)
    b = linear_to_gamma(pixel_color.z)
    return (
        int(256 * INTENSITY.clamp(r)),
        int(256 * INTENSITY.clamp(g)),
        int(256 * INTENSITY.clamp(b)),
    )


def format_color(pixel_color: Vector3) -> str:
    """One PPM pixel line, without the trailing newline."""
    return "%d %d %d" % to_bytes(pixel_color)
