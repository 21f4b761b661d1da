# renderer/image_writer.py
"""Pixel sinks that receive the rendered image one pixel at a time.

A render calls ``begin(width, height)`` once, ``write_pixel(color)`` for
every pixel in row-major order starting at the top scanline, and then
``end()``. If the render fails part way, ``abort()`` is called instead of
``end()``.
"""
import os
import sys
from typing import Optional, TextIO

import numpy as np
from PIL import Image

from spheretracer.core.vector import Vector3
from spheretracer.renderer.color import format_color, to_bytes


class ImageWriteError(OSError):
    """Raised when a sink cannot store the image it is given."""


class PixelSink:
    """
    Abstract destination for rendered pixels.
    """
    def begin(self, width: int, height: int):
        raise NotImplementedError("begin() must be implemented by subclasses.")

    def write_pixel(self, pixel_color: Vector3):
        raise NotImplementedError("write_pixel() must be implemented by subclasses.")

    def end(self):
        pass

    def abort(self):
        pass


class PPMWriter(PixelSink):
    """
    Writes an ASCII (P3) PPM image to a text stream.
    """
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def begin(self, width: int, height: int):
        self._write(f"P3\n{width} {height}\n255\n")

    def write_pixel(self, pixel_color: Vector3):
        self._write(format_color(pixel_color) + "\n")

    def end(self):
        try:
            self.stream.flush()
        except OSError as exc:
            raise ImageWriteError(f"Error flushing image: {exc}") from exc

    def _write(self, text: str):
        try:
            self.stream.write(text)
        except OSError as exc:
            raise ImageWriteError(f"Error writing image: {exc}") from exc


class PPMFileWriter(PPMWriter):
    """
    Writes a PPM file atomically: pixels go to a temporary sibling file that
    replaces the target only once the image is complete.
    """
    def __init__(self, path: str):
        super().__init__(stream=None)
        self.path = os.fspath(path)
        self.temp_path = self.path + ".part"
        self.stream = None

    def begin(self, width: int, height: int):
        try:
            self.stream = open(self.temp_path, "w", encoding="ascii")
        except OSError as exc:
            raise ImageWriteError(f"Cannot open {self.temp_path}: {exc}") from exc
        super().begin(width, height)

    def end(self):
        try:
            self.stream.close()
            os.replace(self.temp_path, self.path)
        except OSError as exc:
            self.abort()
            raise ImageWriteError(f"Error writing image to {self.path}: {exc}") from exc
        finally:
            self.stream = None

    def abort(self):
        if self.stream is not None:
            self.stream.close()
            self.stream = None
        if os.path.exists(self.temp_path):
            os.remove(self.temp_path)


class ImageBuffer(PixelSink):
    """
    Collects the gamma-mapped image in a (height, width, 3) uint8 array.
    """
    def __init__(self):
        self.pixels = None
        self._index = 0

    @property
    def width(self) -> int:
        return 0 if self.pixels is None else self.pixels.shape[1]

    @property
    def height(self) -> int:
        return 0 if self.pixels is None else self.pixels.shape[0]

    def begin(self, width: int, height: int):
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)
        self._index = 0

    def write_pixel(self, pixel_color: Vector3):
        row, col = divmod(self._index, self.pixels.shape[1])
        self.pixels[row, col] = to_bytes(pixel_color)
        self._index += 1

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def to_ppm(self) -> str:
        """The buffered image as P3 text, identical to what PPMWriter emits."""
        lines = ["P3", f"{self.width} {self.height}", "255"]
        for r, g, b in self.pixels.reshape(-1, 3):
            lines.append(f"{r} {g} {b}")
        return "\n".join(lines) + "\n"

    def save(self, path: str):
        """Save via Pillow; the format follows the file extension."""
        try:
            self.to_image().save(path)
        except OSError as exc:
            raise ImageWriteError(f"Error saving image to {path}: {exc}") from exc
