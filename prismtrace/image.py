"""Raster images: a plain RGBA buffer and a progressively refined one."""

from __future__ import annotations

import struct
from typing import Optional

from prismtrace.color import Color

# Packed BMP file header followed by a BITMAPINFOHEADER.
_BMP_HEADER = struct.Struct("<2sIIIIiiHHIIiiII")


def _extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1]


class Image:
    """An 8-bit RGBA image whose pixels are written in gamma-encoded form."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        self._width = 0
        self._height = 0
        self._pixels = bytearray()
        if width or height:
            self.resize(width, height)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def pixels(self) -> bytes:
        """The raw RGBA buffer, row by row from the top."""
        return bytes(self._pixels)

    @property
    def sample_count(self) -> int:
        return 0

    def resize(self, width: int, height: int) -> None:
        if width == self._width and height == self._height:
            return
        self._width = width
        self._height = height
        size = width * height * 4
        if size <= len(self._pixels):
            del self._pixels[size:]
        else:
            self._pixels.extend(bytes(size - len(self._pixels)))
        self._pixels[3::4] = bytes([255]) * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(f"pixel ({x}, {y}) outside {self._width}x{self._height} image")
        return (x + y * self._width) * 4

    def set_pixel(self, x: int, y: int, color: Color, weight: int = 1, depth: float = 1) -> None:
        index = self._index(x, y)
        self._pixels[index : index + 3] = bytes(color.to_gamma().clamp().to_rgb8())

    def get_pixel(self, x: int, y: int) -> Color:
        """The stored byte values of a pixel, as a colour."""
        index = self._index(x, y)
        return Color(*(float(b) for b in self._pixels[index : index + 3]))

    def finish_frame(self, weight: int, depth: float) -> None:
        """Nothing to do for a plain image."""

    def write_ppm(self, filename: str) -> None:
        with open(filename, "w", encoding="ascii") as out:
            out.write(f"P3\n{self._width} {self._height}\n255\n")
            for index in range(0, len(self._pixels), 4):
                r, g, b = self._pixels[index : index + 3]
                out.write(f"{r} {g} {b}\n")

    def write_bmp(self, filename: str) -> None:
        """Write a 24-bit bottom-up BMP (rows are not padded)."""
        image_size = 3 * self._width * self._height
        header = _BMP_HEADER.pack(
            b"BM", 54 + image_size, 0, 54, 40, self._width, self._height,
            1, 24, 0, image_size, 0, 0, 0, 0,
        )
        body = bytearray()
        stride = self._width * 4
        for row in reversed(range(self._height)):
            line = self._pixels[row * stride : (row + 1) * stride]
            for index in range(0, len(line), 4):
                body += bytes((line[index + 2], line[index + 1], line[index]))
        with open(filename, "wb") as out:
            out.write(header)
            out.write(body)

    def write_png(self, filename: str) -> None:
        """Write through Pillow; the extension chooses the format."""
        from PIL import Image as PILImage

        picture = PILImage.frombytes("RGBA", (self._width, self._height), bytes(self._pixels))
        if _extension(filename).lower() in ("jpg", "jpeg"):
            picture = picture.convert("RGB")
        picture.save(filename)

    def save(self, filename: str) -> None:
        extension = _extension(filename)
        if extension == "ppm":
            self.write_ppm(filename)
        elif extension == "bmp":
            self.write_bmp(filename)
        elif extension in ("png", "tga", "jpg"):
            self.write_png(filename)
        else:
            raise ValueError("Unknown file extension")

    def clear(self) -> None:
        """Set every pixel to black, keeping alpha."""
        count = self._width * self._height
        for channel in range(3):
            self._pixels[channel::4] = bytes(count)


class IncrementalImage:
    """An image that averages successive frames, weighted by sample count."""

    def __init__(self) -> None:
        self._weight = 1
        self._depth = 0.0
        self._image = Image()
        self._pixels: list[Color] = []

    @property
    def width(self) -> int:
        return self._image.width

    @property
    def height(self) -> int:
        return self._image.height

    @property
    def pixels(self) -> bytes:
        return self._image.pixels

    @property
    def sample_count(self) -> int:
        return self._weight

    @property
    def depth(self) -> float:
        """Average bounce depth per sample."""
        return self._depth

    def resize(self, width: int, height: int) -> None:
        self._image.resize(width, height)
        size = width * height
        if size <= len(self._pixels):
            del self._pixels[size:]
        else:
            self._pixels.extend(Color() for _ in range(size - len(self._pixels)))

    def set_pixel(self, x: int, y: int, color: Color, weight: int = 1, depth: float = 1) -> None:
        index = x + y * self._image.width
        previous = float(self._weight)
        new = float(weight)
        pixel = (self._pixels[index] * previous + color * new) / (previous + new)
        self._pixels[index] = pixel
        self._image.set_pixel(x, y, pixel)

    def get_pixel(self, x: int, y: int) -> Color:
        return self._image.get_pixel(x, y)

    def finish_frame(self, weight: int, depth: float) -> None:
        self._weight += weight
        self._depth = (self._depth * self._weight + depth) / (self._weight + 1)

    def save(self, filename: str) -> None:
        self._image.save(filename)

    def clear(self) -> None:
        """Forget all accumulated samples."""
        self._image.clear()
        self._pixels.clear()
        self._weight = 0
        self._depth = 0.0


def as_canvas(image: Optional[Image | IncrementalImage]) -> Image | IncrementalImage:
    """The given image, or a fresh incremental one."""
    return image if image is not None else IncrementalImage()