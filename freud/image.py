"""Loading images and reading their pixels."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass

from PIL import Image as _PILImage

_CHANNELS_BY_MODE = {"L": 1, "LA": 2, "RGB": 3, "RGBA": 4}
_GRAYSCALE_MODES = {"1", "I", "I;16", "I;16B", "I;16L", "F"}


class ImageReadError(Exception):
    """Raised when an image file cannot be read."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__("Erreur: impossible de lire l'image")
        self.path = path


@dataclass(frozen=True)
class Pixel:
    """The red, green and blue components of one pixel."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class Image:
    """Raw interleaved 8-bit image data, row by row."""

    width: int
    height: int
    channels: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("image dimensions must not be negative")
        if not 1 <= self.channels <= 4:
            raise ValueError(f"unsupported channel count: {self.channels}")
        expected = self.width * self.height * self.channels
        if len(self.data) != expected:
            raise ValueError(
                f"image data holds {len(self.data)} bytes, expected {expected}"
            )

    def get_pixel(self, x: int, y: int) -> Pixel:
        """Return the pixel at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        offset = (y * self.width + x) * self.channels
        if self.channels >= 3:
            return Pixel(*self.data[offset:offset + 3])
        value = self.data[offset]
        return Pixel(value, value, value)

    def pixels(self) -> Iterator[tuple[int, int, Pixel]]:
        """Yield (x, y, pixel) for every pixel, row by row from the top left."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.get_pixel(x, y)


def read_image(path: str | os.PathLike[str]) -> Image:
    """Read an image file, keeping its own number of channels."""
    try:
        with _PILImage.open(path) as opened:
            opened.load()
            picture = opened
            if picture.mode in _GRAYSCALE_MODES:
                picture = picture.convert("L")
            elif picture.mode not in _CHANNELS_BY_MODE:
                has_alpha = (
                    "A" in picture.getbands() or "transparency" in picture.info
                )
                picture = picture.convert("RGBA" if has_alpha else "RGB")
            width, height = picture.size
            return Image(
                width=width,
                height=height,
                channels=_CHANNELS_BY_MODE[picture.mode],
                data=picture.tobytes(),
            )
    except (OSError, ValueError) as exc:
        raise ImageReadError(path) from exc