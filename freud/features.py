"""Image analysis commands that print their results."""

from __future__ import annotations

import os
from enum import Enum

from .image import Image, Pixel, read_image

_MAX_COMPONENT_SUM = 3 * 255


class Component(Enum):
    """A colour component of a pixel."""

    R = "R"
    G = "G"
    B = "B"


def _component_value(pixel: Pixel, component: Component) -> int:
    return getattr(pixel, component.name.lower())


def _raw_pixel(image: Image, offset: int) -> Pixel:
    chunk = image.data[offset:offset + 3]
    if len(chunk) < 3:
        raise ValueError(f"Erreur: l'image est trop petite (octet {offset})")
    return Pixel(*chunk)


def _print_rgb(label: str, pixel: Pixel) -> None:
    print(f"{label}: {pixel.r}, {pixel.g}, {pixel.b}")


def hello_world() -> str:
    """Print the greeting and return it."""
    message = "Hello World !"
    print(message, end="")
    return message


def dimension(path: str | os.PathLike[str]) -> tuple[int, int]:
    """Print and return the width and height of an image."""
    image = read_image(path)
    print(f"Dimension : {image.width}, {image.height}")
    return image.width, image.height


def first_pixel(path: str | os.PathLike[str]) -> Pixel:
    """Print and return the first three bytes of the image data."""
    pixel = _raw_pixel(read_image(path), 0)
    _print_rgb("first_pixel", pixel)
    return pixel


def tenth_pixel(path: str | os.PathLike[str]) -> Pixel:
    """Print and return the tenth pixel, counting three bytes per pixel."""
    pixel = _raw_pixel(read_image(path), 27)
    _print_rgb("tenth_pixel", pixel)
    return pixel


def second_line(path: str | os.PathLike[str]) -> Pixel:
    """Print and return the first pixel of the second row, at three bytes per pixel."""
    image = read_image(path)
    pixel = _raw_pixel(image, 3 * image.width)
    _print_rgb("second_line", pixel)
    return pixel


def print_pixel(path: str | os.PathLike[str], x: int, y: int) -> Pixel:
    """Print and return the pixel at (x, y)."""
    image = read_image(path)
    if not (0 <= x < image.width and 0 <= y < image.height):
        raise ValueError(f"Erreur: coordonnées hors limites ({x}, {y})")
    pixel = image.get_pixel(x, y)
    _print_rgb(f"print_pixel ({x}, {y})", pixel)
    return pixel


def min_pixel(path: str | os.PathLike[str]) -> tuple[int, int, Pixel]:
    """Print and return the first darkest pixel as (x, y, pixel)."""
    image = read_image(path)
    best_sum, best_x, best_y, best = _MAX_COMPONENT_SUM, 0, 0, Pixel(0, 0, 0)
    for x, y, pixel in image.pixels():
        total = pixel.r + pixel.g + pixel.b
        if total < best_sum:
            best_sum, best_x, best_y, best = total, x, y, pixel
    _print_rgb(f"min_pixel ({best_x}, {best_y})", best)
    return best_x, best_y, best


def max_pixel(path: str | os.PathLike[str]) -> tuple[int, int, Pixel]:
    """Print and return the first brightest pixel as (x, y, pixel)."""
    image = read_image(path)
    best_sum, best_x, best_y, best = -1, 0, 0, Pixel(0, 0, 0)
    for x, y, pixel in image.pixels():
        total = pixel.r + pixel.g + pixel.b
        if total > best_sum:
            best_sum, best_x, best_y, best = total, x, y, pixel
    _print_rgb(f"max_pixel ({best_x}, {best_y})", best)
    return best_x, best_y, best


def max_component(path: str | os.PathLike[str], component: str | Component) -> int:
    """Print the position of the highest value of a component and return the value."""
    chosen = Component(component)
    image = read_image(path)
    best, best_x, best_y = 0, 0, 0
    for x, y, pixel in image.pixels():
        value = _component_value(pixel, chosen)
        if value > best:
            best, best_x, best_y = value, x, y
    print(f"max_component {chosen.value} ({best_x}, {best_y}): {best}")
    return best


def min_component(path: str | os.PathLike[str], component: str | Component) -> int:
    """Print the position of the lowest value of a component and return the value."""
    chosen = Component(component)
    image = read_image(path)
    best, best_x, best_y = 256, 0, 0
    for x, y, pixel in image.pixels():
        value = _component_value(pixel, chosen)
        if value < best:
            best, best_x, best_y = value, x, y
    print(f"min_component {chosen.value} ({best_x}, {best_y}): {best}")
    return best


def stat_report(
    path: str | os.PathLike[str], output: str | os.PathLike[str]
) -> str:
    """Write the pixel and component statistics of an image to output."""
    max_x, max_y, _ = max_pixel(path)
    min_x, min_y, _ = min_pixel(path)
    max_r = max_component(path, Component.R)
    max_g = max_component(path, Component.G)
    max_b = max_component(path, Component.B)
    min_r = min_component(path, Component.R)
    min_b = min_component(path, Component.B)
    min_g = min_component(path, Component.G)
    report = (
        f"{max_x},{max_y}\n {min_x},{min_y}\n {max_r}\n {max_b}\n {max_g}\n"
        f" {min_r}\n {min_g}\n {min_b}\n"
    )
    with open(output, "w", encoding="utf-8") as stream:
        stream.write(report)
    return report