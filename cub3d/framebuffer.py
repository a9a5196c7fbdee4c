"""Pixel access on in-memory images."""

from __future__ import annotations

from .model import WIN_H, WIN_W, Image

_MASK = 0xFFFFFFFF


def new_image(width: int, height: int, fill: int = 0) -> Image:
    """Create an image of the given size with every pixel set to ``fill``."""
    return Image(width, height, [fill & _MASK] * (width * height))


def put_pixel(img: Image, x: int, y: int, color: int) -> None:
    """Write one pixel; points outside the window or the image are ignored."""
    if x < 0 or x >= WIN_W or y < 0 or y >= WIN_H:
        return
    if x >= img.width or y >= img.height:
        return
    img.pixels[y * img.width + x] = color & _MASK


def get_pixel(img: Image, x: int, y: int) -> int:
    """Read one pixel; raise IndexError outside the image."""
    if not (0 <= x < img.width and 0 <= y < img.height):
        raise IndexError(f"pixel ({x}, {y}) is outside the image")
    return img.pixels[y * img.width + x]


def clear_image(img: Image, color: int) -> None:
    """Fill the part of the image that lies inside the window with a colour."""
    cols = min(WIN_W, img.width)
    rows = min(WIN_H, img.height)
    value = color & _MASK
    for y in range(rows):
        start = y * img.width
        img.pixels[start:start + cols] = [value] * cols