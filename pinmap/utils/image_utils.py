"""Image loading, saving and clipped compositing helpers."""

import io
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError


def load_image(path: Union[str, Path]) -> Image.Image:
    """Load an image from file."""
    return Image.open(path).convert("RGBA")


def decode_image(data: bytes) -> Image.Image:
    """Decode PNG/JPEG (or any Pillow-supported) bytes into an RGBA image."""
    try:
        with Image.open(io.BytesIO(data)) as image:
            return image.convert("RGBA")
    except UnidentifiedImageError as exc:
        raise ValueError(f"Cannot decode image data: {exc}") from exc


def save_image(image: Image.Image, path: Union[str, Path], quality: int = 95) -> None:
    """Save an image to file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.suffix.lower() in (".jpg", ".jpeg"):
        # Convert to RGB for JPEG
        if image.mode == "RGBA":
            background = Image.new("RGB", image.size, (255, 255, 255))
            background.paste(image, mask=image.split()[3])
            image = background
        image.save(path, quality=quality)
    else:
        image.save(path)


def paste_clipped(
    base: Image.Image,
    overlay: Image.Image,
    position: tuple[int, int],
) -> bool:
    """
    Alpha-composite overlay onto base in place, clipped to base bounds.

    ``Image.alpha_composite`` rejects negative destinations, so the
    overlay is cropped to the visible part first.

    Args:
        base: RGBA image to draw into
        overlay: RGBA image to draw
        position: (x, y) of the overlay's top-left corner, may be off-image

    Returns:
        True if any part of the overlay landed on the base
    """
    x, y = position
    left = max(x, 0)
    top = max(y, 0)
    right = min(x + overlay.width, base.width)
    bottom = min(y + overlay.height, base.height)
    if left >= right or top >= bottom:
        return False

    source = (left - x, top - y, right - x, bottom - y)
    if overlay.mode != "RGBA":
        overlay = overlay.convert("RGBA")
    base.alpha_composite(overlay, dest=(left, top), source=source)
    return True
