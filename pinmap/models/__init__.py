"""Data models for pin maps."""

from .coordinate import Coordinate, PixelPoint
from .crop import CropOption, Rectangle

__all__ = [
    "Coordinate",
    "PixelPoint",
    "CropOption",
    "Rectangle",
]
