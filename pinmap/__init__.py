"""Put pins for geographic coordinates onto a world map image."""

from .assets import STANDARD_CROP, AssetError, default_map, default_pin, standard_crop
from .models import Coordinate, CropOption, PixelPoint, Rectangle
from .pins import map_pins, pins, place_pins
from .utils.geo_utils import EQUIRECTANGULAR, MERCATOR, Projection, get_projection

__version__ = "0.1.0"

__all__ = [
    "STANDARD_CROP",
    "AssetError",
    "default_map",
    "default_pin",
    "standard_crop",
    "Coordinate",
    "CropOption",
    "PixelPoint",
    "Rectangle",
    "map_pins",
    "pins",
    "place_pins",
    "EQUIRECTANGULAR",
    "MERCATOR",
    "Projection",
    "get_projection",
]
