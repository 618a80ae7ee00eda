"""Put coordinate pins onto a world map image."""

import logging
from typing import Optional, Sequence

from PIL import Image

from .assets import default_map, default_pin
from .models.coordinate import Coordinate
from .models.crop import CropOption
from .services.composition_service import CompositionService
from .services.crop_service import resolve_crop
from .services.pin_service import bounds_of, order_points
from .utils.geo_utils import MERCATOR, Projection, project_all

logger = logging.getLogger(__name__)


def place_pins(
    projection: Projection,
    world_map: Image.Image,
    pin_parts: Sequence[Image.Image],
    coords: Sequence[Coordinate],
    crop: Optional[CropOption] = None,
) -> Image.Image:
    """
    Return an image with the given coordinates marked as pins on a world map.

    Pin parts are drawn from the top of the map to the bottom so lower
    pins cover upper ones, one part at a time: every pin gets
    ``pin_parts[0]`` before any pin gets ``pin_parts[1]``. The coordinate
    is at the bottom center of each part.

    Args:
        projection: Projection the world map is drawn in
        world_map: Base map image, not modified
        pin_parts: Pin images, usually a shadow and the pin itself
        coords: Coordinates to mark
        crop: Crop options, or None to return the whole map

    Returns:
        Composed RGBA image, cropped around the pins when ``crop`` is set
    """
    map_width, map_height = world_map.size
    points = project_all(projection, list(coords), (map_width, map_height))
    ordered = order_points(points)

    composed = CompositionService().draw(world_map, pin_parts, ordered)
    logger.debug("Drew %d pin(s) with %d part(s) on %dx%d map", len(ordered), len(pin_parts), map_width, map_height)

    if crop is None:
        return composed
    if not ordered:
        logger.warning("No coordinates to crop around; returning the full map")
        return composed

    rect = resolve_crop(bounds_of(ordered), crop, map_width, map_height)
    return composed.crop(rect.box)


def map_pins(
    world_map: Image.Image,
    pin_parts: Sequence[Image.Image],
    coords: Sequence[Coordinate],
    crop: Optional[CropOption] = None,
) -> Image.Image:
    """Like place_pins with the Mercator projection; the map must use it too."""
    return place_pins(MERCATOR, world_map, pin_parts, coords, crop)


def pins(coords: Sequence[Coordinate], crop: Optional[CropOption] = None) -> Image.Image:
    """Like map_pins but with the default world map and pin images."""
    return map_pins(default_map(), default_pin(), coords, crop)
