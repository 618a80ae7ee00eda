"""Pin map services."""

from .composition_service import CompositionService, PlacedPinPart
from .crop_service import effective_min_height, resolve_crop
from .pin_service import EmptyPointsError, bounds_of, order_points

__all__ = [
    "CompositionService",
    "PlacedPinPart",
    "effective_min_height",
    "resolve_crop",
    "EmptyPointsError",
    "bounds_of",
    "order_points",
]
