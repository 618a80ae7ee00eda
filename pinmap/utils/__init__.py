"""Utility functions for pin maps."""

from .image_utils import (
    load_image,
    decode_image,
    save_image,
    paste_clipped,
)
from .geo_utils import (
    EQUIRECTANGULAR,
    MERCATOR,
    EquirectangularProjection,
    MercatorProjection,
    Projection,
    get_projection,
    project_all,
)

__all__ = [
    "load_image",
    "decode_image",
    "save_image",
    "paste_clipped",
    "EQUIRECTANGULAR",
    "MERCATOR",
    "EquirectangularProjection",
    "MercatorProjection",
    "Projection",
    "get_projection",
    "project_all",
]
