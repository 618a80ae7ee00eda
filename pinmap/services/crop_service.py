"""Crop rectangle resolution around pinned points."""

import logging

from ..models.crop import CropOption, Rectangle

logger = logging.getLogger(__name__)


def _expand_span(lo: int, hi: int, minimum: int, limit: int) -> tuple[int, int]:
    """Grow [lo, hi] symmetrically to at least ``minimum``, within [0, limit].

    Whatever cannot be taken on one side because of the map edge is
    added to the other side. The result is shorter than ``minimum`` only
    when ``limit`` itself is.
    """
    size = hi - lo
    if size >= minimum:
        return lo, hi

    deficit = minimum - size
    lo -= deficit // 2
    hi += deficit - deficit // 2

    if lo < 0:
        hi += -lo
        lo = 0
    if hi > limit:
        lo = max(lo - (hi - limit), 0)
        hi = limit
    return lo, hi


def effective_min_height(width: int, crop: CropOption) -> int:
    """Minimum crop height for a crop of the given width.

    With ``preserve_ratio`` the height follows the width at the
    min_height:min_width ratio, but it is never below ``min_height``.
    """
    min_height = 0
    if crop.preserve_ratio:
        min_height = int(crop.ratio * width)
    return max(min_height, crop.min_height)


def resolve_crop(
    rect: Rectangle,
    crop: CropOption,
    map_width: int,
    map_height: int,
) -> Rectangle:
    """
    Expand a pin bounding rectangle into the final crop rectangle.

    Args:
        rect: Tight rectangle around the projected pins
        crop: Crop options (margin, minimum size, ratio)
        map_width: Width of the rendered map in pixels
        map_height: Height of the rendered map in pixels

    Returns:
        Rectangle inside [0, map_width] x [0, map_height]
    """
    # Margin, clamped per axis.
    with_margin = Rectangle(
        min_x=rect.min_x - crop.bound,
        min_y=rect.min_y - crop.bound,
        max_x=rect.max_x + crop.bound,
        max_y=rect.max_y + crop.bound,
    ).clamp(map_width, map_height)

    min_x, max_x = _expand_span(with_margin.min_x, with_margin.max_x, crop.min_width, map_width)

    min_height = effective_min_height(max_x - min_x, crop)
    min_y, max_y = _expand_span(with_margin.min_y, with_margin.max_y, min_height, map_height)

    resolved = Rectangle(min_x=min_x, min_y=min_y, max_x=max_x, max_y=max_y)
    logger.debug(
        "Resolved crop %s -> %s (min height %d) on %dx%d map",
        rect.box,
        resolved.box,
        min_height,
        map_width,
        map_height,
    )
    return resolved
