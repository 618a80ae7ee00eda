"""Draw ordering and bounding rectangle of projected pins."""

from typing import Iterable, Sequence

from ..models.coordinate import PixelPoint
from ..models.crop import Rectangle


class EmptyPointsError(ValueError):
    """Raised when a bounding rectangle is requested for no points."""


def draw_order_key(point: PixelPoint) -> tuple[int, int]:
    return (point.y, point.x)


def order_points(points: Iterable[PixelPoint]) -> list[PixelPoint]:
    """Sort points so that lower pins are drawn over upper pins.

    Points are ordered by ascending y, then ascending x. The relative
    order of exactly coincident points is unspecified.
    """
    return sorted(points, key=draw_order_key)


def bounds_of(points: Sequence[PixelPoint]) -> Rectangle:
    """Return the tight rectangle enclosing all points.

    Raises:
        EmptyPointsError: if ``points`` is empty
    """
    if not points:
        raise EmptyPointsError("Cannot compute bounds of an empty point list")

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return Rectangle(min_x=min(xs), min_y=min(ys), max_x=max(xs), max_y=max(ys))
