"""Map projections from geographic coordinates to pixel positions."""

import math
from typing import Protocol, runtime_checkable

from ..models.coordinate import Coordinate, PixelPoint

# ln(tan(pi/4 + lat/2)) diverges at the poles; pulling latitude in keeps
# the result finite (far outside the map) instead of raising.
POLE_LATITUDE_LIMIT = 89.9999999


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero.

    ``round()`` uses banker's rounding, which would move pins on exact
    half-pixel boundaries.
    """
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@runtime_checkable
class Projection(Protocol):
    """Converts coordinates into a point on a map of the given size."""

    def convert(self, coord: Coordinate, map_width: int, map_height: int) -> PixelPoint:
        ...


class MercatorProjection:
    """Spherical Mercator projection over the full map width."""

    name = "mercator"

    @staticmethod
    def lat_rad(lat: float) -> float:
        return lat * math.pi / 180

    def n(self, lat: float) -> float:
        lat = max(-POLE_LATITUDE_LIMIT, min(POLE_LATITUDE_LIMIT, lat))
        return math.log(math.tan((math.pi / 4) + (self.lat_rad(lat) / 2)))

    def convert(self, coord: Coordinate, map_width: int, map_height: int) -> PixelPoint:
        """
        Convert a coordinate to a pixel point.

        Args:
            coord: Coordinate to convert
            map_width: Map width in pixels
            map_height: Map height in pixels

        Returns:
            PixelPoint, not clamped to the map
        """
        mw = float(map_width)
        mh = float(map_height)
        fx = (coord.longitude + 180) * (mw / 360)
        fy = (mh / 2) - (mw * self.n(coord.latitude) / (2 * math.pi))
        return PixelPoint(round_half_away(fx), round_half_away(fy))

    def __repr__(self) -> str:
        return "MercatorProjection()"


class EquirectangularProjection:
    """Plate carrée: latitude and longitude map linearly to pixels."""

    name = "equirectangular"

    def convert(self, coord: Coordinate, map_width: int, map_height: int) -> PixelPoint:
        fx = (coord.longitude + 180) * (map_width / 360)
        fy = (90 - coord.latitude) * (map_height / 180)
        return PixelPoint(round_half_away(fx), round_half_away(fy))

    def __repr__(self) -> str:
        return "EquirectangularProjection()"


MERCATOR = MercatorProjection()
EQUIRECTANGULAR = EquirectangularProjection()

PROJECTIONS: dict[str, Projection] = {
    MERCATOR.name: MERCATOR,
    EQUIRECTANGULAR.name: EQUIRECTANGULAR,
}


def get_projection(name: str) -> Projection:
    """Look up a built-in projection by name (case-insensitive)."""
    try:
        return PROJECTIONS[name.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown projection {name!r}; choose from: {', '.join(sorted(PROJECTIONS))}"
        ) from None


def project_all(
    projection: Projection,
    coords: list[Coordinate],
    map_size: tuple[int, int],
) -> list[PixelPoint]:
    """Project coordinates in input order."""
    width, height = map_size
    return [projection.convert(c, width, height) for c in coords]
