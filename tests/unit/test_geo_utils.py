"""Tests for map projections."""

import math

import pytest

from pinmap.models.coordinate import Coordinate, PixelPoint
from pinmap.utils.geo_utils import (
    EQUIRECTANGULAR,
    MERCATOR,
    EquirectangularProjection,
    MercatorProjection,
    Projection,
    get_projection,
    project_all,
    round_half_away,
)

MAP_W, MAP_H = 1920, 1629


class TestRoundHalfAway:
    @pytest.mark.parametrize(
        "value,expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (-0.5, -1), (-2.5, -3), (2.49, 2), (-2.49, -2), (0.0, 0)],
    )
    def test_rounding(self, value, expected):
        assert round_half_away(value) == expected


class TestMercatorProjection:
    """Test the Mercator coordinate-to-pixel conversion."""

    def test_implements_protocol(self):
        assert isinstance(MERCATOR, Projection)
        assert isinstance(MERCATOR, MercatorProjection)

    def test_west_edge_on_equator(self):
        point = MERCATOR.convert(Coordinate(latitude=0, longitude=-180), MAP_W, MAP_H)
        assert point.x == 0
        assert abs(point.y - MAP_H / 2) <= 1

    def test_east_edge(self):
        for lat in (-60.0, 0.0, 45.0):
            point = MERCATOR.convert(Coordinate(latitude=lat, longitude=180), MAP_W, MAP_H)
            assert point.x == MAP_W

    def test_even_height_equator_is_exact(self):
        point = MERCATOR.convert(Coordinate(latitude=0, longitude=0), 800, 600)
        assert point == PixelPoint(400, 300)

    def test_monotonic_in_longitude(self):
        xs = [
            MERCATOR.convert(Coordinate(latitude=12.5, longitude=lon), MAP_W, MAP_H).x
            for lon in range(-180, 181, 7)
        ]
        assert xs == sorted(xs)

    def test_north_is_up(self):
        north = MERCATOR.convert(Coordinate(latitude=60, longitude=0), MAP_W, MAP_H)
        south = MERCATOR.convert(Coordinate(latitude=-60, longitude=0), MAP_W, MAP_H)
        assert north.y < MAP_H / 2 < south.y

    def test_symmetric_about_equator(self):
        north = MERCATOR.convert(Coordinate(latitude=40, longitude=0), 1000, 1000)
        south = MERCATOR.convert(Coordinate(latitude=-40, longitude=0), 1000, 1000)
        assert north.y + south.y == 1000

    def test_known_city(self, san_francisco):
        lat_rad = math.radians(37.7775)
        n = math.log(math.tan(math.pi / 4 + lat_rad / 2))
        expected_y = MAP_H / 2 - MAP_W * n / (2 * math.pi)
        point = MERCATOR.convert(san_francisco, MAP_W, MAP_H)
        assert point.x == 307
        assert point.y == pytest.approx(expected_y, abs=0.5)

    def test_poles_are_finite_and_off_map(self):
        north = MERCATOR.convert(Coordinate(latitude=90, longitude=0), MAP_W, MAP_H)
        south = MERCATOR.convert(Coordinate(latitude=-90, longitude=0), MAP_W, MAP_H)
        assert north.y < 0
        assert south.y > MAP_H


class TestEquirectangularProjection:
    def test_implements_protocol(self):
        assert isinstance(EQUIRECTANGULAR, Projection)
        assert isinstance(EQUIRECTANGULAR, EquirectangularProjection)

    def test_corners(self):
        assert EQUIRECTANGULAR.convert(Coordinate(latitude=90, longitude=-180), 360, 180) == PixelPoint(0, 0)
        assert EQUIRECTANGULAR.convert(Coordinate(latitude=-90, longitude=180), 360, 180) == PixelPoint(360, 180)

    def test_linear_latitude(self):
        point = EQUIRECTANGULAR.convert(Coordinate(latitude=45, longitude=0), 360, 180)
        assert point == PixelPoint(180, 45)


class TestGetProjection:
    def test_by_name(self):
        assert get_projection("mercator") is MERCATOR
        assert get_projection(" Equirectangular ") is EQUIRECTANGULAR

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown projection"):
            get_projection("robinson")


class TestProjectAll:
    def test_keeps_input_order(self, world_coords):
        points = project_all(MERCATOR, world_coords, (MAP_W, MAP_H))
        assert len(points) == len(world_coords)
        assert points[0] == MERCATOR.convert(world_coords[0], MAP_W, MAP_H)
        assert points[-1] == MERCATOR.convert(world_coords[-1], MAP_W, MAP_H)

    def test_custom_projection(self):
        class Corner:
            name = "corner"

            def convert(self, coord, map_width, map_height):
                return PixelPoint(0, 0)

        assert isinstance(Corner(), Projection)
        points = project_all(Corner(), [Coordinate(latitude=1, longitude=1)], (10, 10))
        assert points == [PixelPoint(0, 0)]
