"""Shared test fixtures."""

import numpy as np
import pytest
from PIL import Image

from pinmap.assets import reset_default_assets
from pinmap.config import reset_config
from pinmap.models.coordinate import Coordinate
from pinmap.models.crop import CropOption


@pytest.fixture(autouse=True)
def isolated_defaults(monkeypatch):
    """Keep environment overrides and cached assets from leaking between tests."""
    for name in ("PINMAP_MAP_PATH", "PINMAP_PIN_PATHS", "PINMAP_PROJECTION"):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_default_assets()
    yield
    reset_config()
    reset_default_assets()


@pytest.fixture
def world_coords():
    """Nine reference coordinates spread over Europe, Australia and America."""
    return [
        Coordinate(latitude=42.1, longitude=19.1),  # Bar
        Coordinate(latitude=55.755833, longitude=37.617222),  # Moscow
        Coordinate(latitude=41.9097306, longitude=12.2558141),  # Rome
        Coordinate(latitude=-31.952222, longitude=115.858889),  # Perth
        Coordinate(latitude=42.441286, longitude=19.262892),  # Podgorica
        Coordinate(latitude=38.615925, longitude=-27.226598),  # Azores
        Coordinate(latitude=45.4628329, longitude=9.1076924),  # Milan
        Coordinate(latitude=43.7800607, longitude=11.170928),  # Florence
        Coordinate(latitude=37.7775, longitude=-122.416389),  # San Francisco
    ]


@pytest.fixture
def san_francisco():
    return Coordinate(latitude=37.7775, longitude=-122.416389)


@pytest.fixture
def standard_crop():
    return CropOption(bound=100, min_width=640, min_height=543, preserve_ratio=True)


@pytest.fixture
def gray_map():
    """400x300 opaque gray map."""
    return Image.new("RGBA", (400, 300), (128, 128, 128, 255))


@pytest.fixture
def red_part():
    """10x20 solid red pin part."""
    return Image.new("RGBA", (10, 20), (255, 0, 0, 255))


@pytest.fixture
def blue_part():
    """10x20 solid blue pin part."""
    return Image.new("RGBA", (10, 20), (0, 0, 255, 255))


@pytest.fixture
def half_alpha_part():
    """4x4 white pin part at 50% opacity."""
    return Image.new("RGBA", (4, 4), (255, 255, 255, 128))


@pytest.fixture
def quadrant_map():
    """32x32 map with four colored quadrants."""
    arr = np.zeros((32, 32, 4), dtype=np.uint8)
    arr[:16, :16] = [255, 0, 0, 255]
    arr[:16, 16:] = [0, 255, 0, 255]
    arr[16:, :16] = [0, 0, 255, 255]
    arr[16:, 16:] = [255, 255, 255, 255]
    return Image.fromarray(arr)
