"""Default world map and pin images, built once per process."""

import logging
import threading
from pathlib import Path
from typing import Optional

from PIL import Image, ImageDraw, ImageFilter

from .config import AppConfig, get_config
from .models.coordinate import Coordinate
from .models.crop import CropOption
from .utils.geo_utils import MERCATOR
from .utils.image_utils import decode_image

logger = logging.getLogger(__name__)

OCEAN_COLOR = (170, 211, 223, 255)
GRATICULE_COLOR = (140, 184, 200, 255)
EQUATOR_COLOR = (110, 158, 178, 255)
PIN_COLOR = (214, 48, 49, 255)
PIN_OUTLINE_COLOR = (120, 20, 20, 255)
SHADOW_COLOR = (0, 0, 0, 110)

# Pins are drawn oversampled and scaled down for smooth edges.
_SUPERSAMPLE = 4
PIN_SIZE = (25, 41)


class AssetError(RuntimeError):
    """Raised when a default asset cannot be decoded."""


def render_world_map(size: tuple[int, int]) -> Image.Image:
    """Render a Mercator graticule map: parallels and meridians every 15 degrees."""
    width, height = size
    image = Image.new("RGBA", size, OCEAN_COLOR)
    draw = ImageDraw.Draw(image)

    for lon in range(-180, 181, 15):
        x = MERCATOR.convert(Coordinate(latitude=0, longitude=lon), width, height).x
        draw.line([(x, 0), (x, height)], fill=GRATICULE_COLOR, width=1)

    for lat in range(-75, 76, 15):
        y = MERCATOR.convert(Coordinate(latitude=lat, longitude=0), width, height).y
        color = EQUATOR_COLOR if lat == 0 else GRATICULE_COLOR
        draw.line([(0, y), (width, y)], fill=color, width=2 if lat == 0 else 1)

    return image


def render_pin_body(size: tuple[int, int] = PIN_SIZE) -> Image.Image:
    """Render a teardrop pin whose tip is the bottom center pixel."""
    w, h = size[0] * _SUPERSAMPLE, size[1] * _SUPERSAMPLE
    image = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)

    outline = _SUPERSAMPLE * 2
    radius = w // 2 - outline
    cx, cy = w // 2, radius + outline
    draw.polygon(
        [(cx - radius * 0.8, cy + radius * 0.6), (cx + radius * 0.8, cy + radius * 0.6), (cx, h - 1)],
        fill=PIN_OUTLINE_COLOR,
    )
    draw.ellipse([cx - radius - outline, cy - radius - outline, cx + radius + outline, cy + radius + outline],
                 fill=PIN_OUTLINE_COLOR)
    draw.polygon(
        [(cx - radius * 0.7, cy + radius * 0.6), (cx + radius * 0.7, cy + radius * 0.6), (cx, h - outline * 2)],
        fill=PIN_COLOR,
    )
    draw.ellipse([cx - radius, cy - radius, cx + radius, cy + radius], fill=PIN_COLOR)
    dot = radius // 3
    draw.ellipse([cx - dot, cy - dot, cx + dot, cy + dot], fill=(255, 255, 255, 255))

    return image.resize(size, Image.Resampling.LANCZOS)


def render_pin_shadow(size: tuple[int, int] = PIN_SIZE, blur_radius: int = 2) -> Image.Image:
    """Render the pin's shadow, falling up and to the right of the tip.

    The image is twice the pin width so its bottom center still marks the
    pin tip.
    """
    pin_w, pin_h = size
    w, h = pin_w * 2, pin_h // 2 + blur_radius * 2
    image = Image.new("RGBA", (w, h), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    tip = (w // 2, h - blur_radius)
    head = (tip[0] + pin_w * 0.6, tip[1] - pin_h * 0.35)
    r = pin_w * 0.35
    draw.polygon([tip, (head[0] - r, head[1]), (head[0] + r * 0.3, head[1] + r * 0.8)], fill=SHADOW_COLOR)
    draw.ellipse([head[0] - r, head[1] - r * 0.6, head[0] + r, head[1] + r * 0.6], fill=SHADOW_COLOR)
    return image.filter(ImageFilter.GaussianBlur(radius=blur_radius))


def _load(path: Path, what: str) -> Image.Image:
    try:
        return decode_image(path.read_bytes())
    except (OSError, ValueError) as exc:
        raise AssetError(f"Cannot load {what} from {path}: {exc}") from exc


class DefaultAssets:
    """Lazily built default map and pin parts.

    Each asset is initialized at most once, even when first requested
    from several threads. The returned images are shared and must not be
    modified.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config
        self._lock = threading.Lock()
        self._map: Optional[Image.Image] = None
        self._pin_parts: Optional[tuple[Image.Image, ...]] = None

    @property
    def config(self) -> AppConfig:
        return self._config if self._config is not None else get_config()

    def world_map(self) -> Image.Image:
        """Return the default world map (Mercator projection)."""
        if self._map is None:
            with self._lock:
                if self._map is None:
                    self._map = self._build_map()
        return self._map

    def pin_parts(self) -> tuple[Image.Image, ...]:
        """Return the default pin parts: shadow, then body."""
        if self._pin_parts is None:
            with self._lock:
                if self._pin_parts is None:
                    self._pin_parts = self._build_pin_parts()
        return self._pin_parts

    def _build_map(self) -> Image.Image:
        cfg = self.config
        if cfg.map_path is not None:
            logger.info("Loading world map from %s", cfg.map_path)
            return _load(cfg.map_path, "world map")
        logger.debug("Rendering built-in world map at %dx%d", *cfg.default_map_size)
        return render_world_map(cfg.default_map_size)

    def _build_pin_parts(self) -> tuple[Image.Image, ...]:
        cfg = self.config
        if cfg.pin_paths:
            logger.info("Loading %d pin part(s) from configuration", len(cfg.pin_paths))
            return tuple(_load(path, "pin part") for path in cfg.pin_paths)
        return (render_pin_shadow(), render_pin_body())

    def standard_crop(self) -> CropOption:
        """Standard crop for the default map: a third of its size, 100px margin."""
        width, height = self.world_map().size
        min_width = max(width // 3, 1)
        min_height = max(height // 3, 1)
        return CropOption(
            bound=self.config.standard_crop_bound,
            min_width=min_width,
            min_height=min_height,
            preserve_ratio=min_height < min_width,
        )


_assets: Optional[DefaultAssets] = None
_assets_lock = threading.Lock()


def get_default_assets() -> DefaultAssets:
    """Get or create the process-wide default assets."""
    global _assets
    if _assets is None:
        with _assets_lock:
            if _assets is None:
                _assets = DefaultAssets()
    return _assets


def reset_default_assets() -> None:
    """Drop the cached assets so the next access rebuilds them."""
    global _assets
    with _assets_lock:
        _assets = None


def default_map() -> Image.Image:
    """Return the default world map (Mercator projection)."""
    return get_default_assets().world_map()


def default_pin() -> tuple[Image.Image, ...]:
    """Return the default pin parts (shadow, body)."""
    return get_default_assets().pin_parts()


def standard_crop() -> CropOption:
    """Return the standard crop for the default map."""
    return get_default_assets().standard_crop()


# Standard crop for the built-in 1920x1629 map.
STANDARD_CROP = CropOption(bound=100, min_width=640, min_height=543, preserve_ratio=True)
