"""Composition service for drawing pins onto the base map."""

import logging
from dataclasses import dataclass
from typing import Sequence

from PIL import Image

from ..models.coordinate import PixelPoint
from ..utils.image_utils import paste_clipped

logger = logging.getLogger(__name__)


@dataclass
class PlacedPinPart:
    """A pin part image positioned on the map."""

    layer: int
    point: PixelPoint
    position: tuple[int, int]  # Top-left corner in map pixels
    visible: bool


def anchor_position(part: Image.Image, point: PixelPoint) -> tuple[int, int]:
    """Top-left corner that puts the part's bottom center on ``point``."""
    return (point.x - part.width // 2, point.y - part.height)


class CompositionService:
    """Service for compositing pin parts onto a base map."""

    def __init__(self):
        self.placed_parts: list[PlacedPinPart] = []

    def draw(
        self,
        base_map: Image.Image,
        pin_parts: Sequence[Image.Image],
        ordered_points: Sequence[PixelPoint],
    ) -> Image.Image:
        """
        Draw every pin part at every point onto a copy of the base map.

        Layers are drawn map-wide in sequence, so all shadows (part 0)
        end up beneath all pin bodies (part 1).

        Args:
            base_map: World map image, left untouched
            pin_parts: Pin images, bottom layer first
            ordered_points: Points in draw order

        Returns:
            New RGBA image the size of the base map
        """
        output = Image.new("RGBA", base_map.size, (0, 0, 0, 0))
        output.alpha_composite(base_map if base_map.mode == "RGBA" else base_map.convert("RGBA"))

        self.placed_parts = []
        for layer, part in enumerate(pin_parts):
            if part.mode != "RGBA":
                part = part.convert("RGBA")
            for point in ordered_points:
                position = anchor_position(part, point)
                visible = paste_clipped(output, part, position)
                self.placed_parts.append(
                    PlacedPinPart(layer=layer, point=point, position=position, visible=visible)
                )

        hidden = sum(1 for placed in self.placed_parts if not placed.visible)
        if hidden:
            logger.debug("%d pin part(s) fell entirely outside the map", hidden)
        return output
