"""Geographic coordinate and pixel point models."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """A decimal latitude/longitude pair to be pinned on the map."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90, allow_inf_nan=False, description="Latitude coordinate")
    longitude: float = Field(..., ge=-180, le=180, allow_inf_nan=False, description="Longitude coordinate")

    @classmethod
    def parse(cls, text: str) -> "Coordinate":
        """Parse a ``"lat,lon"`` string such as ``"55.755833,37.617222"``."""
        parts = [part.strip() for part in text.split(",")]
        if len(parts) != 2:
            raise ValueError(f"Expected 'LAT,LON', got {text!r}")
        try:
            lat, lon = float(parts[0]), float(parts[1])
        except ValueError:
            raise ValueError(f"Expected numeric 'LAT,LON', got {text!r}") from None
        return cls(latitude=lat, longitude=lon)


@dataclass(frozen=True)
class PixelPoint:
    """An integer pixel position on the map image.

    Points may lie outside the image; drawing clips them and cropping
    clamps them.
    """

    x: int
    y: int
