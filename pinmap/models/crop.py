"""Crop configuration and pixel rectangle models."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CropOption(BaseModel):
    """Options for cropping the rendered map around its pins."""

    model_config = ConfigDict(frozen=True)

    bound: int = Field(
        default=100,
        ge=0,
        description="Minimum distance in pixels from any pin to the crop edge",
    )
    min_width: int = Field(..., gt=0, description="Minimum width of the cropped image")
    min_height: int = Field(..., gt=0, description="Minimum height of the cropped image")
    preserve_ratio: bool = Field(
        default=True,
        description="Keep the min_width:min_height ratio when the crop grows wider",
    )

    @model_validator(mode="after")
    def _check_ratio(self) -> "CropOption":
        if self.preserve_ratio and self.min_height >= self.min_width:
            raise ValueError(
                "min_height must be less than min_width when preserve_ratio is set "
                f"(got min_width={self.min_width}, min_height={self.min_height})"
            )
        return self

    @property
    def ratio(self) -> float:
        """Height-to-width ratio derived from the configured minimums."""
        return self.min_height / self.min_width


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned pixel rectangle; max edges are exclusive like Pillow boxes."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x

    @property
    def height(self) -> int:
        return self.max_y - self.min_y

    @property
    def box(self) -> tuple[int, int, int, int]:
        """Return (left, top, right, bottom) for ``Image.crop``."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def clamp(self, width: int, height: int) -> "Rectangle":
        """Clamp every edge into [0, width] x [0, height]."""
        return Rectangle(
            min_x=min(max(self.min_x, 0), width),
            min_y=min(max(self.min_y, 0), height),
            max_x=min(max(self.max_x, 0), width),
            max_y=min(max(self.max_y, 0), height),
        )
