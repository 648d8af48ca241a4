"""Rendering Bounded Context - Value Objects.

Immutable inputs to map drawing: the base map raster, the icon catalog and
the font settings. All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Literal

import numpy as np
from numpy.typing import NDArray
from PIL import Image
from pydantic import BaseModel, ConfigDict, Field, model_validator

from domain.geo.value_objects import ProjectedBounds
from shared.numeric import round_half_up

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
POINTS_PER_INCH = 72.0
TEXT_COLOR = (0x10, 0x10, 0x10, 0xFF)  # Near-black, fully opaque


# ---------------------------------------------------------------------------
# FontSettings
# ---------------------------------------------------------------------------
class FontSettings(BaseModel):
    """Text rendering parameters (Value Object)."""

    dpi: float = Field(gt=0)
    size_pt: float = Field(gt=0)
    hinting: Literal["none", "full"] = "none"
    line_spacing: float = Field(default=1.5, gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def pixel_size(self) -> float:
        """Font size in pixels at the configured DPI."""
        return self.size_pt * self.dpi / POINTS_PER_INCH

    @property
    def line_height(self) -> int:
        """Vertical advance between legend lines, in pixels."""
        return round_half_up(self.pixel_size * self.line_spacing)


# ---------------------------------------------------------------------------
# BaseMap
# ---------------------------------------------------------------------------
class BaseMap(BaseModel):
    """Decoded base map raster with its geographic corners (Value Object).

    The data array is made truly immutable (read-only) at construction time.
    Attempts to modify the array after construction will raise ValueError.
    """

    data: NDArray[np.uint8]  # height x width x 4 (RGBA), read-only
    bounds: ProjectedBounds

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def validate_raster(self) -> "BaseMap":
        if self.data.ndim != 3 or self.data.shape[2] != 4:
            raise ValueError(f"Base map must be height x width x 4, got {self.data.shape}")
        if self.data.shape[0] == 0 or self.data.shape[1] == 0:
            raise ValueError(f"Base map cannot be empty: {self.data.shape}")
        if self.data.dtype != np.uint8:
            raise ValueError(f"Base map must be uint8, got {self.data.dtype}")

        # Own a contiguous copy so the caller's array is never frozen in place.
        immutable = np.array(self.data, dtype=np.uint8, copy=True, order="C")
        immutable.flags.writeable = False
        object.__setattr__(self, "data", immutable)
        return self

    @classmethod
    def from_image(cls, image: Image.Image, bounds: ProjectedBounds) -> "BaseMap":
        return cls(data=np.asarray(image.convert("RGBA")), bounds=bounds)

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    def to_image(self) -> Image.Image:
        """Return a new, writable RGBA image of the base map."""
        return Image.fromarray(np.array(self.data))


# ---------------------------------------------------------------------------
# IconCatalog
# ---------------------------------------------------------------------------
class IconCatalog(BaseModel):
    """Category label -> pre-resized RGBA sprite (Value Object).

    Looking up a category without an icon returns None; callers skip plotting
    for unknown reception categories.
    """

    icons: Mapping[str, Image.Image] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def freeze_icons(self) -> "IconCatalog":
        rgba = {
            name: icon if icon.mode == "RGBA" else icon.convert("RGBA")
            for name, icon in self.icons.items()
        }
        object.__setattr__(self, "icons", MappingProxyType(rgba))
        return self

    def get(self, category: str | None) -> Image.Image | None:
        if not category:
            return None
        return self.icons.get(category)

    def __contains__(self, category: object) -> bool:
        return category in self.icons

    def __len__(self) -> int:
        return len(self.icons)

    @property
    def categories(self) -> tuple[str, ...]:
        return tuple(sorted(self.icons))
