"""Geo Bounded Context - Value Objects.

Immutable data structures representing geographic and image-space positions.
All validation occurs at construction time via Pydantic.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# GeoCoordinate
# ---------------------------------------------------------------------------
class GeoCoordinate(BaseModel):
    """Geographic coordinate in WGS84 decimal degrees (Value Object).

    Invariants:
        latitude in [-90, 90]
        longitude in [-180, 180]

    Pydantic frozen models compare by value, so two coordinates with the
    same latitude/longitude are equal and hash identically.
    """

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_pair(cls, pair: tuple[float, float] | list[float]) -> "GeoCoordinate":
        """Build from a ``[latitude, longitude]`` pair as written in config files."""
        if len(pair) != 2:
            raise ValueError(f"Expected [latitude, longitude], got {list(pair)}")
        return cls(latitude=pair[0], longitude=pair[1])


# ---------------------------------------------------------------------------
# ProjectedBounds
# ---------------------------------------------------------------------------
class ProjectedBounds(BaseModel):
    """Geographic corners of the base map image (Value Object).

    The northwest corner maps to pixel (0, 0) and the southeast corner to
    (width, height). Invalid bounds cannot be instantiated.
    """

    northwest: GeoCoordinate
    southeast: GeoCoordinate

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_corners(self) -> "ProjectedBounds":
        if not (self.northwest.latitude > self.southeast.latitude):
            raise ValueError(
                f"Northwest latitude {self.northwest.latitude} must be north of "
                f"southeast latitude {self.southeast.latitude}"
            )
        if not (self.northwest.longitude < self.southeast.longitude):
            raise ValueError(
                f"Northwest longitude {self.northwest.longitude} must be west of "
                f"southeast longitude {self.southeast.longitude}"
            )
        return self

    @property
    def center(self) -> GeoCoordinate:
        """Midpoint of the two corners (in degrees)."""
        return GeoCoordinate(
            latitude=(self.northwest.latitude + self.southeast.latitude) / 2,
            longitude=(self.northwest.longitude + self.southeast.longitude) / 2,
        )


# ---------------------------------------------------------------------------
# PixelPoint
# ---------------------------------------------------------------------------
class PixelPoint(BaseModel):
    """Integer position in image space; y increases downward (Value Object)."""

    x: int
    y: int

    model_config = ConfigDict(frozen=True)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)
