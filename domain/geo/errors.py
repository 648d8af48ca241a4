"""Geo Bounded Context - Error Hierarchy.

Custom exceptions for coordinate handling. All of them are configuration
errors: a map cannot be drawn with broken bounds or unprojectable coordinates.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shared.errors import ReceptionMapsError

if TYPE_CHECKING:
    from domain.geo.value_objects import GeoCoordinate


class GeoError(ReceptionMapsError):
    """Base error for geo operations."""


class InvalidBoundsError(GeoError):
    """Map corners are malformed or produce a degenerate pixel scale."""


class ProjectionError(GeoError):
    """A coordinate could not be converted to projected (UTM) metres.

    Attributes:
        coordinate: The offending GeoCoordinate
    """

    def __init__(self, coordinate: "GeoCoordinate", reason: str) -> None:
        self.coordinate = coordinate
        super().__init__(
            f"Can't project ({coordinate.latitude:.6f}, {coordinate.longitude:.6f}): "
            f"{reason}"
        )
