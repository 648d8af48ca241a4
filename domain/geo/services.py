"""Geo Bounded Context - Domain Services.

Converts geodetic coordinates into pixel positions on the base map image.

Coordinates are first projected to UTM (easting/northing in metres) which
gives a flat, linear mapping of latitude/longitude that scales directly to
pixels. A single UTM zone, the one covering the centre of the map, is used for
every coordinate; this is only valid while all operators lie within a few
hundred kilometres of each other, which is the case for the local nets this
tool maps.
"""

from __future__ import annotations

import logging
import math

from affine import Affine
from pyproj import CRS, Transformer
from pyproj.exceptions import ProjError

from domain.geo.errors import InvalidBoundsError, ProjectionError
from domain.geo.value_objects import GeoCoordinate, PixelPoint, ProjectedBounds
from shared.numeric import round_half_up

logger = logging.getLogger(__name__)

WGS84 = "EPSG:4326"


# ---------------------------------------------------------------------------
# Helper: UTM zone selection
# ---------------------------------------------------------------------------
def utm_zone(longitude: float) -> int:
    """Return the UTM zone number (1-60) covering a longitude.

    Zones are 6 degrees wide starting at 180W; longitude 180 folds into zone 60.
    """
    zone = int((longitude + 180) // 6) + 1
    return min(max(zone, 1), 60)


def utm_crs_for(coordinate: GeoCoordinate) -> CRS:
    """Return the WGS84 / UTM CRS for the zone and hemisphere of a coordinate."""
    zone = utm_zone(coordinate.longitude)
    if coordinate.latitude >= 0:
        return CRS.from_epsg(32600 + zone)  # Northern hemisphere
    return CRS.from_epsg(32700 + zone)  # Southern hemisphere


# ---------------------------------------------------------------------------
# Coordinate Projector
# ---------------------------------------------------------------------------
class CoordinateProjector:
    """Maps GeoCoordinates to PixelPoints on a base map of known extent.

    All scale factors are derived once, at construction, from the map corners
    and the image size. The projector holds no mutable state afterwards, so a
    single instance serves every operator of a run.

    Parameters
    ----------
    bounds: ProjectedBounds
        Northwest and southeast corners of the base map.
    width, height: int
        Size of the base map image in pixels.
    """

    def __init__(self, bounds: ProjectedBounds, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise InvalidBoundsError(f"Image size must be positive: {width}x{height}")

        self.bounds = bounds
        self.width = width
        self.height = height
        self.crs = utm_crs_for(bounds.center)
        self._transformer = Transformer.from_crs(WGS84, self.crs, always_xy=True)

        easting_nw, northing_nw = self._to_metres(bounds.northwest)
        easting_se, northing_se = self._to_metres(bounds.southeast)

        self.metres_per_pixel_x = (easting_se - easting_nw) / width
        self.metres_per_pixel_y = (northing_nw - northing_se) / height
        if self.metres_per_pixel_x <= 0 or self.metres_per_pixel_y <= 0:
            raise InvalidBoundsError(
                "Map corners produce a degenerate scale: "
                f"x={self.metres_per_pixel_x:.6f} m/px, y={self.metres_per_pixel_y:.6f} m/px"
            )

        # Pixel (col, row) -> projected metres; row grows southward.
        self._transform = Affine(
            self.metres_per_pixel_x,
            0.0,
            easting_nw,
            0.0,
            -self.metres_per_pixel_y,
            northing_nw,
        )
        self._inverse = ~self._transform

        logger.debug(
            "Projector: %s, %.3f x %.3f m/px for %dx%d image",
            self.crs.to_string(),
            self.metres_per_pixel_x,
            self.metres_per_pixel_y,
            width,
            height,
        )

    def _to_metres(self, coordinate: GeoCoordinate) -> tuple[float, float]:
        try:
            easting, northing = self._transformer.transform(
                coordinate.longitude, coordinate.latitude, errcheck=True
            )
        except ProjError as e:
            raise ProjectionError(coordinate, str(e)) from e
        if not (math.isfinite(easting) and math.isfinite(northing)):
            raise ProjectionError(coordinate, "non-finite projected value")
        return float(easting), float(northing)

    def project(self, coordinate: GeoCoordinate) -> PixelPoint:
        """Return the pixel position of a coordinate, rounded half up.

        Raises:
            ProjectionError: If the coordinate cannot be projected.
        """
        col, row = self._inverse @ self._to_metres(coordinate)
        return PixelPoint(x=round_half_up(col), y=round_half_up(row))
