"""Tests for the CoordinateProjector domain service.

Sample bounds (Mountain View, CA): NW (37.4166, -122.11558), SE (37.35829,
-122.04211), projected onto a 400x300 image in UTM zone 10N.
"""

from __future__ import annotations

import warnings

import pytest
from pydantic import ValidationError
from pyproj.exceptions import ProjError

from domain.geo.errors import InvalidBoundsError, ProjectionError
from domain.geo.services import CoordinateProjector, utm_crs_for, utm_zone
from domain.geo.value_objects import GeoCoordinate, PixelPoint, ProjectedBounds
from tests.conftest_utils import (
    MAP_HEIGHT,
    MAP_WIDTH,
    NW_CORNER,
    SE_CORNER,
    sample_bounds,
)


# ===========================================================================
# TC-001: Corners
# ===========================================================================
def test_northwest_corner_projects_to_origin(projector):
    """TC-001: NW corner is pixel (0, 0)."""
    assert projector.project(NW_CORNER) == PixelPoint(x=0, y=0)


def test_southeast_corner_projects_to_image_size(projector):
    """TC-001: SE corner is pixel (width, height) within one pixel."""
    pixel = projector.project(SE_CORNER)

    assert abs(pixel.x - MAP_WIDTH) <= 1
    assert abs(pixel.y - MAP_HEIGHT) <= 1


def test_center_projects_near_image_center(projector):
    """Map centre lands within a couple of pixels of the image centre."""
    pixel = projector.project(sample_bounds().center)

    assert abs(pixel.x - MAP_WIDTH / 2) <= 2
    assert abs(pixel.y - MAP_HEIGHT / 2) <= 2


# ===========================================================================
# TC-002: Monotonicity
# ===========================================================================
def test_increasing_latitude_decreases_pixel_y(projector):
    """TC-002: Moving north strictly moves up the image."""
    longitude = -122.08
    latitudes = [37.36 + i * 0.005 for i in range(11)]  # 37.36 .. 37.41

    ys = [projector.project(GeoCoordinate(latitude=lat, longitude=longitude)).y for lat in latitudes]

    assert all(later < earlier for earlier, later in zip(ys, ys[1:]))


def test_increasing_longitude_increases_pixel_x(projector):
    """TC-002: Moving east strictly moves right on the image."""
    latitude = 37.39
    longitudes = [-122.115 + i * 0.007 for i in range(11)]  # -122.115 .. -122.045

    xs = [projector.project(GeoCoordinate(latitude=latitude, longitude=lon)).x for lon in longitudes]

    assert all(later > earlier for earlier, later in zip(xs, xs[1:]))


# ===========================================================================
# TC-003: Scale factors
# ===========================================================================
def test_scale_factors_fixed_at_construction(projector):
    """TC-003: Scale is computed once; repeated projections agree."""
    scale = (projector.metres_per_pixel_x, projector.metres_per_pixel_y)
    point = GeoCoordinate(latitude=37.38, longitude=-122.07)

    first = projector.project(point)
    for _ in range(3):
        assert projector.project(point) == first
    assert (projector.metres_per_pixel_x, projector.metres_per_pixel_y) == scale


def test_scale_is_about_sixteen_metres_per_pixel(projector):
    """~6.5 km over 400 px and ~6.5 km over 300 px."""
    assert projector.metres_per_pixel_x == pytest.approx(16.2, rel=0.05)
    assert projector.metres_per_pixel_y == pytest.approx(21.6, rel=0.05)


def test_projection_emits_no_warnings(projector):
    """Pixel conversion uses the current affine API (no deprecation warnings)."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        pixel = projector.project(GeoCoordinate(latitude=37.38, longitude=-122.07))

    assert 0 <= pixel.x <= MAP_WIDTH
    assert 0 <= pixel.y <= MAP_HEIGHT


def test_points_outside_bounds_still_project(projector):
    """Points just outside the map get negative / oversized pixels, not errors."""
    pixel = projector.project(GeoCoordinate(latitude=37.42, longitude=-122.12))

    assert pixel.x < 0
    assert pixel.y < 0


# ===========================================================================
# TC-004: UTM zone selection
# ===========================================================================
@pytest.mark.parametrize(
    "longitude, zone",
    [(-180.0, 1), (-122.08, 10), (-0.5, 30), (0.0, 31), (179.9, 60), (180.0, 60)],
)
def test_utm_zone(longitude, zone):
    """TC-004: Zone numbers follow the 6-degree grid."""
    assert utm_zone(longitude) == zone


def test_utm_crs_hemispheres():
    """TC-004: North uses EPSG:326xx, south EPSG:327xx."""
    north = utm_crs_for(GeoCoordinate(latitude=37.4, longitude=-122.1))
    south = utm_crs_for(GeoCoordinate(latitude=-23.5, longitude=-46.6))

    assert north.to_epsg() == 32610
    assert south.to_epsg() == 32723


def test_projector_uses_zone_of_map_center(projector):
    assert projector.crs.to_epsg() == 32610


def test_southern_hemisphere_map():
    """Orientation holds south of the equator too."""
    bounds = ProjectedBounds(
        northwest=GeoCoordinate(latitude=-23.50, longitude=-46.70),
        southeast=GeoCoordinate(latitude=-23.60, longitude=-46.60),
    )
    projector = CoordinateProjector(bounds, 500, 500)

    assert projector.project(bounds.northwest) == PixelPoint(x=0, y=0)
    se = projector.project(bounds.southeast)
    assert abs(se.x - 500) <= 1
    assert abs(se.y - 500) <= 1


# ===========================================================================
# TC-005: Errors
# ===========================================================================
@pytest.mark.parametrize("width, height", [(0, 300), (400, 0), (-1, -1)])
def test_non_positive_image_size_rejected(width, height):
    """TC-005: Image size must be positive."""
    with pytest.raises(InvalidBoundsError):
        CoordinateProjector(sample_bounds(), width, height)


def test_swapped_corners_rejected():
    """TC-005: NW must be north-west of SE."""
    with pytest.raises(ValidationError):
        ProjectedBounds(northwest=SE_CORNER, southeast=NW_CORNER)


def test_unprojectable_coordinate_raises(projector, monkeypatch):
    """TC-005: Transformer failures surface as ProjectionError."""

    class FailingTransformer:
        def transform(self, *args, **kwargs):
            raise ProjError("latitude or longitude exceeded limits")

    monkeypatch.setattr(projector, "_transformer", FailingTransformer())
    point = GeoCoordinate(latitude=37.39, longitude=-122.08)

    with pytest.raises(ProjectionError) as exc_info:
        projector.project(point)

    assert exc_info.value.coordinate == point


def test_non_finite_projection_raises(projector, monkeypatch):
    class InfTransformer:
        def transform(self, *args, **kwargs):
            return float("inf"), float("inf")

    monkeypatch.setattr(projector, "_transformer", InfTransformer())

    with pytest.raises(ProjectionError, match="non-finite"):
        projector.project(GeoCoordinate(latitude=37.39, longitude=-122.08))
