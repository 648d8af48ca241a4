"""Root pytest configuration for all tests.

Provides fixtures for the drawing surface shared by the rendering and
application tests. Rasters, icons and the font are synthesised by
tests/conftest_utils.py; nothing is read from disk.
"""

from __future__ import annotations

import pytest

from domain.geo.services import CoordinateProjector
from domain.rendering.canvas import MapCanvas
from domain.rendering.value_objects import BaseMap, FontSettings
from tests.conftest_utils import (
    MAP_HEIGHT,
    MAP_WIDTH,
    TEST_FONT_SETTINGS,
    make_base_map,
    make_font,
    sample_bounds,
)


@pytest.fixture
def font_settings() -> FontSettings:
    return TEST_FONT_SETTINGS


@pytest.fixture
def base_map() -> BaseMap:
    return make_base_map()


@pytest.fixture
def canvas(base_map: BaseMap, font_settings: FontSettings) -> MapCanvas:
    return MapCanvas(base_map, make_font(font_settings), font_settings)


@pytest.fixture
def projector() -> CoordinateProjector:
    return CoordinateProjector(sample_bounds(), MAP_WIDTH, MAP_HEIGHT)
