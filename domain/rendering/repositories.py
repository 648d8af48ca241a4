"""Domain Port(s) for Rendering I/O.

Defines interfaces (Protocols) that infrastructure adapters must implement.
No concrete I/O here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from PIL import Image, ImageFont

from domain.geo.value_objects import ProjectedBounds

from .value_objects import BaseMap, FontSettings, IconCatalog


class AssetRepository(Protocol):
    """Port for loading the drawing assets of a run."""

    def load_base_map(self, file_path: Path | str, bounds: ProjectedBounds) -> BaseMap:
        """Decode the base map image."""
        ...

    def load_icons(self, directory: Path | str, width: int) -> IconCatalog:
        """Decode and resize every icon in a directory, keyed by file stem."""
        ...

    def load_font(
        self, file_path: Path | str, settings: FontSettings
    ) -> ImageFont.FreeTypeFont:
        """Load a TrueType/OpenType font sized for ``settings``."""
        ...


class MapWriter(Protocol):
    """Port for persisting finished maps."""

    def write(self, image: Image.Image, file_path: Path) -> Path:
        """Encode and write one map; returns the path written."""
        ...
