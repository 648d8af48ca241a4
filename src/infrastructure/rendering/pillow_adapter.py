"""Pillow adapters for AssetRepository and MapWriter.

Loads the base map, icons and font a run draws with, and writes finished maps
as PNG files. Every failure here is an asset or output error and aborts the
run; log lines mention file names only, never full paths.
"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, ImageFont, UnidentifiedImageError

from domain.geo.value_objects import ProjectedBounds
from domain.rendering.errors import AssetLoadError, FontLoadError, MapWriteError
from domain.rendering.value_objects import BaseMap, FontSettings, IconCatalog
from shared.numeric import round_half_up

# Module-level logger (reused across all calls)
logger = logging.getLogger(__name__)

ICON_SUFFIXES = frozenset({".png", ".gif", ".jpg", ".jpeg", ".bmp", ".webp"})


def _open_rgba(path: Path) -> Image.Image:
    """Decode an image file fully and return it as RGBA."""
    try:
        with Image.open(path) as image:
            image.load()
            return image.convert("RGBA")
    except UnidentifiedImageError as e:
        raise AssetLoadError(f"Can't decode image {path.name}") from e
    except OSError as e:
        raise AssetLoadError(f"Can't read image {path.name}: {e}") from e


def resize_to_width(image: Image.Image, width: int) -> Image.Image:
    """Scale an image to ``width`` pixels wide, preserving aspect ratio."""
    if width <= 0:
        raise ValueError(f"Icon width must be positive, got {width}")
    height = max(1, round_half_up(image.height * width / image.width))
    return image.resize((width, height), resample=Image.Resampling.BILINEAR)


class PillowAssetAdapter:
    """Infrastructure adapter for decoding map assets with Pillow."""

    def load_base_map(self, file_path: Path | str, bounds: ProjectedBounds) -> BaseMap:
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(str(path))

        image = _open_rgba(path)
        base_map = BaseMap.from_image(image, bounds)
        logger.debug(
            "Base map %s: %dx%d", path.name, base_map.width, base_map.height
        )
        return base_map

    def load_icons(self, directory: Path | str, width: int) -> IconCatalog:
        path = Path(directory)
        if not path.is_dir():
            raise FileNotFoundError(str(path))

        icons: dict[str, Image.Image] = {}
        for entry in sorted(path.iterdir()):
            if not entry.is_file() or entry.suffix.lower() not in ICON_SUFFIXES:
                logger.debug("Skipping non-icon entry %s", entry.name)
                continue
            icons[entry.stem] = resize_to_width(_open_rgba(entry), width)

        catalog = IconCatalog(icons=icons)
        logger.info(
            "Loaded %d icons from %s: %s",
            len(catalog),
            path.name,
            ", ".join(catalog.categories),
        )
        return catalog

    def load_font(
        self, file_path: Path | str, settings: FontSettings
    ) -> ImageFont.FreeTypeFont:
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(str(path))

        try:
            font = ImageFont.truetype(str(path), size=settings.pixel_size)
        except OSError as e:
            raise FontLoadError(f"Can't parse font file {path.name}: {e}") from e
        logger.debug(
            "Font %s at %.1fpt / %.0f dpi (%.1fpx)",
            path.name,
            settings.size_pt,
            settings.dpi,
            settings.pixel_size,
        )
        return font


class PngMapWriter:
    """Infrastructure adapter for writing maps as PNG files."""

    def write(self, image: Image.Image, file_path: Path) -> Path:
        path = Path(file_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            image.save(path, format="PNG")
        except (OSError, ValueError) as e:
            raise MapWriteError(f"Failed to create output file {path.name}: {e}") from e
        logger.debug("Wrote %s", path.name)
        return path
