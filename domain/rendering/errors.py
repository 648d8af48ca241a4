"""Rendering Bounded Context - Error Hierarchy.

Every rendering error is fatal for the run: a missing asset or an unwritable
output directory means the run configuration is broken.
"""

from __future__ import annotations

from shared.errors import ReceptionMapsError


class RenderingError(ReceptionMapsError):
    """Base error for rendering operations."""


class AssetLoadError(RenderingError):
    """Base map, icon or font file is missing or cannot be decoded."""


class FontLoadError(AssetLoadError):
    """Font file is missing or is not a usable TrueType/OpenType font."""


class MissingIconError(RenderingError):
    """A required icon category (e.g. the transmitter icon) is not in the catalog."""

    def __init__(self, category: str, available: tuple[str, ...]) -> None:
        self.category = category
        super().__init__(
            f"No icon for category {category!r}; available: {', '.join(available) or 'none'}"
        )


class TextRenderError(RenderingError):
    """A label or legend line could not be rendered."""


class MapWriteError(RenderingError):
    """A finished map could not be encoded or written."""
