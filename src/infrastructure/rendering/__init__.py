"""Infrastructure adapters for the rendering bounded context.

Adapters exported for simplified imports.
"""

from .pillow_adapter import PillowAssetAdapter, PngMapWriter

__all__ = ["PillowAssetAdapter", "PngMapWriter"]
