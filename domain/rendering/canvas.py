"""Rendering Bounded Context - Map Canvas.

Two-layer compositing surface for one reception map:

1) Output raster: starts as a copy of the base map; icons are alpha-blended
   onto it.
2) Text layer: same size, fully transparent; labels and legend lines are
   drawn here.

``finalize`` merges the text layer over the output raster, so labels always
sit above every icon and icons are never hidden by another icon's label.
The raster buffers are allocated once and overwritten by ``reset`` before
each map.
"""

from __future__ import annotations

import logging

from PIL import Image, ImageDraw, ImageFont

from domain.geo.value_objects import PixelPoint
from domain.reception.value_objects import Operator
from domain.rendering.errors import TextRenderError
from domain.rendering.value_objects import TEXT_COLOR, BaseMap, FontSettings
from shared.numeric import round_half_up

logger = logging.getLogger(__name__)

TRANSPARENT = (0, 0, 0, 0)

Font = ImageFont.FreeTypeFont | ImageFont.ImageFont


class MapCanvas:
    """Output raster plus transparent text overlay.

    Parameters
    ----------
    base_map: BaseMap
        Read-only background restored by every ``reset``.
    font: FreeTypeFont
        Preloaded font face, already sized for ``font_settings``.
    font_settings: FontSettings
        Size/DPI/hinting used to place labels.
    """

    def __init__(
        self,
        base_map: BaseMap,
        font: Font,
        font_settings: FontSettings,
        text_color: tuple[int, int, int, int] = TEXT_COLOR,
    ) -> None:
        self.base_map = base_map
        self.font = font
        self.font_settings = font_settings
        self.text_color = text_color

        self._base = base_map.to_image()
        self._output = self._base.copy()
        self._text_layer = Image.new("RGBA", self._base.size, TRANSPARENT)
        self._draw = ImageDraw.Draw(self._text_layer)
        # Pillow has no hinting switch; "full" is approximated by grid-fitted
        # bilevel glyphs, "none" by antialiased ones.
        self._draw.fontmode = "1" if font_settings.hinting == "full" else "L"

    @property
    def width(self) -> int:
        return self._base.width

    @property
    def height(self) -> int:
        return self._base.height

    @property
    def output(self) -> Image.Image:
        return self._output

    @property
    def text_layer(self) -> Image.Image:
        return self._text_layer

    def reset(self) -> None:
        """Restore the base map and clear all text."""
        self._output.paste(self._base, (0, 0))
        self._text_layer.paste(TRANSPARENT, (0, 0, self.width, self.height))

    def blit_icon(self, icon: Image.Image, center: PixelPoint) -> None:
        """Alpha-composite an icon centred on a pixel, clipping at the edges."""
        left = center.x - icon.width // 2
        top = center.y - icon.height // 2

        # alpha_composite rejects negative destinations: crop the overhang.
        crop_left = max(0, -left)
        crop_top = max(0, -top)
        if (
            crop_left >= icon.width
            or crop_top >= icon.height
            or left >= self.width
            or top >= self.height
        ):
            logger.debug("Icon at (%d, %d) is entirely off the map", center.x, center.y)
            return
        if crop_left or crop_top:
            icon = icon.crop((crop_left, crop_top, icon.width, icon.height))
        if icon.mode != "RGBA":
            icon = icon.convert("RGBA")

        self._output.alpha_composite(icon, dest=(left + crop_left, top + crop_top))

    def draw_text(self, text: str, position: PixelPoint) -> None:
        """Draw text on the text layer with its baseline starting at ``position``.

        Raises:
            TextRenderError: If the font cannot render the text.
        """
        try:
            self._draw.text(
                position.as_tuple(),
                text,
                fill=self.text_color,
                font=self.font,
                anchor="ls",
            )
        except (OSError, ValueError, UnicodeError) as e:
            raise TextRenderError(f"Can't render text {text!r}: {e}") from e

    def label_position(self, icon: Image.Image, pixel: PixelPoint) -> PixelPoint:
        """Anchor for an operator label: right of the icon, vertically centred."""
        size_pt = self.font_settings.size_pt
        return PixelPoint(
            x=pixel.x + (icon.width + int(size_pt)) // 2,
            y=pixel.y + round_half_up(self.font_settings.pixel_size / 2),
        )

    def plot_operator(
        self, icon: Image.Image, operator: Operator | None, label: str | None = None
    ) -> bool:
        """Blit an operator's icon and call-sign label.

        ``label`` defaults to the operator's call sign; pass the reported call
        sign when it differs (e.g. ``K6ABC-1`` placed at ``K6ABC``).

        Returns False (and draws nothing) when the operator is missing or has
        not been placed on the map.
        """
        if operator is None or not operator.callsign or operator.pixel is None:
            logger.info("Skipping icon for missing operator")
            return False

        self.blit_icon(icon, operator.pixel)
        self.draw_text(label or operator.callsign, self.label_position(icon, operator.pixel))
        return True

    def finalize(self) -> Image.Image:
        """Merge the text layer over the output raster and return the result."""
        self._output.alpha_composite(self._text_layer)
        return self._output
