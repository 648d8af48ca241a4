"""Rendering Bounded Context - Map Legend.

The legend sits at the bottom-left of each map and lists the subject station's
known attributes. Attributes that were not supplied are left out entirely.
"""

from __future__ import annotations

from domain.geo.value_objects import PixelPoint
from domain.reception.value_objects import MapMode, Operator
from domain.rendering.canvas import MapCanvas
from shared.numeric import round_half_up

# Room reserved above the bottom edge, in lines
MAX_LEGEND_LINES = 8
# Left margin, in multiples of the font size (points)
LEFT_MARGIN_EMS = 5


def legend_lines(
    callsign: str, operator: Operator | None, mode: MapMode, frequency: str
) -> list[str]:
    """Build the legend text for one map, omitting unknown attributes."""
    lines = [mode.title(callsign), f"Frequency: {frequency}"]
    if operator is None:
        return lines

    if operator.has_power:
        lines.append(f"Transmitter Power: {operator.transmit_power_w:.0f} Watts")
    if operator.has_antenna_type:
        lines.append(f"Antenna Type: {operator.antenna_type}")
    if operator.has_antenna_height:
        lines.append(f"Antenna Height: {operator.antenna_height_ft:.0f} feet")
    if operator.has_antenna_gain:
        lines.append(f"Antenna Est. Gain: {operator.antenna_gain_dbi:.1f} dBi")
    return lines


class LegendWriter:
    """Line cursor over a canvas text layer.

    Create one per map; each ``write`` call draws its lines at the cursor and
    moves the cursor down one line height per line.
    """

    def __init__(self, canvas: MapCanvas, max_lines: int = MAX_LEGEND_LINES) -> None:
        settings = canvas.font_settings
        self.canvas = canvas
        self.line_height = settings.line_height
        self.cursor_x = round_half_up(settings.size_pt * LEFT_MARGIN_EMS)
        self.cursor_y = canvas.height - round_half_up(
            settings.pixel_size * settings.line_spacing * max_lines
        )

    def write(self, *lines: str) -> None:
        for line in lines:
            if not line:
                continue
            self.canvas.draw_text(line, PixelPoint(x=self.cursor_x, y=self.cursor_y))
            self.cursor_y += self.line_height
