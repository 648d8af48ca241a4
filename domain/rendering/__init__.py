"""Rendering Bounded Context.

Responsible for drawing reception maps:
- Value Objects: BaseMap, IconCatalog, FontSettings
- Canvas: MapCanvas (icon layer + text layer, merged last)
- Legend: LegendWriter, legend_lines
"""
