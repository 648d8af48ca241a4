"""Geo Bounded Context.

Responsible for placing geographic positions on the base map image:
- Value Objects: GeoCoordinate, ProjectedBounds, PixelPoint
- Services: CoordinateProjector (WGS84 -> UTM -> pixel)
"""
