"""Reception Maps Domain Layer.

This package contains the core logic organized by bounded contexts:
- geo: Geographic coordinates, UTM projection, pixel placement
- reception: Operators, reception reports, report matrix, call signs
- rendering: Icon catalog, map canvas compositing, legend layout
"""

# Imports alphabetized per project style (isort)
from domain import geo, reception, rendering

__all__ = ["geo", "reception", "rendering"]
