"""Infrastructure adapters for the reception bounded context.

Adapter exported for simplified imports.
"""

from .csv_adapter import CsvReceptionAdapter

__all__ = ["CsvReceptionAdapter"]
