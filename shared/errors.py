"""Root of the error hierarchy.

Every bounded context defines its own errors (see ``domain/*/errors.py``);
they all derive from ReceptionMapsError so the CLI can treat any of them as a
fatal, run-aborting condition.
"""

from __future__ import annotations


class ReceptionMapsError(Exception):
    """Base error for all reception-map failures."""
