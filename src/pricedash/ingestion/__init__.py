"""Cleaning of raw instrument series.

This module handles:
- Dropping entries with unparseable dates or non-numeric prices
- Ordering each series by date
- Turning every rejection into a user-facing warning
"""

from .sanitize import InstrumentSet, Observation, sanitize, sanitize_instruments  # noqa

__all__ = [
    "Observation",
    "InstrumentSet",
    "sanitize",
    "sanitize_instruments",
]
