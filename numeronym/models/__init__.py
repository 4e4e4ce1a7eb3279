"""Datatype exports for Numeronym."""

from .datatypes import (
    MIN_ABBREVIATION_LENGTH,
    Conversion,
    NumeronymOptions,
    WordBreakdown,
)

__all__ = [
    "MIN_ABBREVIATION_LENGTH",
    "NumeronymOptions",
    "Conversion",
    "WordBreakdown",
]
