"""Top-level package for Numeronym.

This package turns text into numeronyms ("internationalization" -> "i18n").
The pure entry point is `generate`; `LiveConverter` wires it to a host that
supplies text on every input change.
"""

from .generator import abbreviate_word, explain, generate, split_words
from .host import LiveConverter
from .models.datatypes import Conversion, NumeronymOptions, WordBreakdown

__all__ = [
    "generate",
    "abbreviate_word",
    "split_words",
    "explain",
    "LiveConverter",
    "NumeronymOptions",
    "Conversion",
    "WordBreakdown",
    "__version__",
]

__version__ = "0.1.0"
