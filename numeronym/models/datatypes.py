"""Core datatypes shared across Numeronym modules.

Responsibilities:
- Represent immutable option and result records exchanged between the
  generator and its hosts.
- Validate rule options once, at construction time.

Key types:
- `NumeronymOptions`, `Conversion`, and `WordBreakdown`.
"""

from __future__ import annotations

from dataclasses import dataclass

MIN_ABBREVIATION_LENGTH = 3
"""Shortest word length that has an interior to collapse."""


@dataclass(frozen=True, slots=True)
class NumeronymOptions:
    """Rule variants applied by the generator.

    Attributes:
        min_length: Threshold; words shorter than this pass through unchanged.
        lowercase: Lowercase the input before abbreviating.
        join_words: Drop all whitespace and abbreviate the input as one word.
    """

    min_length: int = MIN_ABBREVIATION_LENGTH
    lowercase: bool = False
    join_words: bool = False

    def __post_init__(self) -> None:
        """Reject thresholds that would abbreviate words without an interior."""

        if isinstance(self.min_length, bool) or not isinstance(self.min_length, int):
            raise ValueError("`min_length` must be an integer.")
        if self.min_length < MIN_ABBREVIATION_LENGTH:
            raise ValueError(
                f"`min_length` must be at least {MIN_ABBREVIATION_LENGTH}; "
                f"got {self.min_length}."
            )


@dataclass(frozen=True, slots=True)
class Conversion:
    """One host-side input change and its generated numeronym.

    Attributes:
        source: Text supplied by the host for this event.
        result: Generated numeronym text.
        word_count: Number of words found in `source`.
    """

    source: str
    result: str
    word_count: int


@dataclass(frozen=True, slots=True)
class WordBreakdown:
    """Per-word explanation of how a numeronym was formed.

    Attributes:
        word: Word as produced by splitting (after optional lowercasing).
        abbreviation: Output for this word.
        elided_count: Number of interior characters replaced by digits.
        abbreviated: Whether the word was collapsed or kept verbatim.
    """

    word: str
    abbreviation: str
    elided_count: int
    abbreviated: bool
