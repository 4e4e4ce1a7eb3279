"""Numeronym generation rules.

Responsibilities:
- Split input text into whitespace-separated words.
- Collapse each long enough word into `first + interior count + last`.
- Stay pure: output depends only on the text and the options passed in.
"""

from __future__ import annotations

from .models.datatypes import MIN_ABBREVIATION_LENGTH, NumeronymOptions, WordBreakdown

_DEFAULT_OPTIONS = NumeronymOptions()


def split_words(text: str, options: NumeronymOptions | None = None) -> list[str]:
    """Return the words the generator abbreviates, in input order.

    Words are maximal runs of non-whitespace characters. With
    `join_words`, all words are concatenated into a single word.
    """

    resolved = options or _DEFAULT_OPTIONS
    if resolved.lowercase:
        text = text.lower()
    words = text.split()
    if resolved.join_words and words:
        return ["".join(words)]
    return words


def abbreviate_word(word: str, min_length: int = MIN_ABBREVIATION_LENGTH) -> str:
    """Return the numeronym for one word, or the word itself when too short."""

    length = len(word)
    if length < max(min_length, MIN_ABBREVIATION_LENGTH):
        return word
    return f"{word[0]}{length - 2}{word[-1]}"


def generate(text: str, options: NumeronymOptions | None = None) -> str:
    """Convert text into space-separated numeronyms.

    Args:
        text: Arbitrary input text, possibly empty.
        options: Rule variants; defaults abbreviate words of 3+ characters.

    Returns:
        Abbreviated words joined by single spaces, or `""` when the text
        holds no words.
    """

    resolved = options or _DEFAULT_OPTIONS
    return " ".join(
        abbreviate_word(word, resolved.min_length)
        for word in split_words(text, resolved)
    )


def explain(text: str, options: NumeronymOptions | None = None) -> list[WordBreakdown]:
    """Describe how each word of `text` is turned into its numeronym."""

    resolved = options or _DEFAULT_OPTIONS
    rows: list[WordBreakdown] = []
    for word in split_words(text, resolved):
        # "a1c" abbreviates to itself, so compare lengths rather than text.
        abbreviated = len(word) >= resolved.min_length
        abbreviation = abbreviate_word(word, resolved.min_length)
        rows.append(
            WordBreakdown(
                word=word,
                abbreviation=abbreviation,
                elided_count=len(word) - 2 if abbreviated else 0,
                abbreviated=abbreviated,
            )
        )
    return rows
