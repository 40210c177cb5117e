"""ROT-13 letter substitution over the 26-letter Latin alphabet.

Responsibilities:
- Rotate `A`-`Z` and `a`-`z` by 13 positions, keeping case.
- Copy every other character unchanged so output length equals input length.
"""

from __future__ import annotations

import string

ALPHABET_SIZE = 26
ROTATION = 13


def _rotated(alphabet: str) -> str:
    """Return `alphabet` cyclically shifted left by `ROTATION` positions."""

    return alphabet[ROTATION:] + alphabet[:ROTATION]


_ROT13_TABLE = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    _rotated(string.ascii_uppercase) + _rotated(string.ascii_lowercase),
)


def rot13(text: str) -> str:
    """Return the ROT-13 image of `text`.

    Non-Latin letters, digits, punctuation and whitespace pass through as-is.
    Applying the function twice returns the original text.
    """

    return text.translate(_ROT13_TABLE)
