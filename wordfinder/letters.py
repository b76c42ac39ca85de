"""
Letter Multiset

Normalised, case-folded counts of the input characters, plus the
sub-multiset test used when scanning the dictionary.
"""

import logging
import string
from collections import Counter
from typing import Dict, Iterator, List

import numpy as np

from wordfinder.errors import InvalidInput

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_lowercase
LETTER_INDEX: Dict[str, int] = {letter: i for i, letter in enumerate(ALPHABET)}


def is_ascii_letter(ch: str) -> bool:
    return ch.isascii() and ch.lower() in LETTER_INDEX


class LetterMultiset:
    """Immutable mapping of letter -> occurrence count."""

    __slots__ = ("_counts", "_size")

    def __init__(self, counts: Counter) -> None:
        self._counts = Counter({letter: n for letter, n in counts.items() if n > 0})
        self._size = sum(self._counts.values())

    @classmethod
    def build(cls, characters: str, max_length: int = None) -> "LetterMultiset":
        """
        Build a multiset from raw input.
        Raises InvalidInput for empty input, input longer than max_length,
        or any character outside a-z (after case folding).
        """
        if not characters:
            raise InvalidInput("Must provide at least 1 character")
        if max_length is not None and len(characters) > max_length:
            raise InvalidInput(
                f"At most {max_length} characters are accepted, got {len(characters)}"
            )

        # Check before folding: some non-ASCII characters lower-case to a-z.
        bad = sorted({ch for ch in characters if not is_ascii_letter(ch)})
        if bad:
            raise InvalidInput(f"Characters must be letters a-z, got {''.join(bad)!r}")

        return cls(Counter(characters.lower()))

    def count(self, letter: str) -> int:
        return self._counts.get(letter.lower(), 0)

    def size(self) -> int:
        return self._size

    def contains_at_least(self, letter: str, n: int) -> bool:
        return self.count(letter) >= n

    def letters(self) -> List[str]:
        """All letters with repeats, in sorted order."""
        return sorted(self._counts.elements())

    def to_vector(self) -> np.ndarray:
        """Counts as a length-26 vector indexed a..z."""
        vec = np.zeros(len(ALPHABET), dtype=np.uint8)
        for letter, n in self._counts.items():
            vec[LETTER_INDEX[letter]] = n
        return vec

    def as_counter(self) -> Counter:
        return Counter(self._counts)

    def __contains__(self, letter: str) -> bool:
        return self.count(letter) > 0

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._counts))

    def __len__(self) -> int:
        return self._size

    def __eq__(self, other) -> bool:
        if not isinstance(other, LetterMultiset):
            return NotImplemented
        return self._counts == other._counts

    def __hash__(self) -> int:
        return hash(frozenset(self._counts.items()))

    def __repr__(self) -> str:
        return f"LetterMultiset({''.join(self.letters())!r})"


def is_sub_multiset(word: str, letters: LetterMultiset) -> bool:
    """True if every letter of word is available in letters, with multiplicity."""
    if len(word) > letters.size():
        return False
    return not (Counter(word.lower()) - letters.as_counter())
