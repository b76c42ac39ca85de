"""
Dictionary

Normalised, read-only word list shared by every search. Words are stored in
length-first order, and a letter-count matrix is built once so the
dictionary scan can test every word against the input letters in one pass.
"""

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Tuple

import numpy as np
from nltk.corpus import words

from wordfinder.letters import ALPHABET, is_ascii_letter

logger = logging.getLogger(__name__)


def length_first_key(word: str) -> Tuple[int, str]:
    """Sort key: shorter words first, equal lengths alphabetically."""
    return len(word), word


class Dictionary:
    """Set of valid words in (length, lexical) order."""

    def __init__(self, entries: Iterable[str]) -> None:
        cleaned = set()
        for entry in entries:
            word = entry.strip()
            if word and all(is_ascii_letter(ch) for ch in word):
                cleaned.add(word.lower())

        if not cleaned:
            raise ValueError("No valid words found for the dictionary")

        self.words: Tuple[str, ...] = tuple(sorted(cleaned, key=length_first_key))
        self._lookup: FrozenSet[str] = frozenset(cleaned)

        self.lengths = np.fromiter((len(w) for w in self.words), dtype=np.int32, count=len(self.words))
        # Every word is a-z only, so its ASCII bytes map straight onto columns.
        columns = np.frombuffer("".join(self.words).encode("ascii"), dtype=np.uint8) - ord("a")
        rows = np.repeat(np.arange(len(self.words)), self.lengths)
        self.counts = np.zeros((len(self.words), len(ALPHABET)), dtype=np.uint8)
        np.add.at(self.counts, (rows, columns), 1)

        logger.debug(f"Dictionary built with {len(self.words)} words")

    def __contains__(self, word: str) -> bool:
        return word in self._lookup

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)


# =============================================================================
# Loaders
# =============================================================================
def load_dictionary(filepath: str | Path) -> Dictionary:
    """Load a word list with one word per line."""
    filepath = Path(filepath)
    if not filepath.exists():
        logger.error(f"Word list file not found: {filepath}")
        raise FileNotFoundError(f"Word list file not found: {filepath}")

    with open(filepath, "r", encoding="utf-8") as f:
        dictionary = Dictionary(f)
    logger.info(f"Loaded {len(dictionary)} words from {filepath}")
    return dictionary


def load_nltk_words() -> Dictionary:
    """Load the NLTK 'words' corpus."""
    try:
        entries = words.words()
    except LookupError as e:
        logger.error(f"NLTK words corpus unavailable, run nltk.download('words'): {e}")
        raise
    dictionary = Dictionary(entries)
    logger.info(f"Loaded {len(dictionary)} words from the NLTK corpus")
    return dictionary


def get_dictionary(custom_path: str | Path | None = None) -> Dictionary:
    """Word list from custom_path if given, otherwise the NLTK corpus."""
    if custom_path:
        return load_dictionary(custom_path)
    return load_nltk_words()
