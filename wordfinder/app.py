"""
Word Finder console application.

Loads the dictionary, runs one search, prints the words and how long the
search took, and optionally charts matches by word length.
"""

import logging
import time
from collections import Counter
from typing import List, Optional

import matplotlib.pyplot as plt

from wordfinder.dictionary import get_dictionary
from wordfinder.errors import WordFinderError
from wordfinder.wordfinder import MAX_RETURN, GenerativeStrategy, MatchResult, WordFinder

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH: int = 3


# =============================================================================
# Output Functions
# =============================================================================
def print_results(result: MatchResult, elapsed_ms: float, paginated: bool = False) -> None:
    """Print one word per line followed by a summary line."""
    for word in result.words:
        print(word)

    print()
    if paginated and result.words:
        first = result.offset + 1
        print(f"Showing {first}-{result.offset + len(result.words)} of {result.total_matches}")
    print(f"Found {result.total_matches} words in {elapsed_ms:.0f} ms")


def plot_results(words: List[str]) -> None:
    """Bar chart of matches per word length."""
    by_length = Counter(len(word) for word in words)
    lengths = sorted(by_length)

    plt.figure(figsize=(8, 4))
    plt.bar(lengths, [by_length[n] for n in lengths], color="skyblue", edgecolor="black")
    plt.title("Words Found by Length")
    plt.xlabel("Word Length")
    plt.ylabel("Words")
    plt.xticks(lengths)
    plt.tight_layout()
    plt.show()


# =============================================================================
# Application
# =============================================================================
def run(characters: str, min_length: int = DEFAULT_MIN_LENGTH, pattern: Optional[str] = None,
        strategy: str = "scan", words_file: Optional[str] = None, offset: int = 0,
        limit: Optional[int] = None, timeout: Optional[float] = None, visualise: bool = False) -> int:
    """Run one search end to end. Returns the process exit status."""
    try:
        dictionary = get_dictionary(words_file)
    except (OSError, LookupError, ValueError) as e:
        print(f"Could not load dictionary: {e}")
        return 1

    if timeout is not None and strategy != "generate":
        logger.warning(f"--timeout only applies to the 'generate' strategy, ignoring it for '{strategy}'")
    search = GenerativeStrategy(timeout=timeout) if strategy == "generate" else strategy
    finder = WordFinder(dictionary, search)
    paginated = offset > 0 or limit is not None

    start = time.perf_counter()
    try:
        result = finder.find_words_paginated(
            characters, min_length, pattern, offset=offset,
            limit=limit if limit is not None else MAX_RETURN,
        )
    except WordFinderError as e:
        print(f"{type(e).__name__}: {e}")
        return 1
    elapsed_ms = (time.perf_counter() - start) * 1000

    print_results(result, elapsed_ms, paginated)
    if visualise and result.words:
        plot_results(result.words)
    return 0
