"""
Word Finder

Finds every dictionary word that can be spelled from a bag of letters,
optionally with a minimum length or a fixed-length wildcard pattern.

Two interchangeable strategies are available:
  scan      - test every dictionary word against the letters (default)
  generate  - build candidate strings from the letters and look them up
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Tuple

import numpy as np

from wordfinder.combinatorics import combinations, permutations
from wordfinder.dictionary import Dictionary, length_first_key
from wordfinder.errors import InvalidArgument, SearchTimeout
from wordfinder.letters import LetterMultiset
from wordfinder.pattern import Pattern, validate

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================
MAX_RETURN: int = 1000               # Largest page a paginated search returns
GENERATIVE_MAX_CHARACTERS: int = 13  # Beyond this the candidate space explodes
SCAN_MAX_CHARACTERS: int = 64


@dataclass(frozen=True)
class MatchResult:
    """One page of matches plus the total number of matches."""
    words: List[str] = field(default_factory=list)
    total_matches: int = 0
    offset: int = 0


# =============================================================================
# Search Strategies
# =============================================================================
class SearchStrategy:
    """Common validation for both strategies."""

    name: str = ""
    max_characters: int = SCAN_MAX_CHARACTERS

    def __str__(self) -> str:
        return self.name

    def prepare(self, characters: str, pattern: Optional[str]) -> Tuple[LetterMultiset, Optional[Pattern]]:
        letters = LetterMultiset.build(characters, self.max_characters)
        parsed = validate(pattern, letters) if pattern else None
        return letters, parsed

    def find(self, dictionary: Dictionary, characters: str, min_length: int = 1,
             pattern: Optional[str] = None) -> List[str]:
        raise NotImplementedError


class DictionaryScanStrategy(SearchStrategy):
    """
    Tests every dictionary word for sub-multiset containment in one vectorised
    pass over the dictionary's letter-count matrix.

    A minimum length larger than the number of letters is not an error here:
    nothing can match, so the result is simply empty.
    """

    name = "scan"
    max_characters = SCAN_MAX_CHARACTERS

    def find(self, dictionary: Dictionary, characters: str, min_length: int = 1,
             pattern: Optional[str] = None) -> List[str]:
        letters, parsed = self.prepare(characters, pattern)

        min_length = max(min_length, 1)
        if parsed is not None:
            min_length = len(parsed)
        if min_length > letters.size():
            logger.debug(f"Minimum length {min_length} exceeds {letters.size()} letters, nothing can match")
            return []

        fits = (dictionary.counts <= letters.to_vector()).all(axis=1)
        if parsed is not None:
            fits &= dictionary.lengths == min_length
        else:
            fits &= dictionary.lengths >= min_length

        # Dictionary order is already length-first, so the result is sorted.
        matched = [dictionary.words[i] for i in np.flatnonzero(fits)]
        if parsed is not None:
            matched = [word for word in matched if parsed.matches(word)]

        logger.debug(f"Scan of {len(dictionary)} words found {len(matched)} matches")
        return matched


class GenerativeStrategy(SearchStrategy):
    """
    Enumerates distinct letter combinations of growing length k, then every
    distinct ordering of each combination, and keeps the orderings that are
    dictionary words.

    A minimum length outside 1..len(characters) raises InvalidArgument.
    """

    name = "generate"
    max_characters = GENERATIVE_MAX_CHARACTERS

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = timeout

    def find(self, dictionary: Dictionary, characters: str, min_length: int = 1,
             pattern: Optional[str] = None) -> List[str]:
        letters, parsed = self.prepare(characters, pattern)

        # A pattern pins the search to exactly its own length.
        if parsed is not None:
            min_length = len(parsed)
        if min_length < 1 or min_length > letters.size():
            raise InvalidArgument("Minimum word length must be between 1 and the number of characters")
        last = min_length if parsed is not None else letters.size()

        deadline = None if self.timeout is None else time.perf_counter() + self.timeout

        found = set(self.candidates(dictionary, letters.letters(), min_length, last, deadline))
        if parsed is not None:
            found = {word for word in found if parsed.matches(word)}

        return sorted(found, key=length_first_key)

    def candidates(self, dictionary: Dictionary, pool: List[str], first: int, last: int,
                   deadline: Optional[float] = None) -> Iterator[str]:
        """
        Yield every dictionary word built from pool with length first..last.

        Distinct combinations never share an ordering, so each word comes out once.
        """
        for k in range(first, last + 1):
            tested = 0
            for combo in combinations(pool, k):
                for perm in permutations(combo):
                    if deadline is not None and time.perf_counter() > deadline:
                        raise SearchTimeout(f"Search exceeded {self.timeout}s while testing length {k}")
                    tested += 1
                    word = "".join(perm)
                    if word in dictionary:
                        yield word
            logger.debug(f"Tested {tested} candidates of length {k}")


# =============================================================================
# Word Finder
# =============================================================================
STRATEGIES: Dict[str, type] = {
    "scan": DictionaryScanStrategy,
    "generate": GenerativeStrategy,
}


class WordFinder:
    """Runs searches against one dictionary with the chosen strategy."""

    def __init__(self, dictionary: Dictionary, strategy: str | SearchStrategy = "scan") -> None:
        if isinstance(strategy, str):
            try:
                strategy = STRATEGIES[strategy.lower()]()
            except KeyError:
                raise ValueError(
                    f"Unknown strategy {strategy!r}, choose from {', '.join(STRATEGIES)}"
                ) from None
        self.dictionary = dictionary
        self.strategy: SearchStrategy = strategy

    def find_words(self, characters: str, min_length: int = 1, pattern: Optional[str] = None) -> List[str]:
        """
        All matching words, shortest first and alphabetical within a length.
        """
        logger.info(f"Searching {characters!r} (min length {min_length}, pattern {pattern!r}) with {self.strategy}")
        return self.strategy.find(self.dictionary, characters, min_length, pattern)

    def find_words_paginated(self, characters: str, min_length: int = 1, pattern: Optional[str] = None,
                             offset: int = 0, limit: int = MAX_RETURN) -> MatchResult:
        """
        One page of find_words() output.

        offset below 0 is treated as 0; limit outside 1..MAX_RETURN becomes MAX_RETURN.
        total_matches always counts every match.
        """
        offset = max(offset, 0)
        if limit < 1 or limit > MAX_RETURN:
            limit = MAX_RETURN

        matched = self.find_words(characters, min_length, pattern)
        return MatchResult(
            words=matched[offset:offset + limit],
            total_matches=len(matched),
            offset=offset,
        )
