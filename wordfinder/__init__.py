"""
Word Finder

Finds every dictionary word that can be made from a set of letters.
"""

from wordfinder.dictionary import Dictionary, get_dictionary, length_first_key
from wordfinder.errors import (
    InvalidArgument,
    InvalidInput,
    InvalidPatternChar,
    PatternError,
    PatternTooLong,
    SearchTimeout,
    WordFinderError,
)
from wordfinder.wordfinder import (
    MAX_RETURN,
    DictionaryScanStrategy,
    GenerativeStrategy,
    MatchResult,
    SearchStrategy,
    WordFinder,
)
