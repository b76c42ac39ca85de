"""
Errors raised by the word finder.

Every validation failure is raised before any search work begins.
"""


class WordFinderError(ValueError):
    """Base class for all word finder errors."""


class InvalidInput(WordFinderError):
    """Empty, too long, or non-alphabetic character set."""


class InvalidArgument(WordFinderError):
    """Minimum word length out of range for the given characters."""


class PatternError(WordFinderError):
    """Base class for pattern validation failures."""


class PatternTooLong(PatternError):
    pass


class InvalidPatternChar(PatternError):
    pass


class SearchTimeout(WordFinderError):
    """The generative search ran past its deadline."""
