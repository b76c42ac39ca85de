"""
Pattern Matcher

A pattern is a fixed-length template such as "_o_" or "c.t": literal letters
must match exactly, wildcard positions match any letter.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from wordfinder.errors import InvalidPatternChar, PatternTooLong
from wordfinder.letters import LetterMultiset, is_ascii_letter

WILDCARDS = "_.?"


@dataclass(frozen=True)
class Pattern:
    """Parsed pattern; None marks a wildcard position."""
    slots: Tuple[Optional[str], ...]

    @classmethod
    def parse(cls, text: str) -> "Pattern":
        slots = []
        for pos, ch in enumerate(text):
            if ch in WILDCARDS:
                slots.append(None)
            elif is_ascii_letter(ch):
                slots.append(ch.lower())
            else:
                raise InvalidPatternChar(
                    f"Invalid pattern character {ch!r} at position {pos + 1}"
                )
        return cls(tuple(slots))

    @property
    def literals(self) -> Tuple[str, ...]:
        return tuple(ch for ch in self.slots if ch is not None)

    def matches(self, candidate: str) -> bool:
        """True iff lengths agree and every literal position matches (case-insensitive)."""
        if len(candidate) != len(self.slots):
            return False
        candidate = candidate.lower()
        return all(want is None or want == got for want, got in zip(self.slots, candidate))

    def __len__(self) -> int:
        return len(self.slots)

    def __str__(self) -> str:
        return "".join("_" if ch is None else ch for ch in self.slots)


def validate(text: str, letters: LetterMultiset) -> Pattern:
    """
    Parse text and check it against the available letters.

    Raises PatternTooLong if the pattern is longer than the letters, and
    InvalidPatternChar if a literal is absent from them. Only presence is
    checked, not multiplicity: "aa_" is accepted with a single 'a' and then
    simply never matches.
    """
    if len(text) > letters.size():
        raise PatternTooLong(
            f"Pattern {text!r} is longer than the {letters.size()} available characters"
        )

    pattern = Pattern.parse(text)
    for ch in pattern.literals:
        if ch not in letters:
            raise InvalidPatternChar(
                f"Pattern character {ch!r} is not one of the available characters"
            )
    return pattern


def matches(pattern: Pattern, candidate: str) -> bool:
    return pattern.matches(candidate)
