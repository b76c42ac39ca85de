import pytest

from wordfinder.dictionary import length_first_key
from wordfinder.errors import InvalidArgument, InvalidInput, InvalidPatternChar, PatternTooLong, SearchTimeout
from wordfinder.letters import LetterMultiset, is_sub_multiset
from wordfinder.wordfinder import (
    GENERATIVE_MAX_CHARACTERS,
    MAX_RETURN,
    DictionaryScanStrategy,
    GenerativeStrategy,
    MatchResult,
    WordFinder,
)


def test_same_length_sorted_alphabetically(finder):
    assert finder.find_words("cat", 3) == ["act", "cat"]


def test_repeated_letters_give_no_duplicates(finder):
    assert finder.find_words("aab", 2) == ["aa", "ab", "ba"]
    assert finder.find_words("aab", 1) == ["a", "aa", "ab", "ba"]


def test_pattern_fixes_length(finder):
    assert finder.find_words("stop", 3, pattern="_o_") == ["pot", "top"]
    assert finder.find_words("STOP", 1, pattern="S???") == ["spot", "stop"]


def test_pattern_overrides_min_length(finder):
    assert finder.find_words("stop", 4, pattern="t.p") == ["top"]


def test_length_first_ordering(finder):
    assert finder.find_words("stop", 1) == ["opt", "pot", "top", "post", "pots", "spot", "stop", "tops"]


def test_empty_input_fails(finder):
    with pytest.raises(InvalidInput):
        finder.find_words("", 1)


def test_non_letter_input_fails(finder):
    with pytest.raises(InvalidInput):
        finder.find_words("c-t", 1)


def test_pattern_char_absent(finder):
    with pytest.raises(InvalidPatternChar):
        finder.find_words("xyz", 1, pattern="a_c")


def test_pattern_too_long(finder):
    with pytest.raises(PatternTooLong):
        finder.find_words("ab", 1, pattern="___")


def test_min_length_above_input_size_scan(dictionary):
    finder = WordFinder(dictionary, "scan")
    assert finder.find_words("ab", 3) == []
    result = finder.find_words_paginated("ab", 3)
    assert result == MatchResult(words=[], total_matches=0, offset=0)


def test_min_length_above_input_size_generate(dictionary):
    finder = WordFinder(dictionary, "generate")
    with pytest.raises(InvalidArgument):
        finder.find_words("ab", 3)
    with pytest.raises(InvalidArgument):
        finder.find_words("ab", 0)


def test_scan_normalises_min_length(dictionary):
    finder = WordFinder(dictionary, "scan")
    assert finder.find_words("at", 0) == ["a", "at", "ta"]
    assert finder.find_words("at", -5) == ["a", "at", "ta"]


def test_generate_input_limit(dictionary):
    finder = WordFinder(dictionary, "generate")
    with pytest.raises(InvalidInput):
        finder.find_words("a" * (GENERATIVE_MAX_CHARACTERS + 1), 1)
    assert WordFinder(dictionary, "scan").find_words("a" * (GENERATIVE_MAX_CHARACTERS + 1), 2) == ["aa"]


def test_generate_timeout(dictionary):
    finder = WordFinder(dictionary, GenerativeStrategy(timeout=-1))
    with pytest.raises(SearchTimeout):
        finder.find_words("stop", 1)


def test_unknown_strategy(dictionary):
    with pytest.raises(ValueError):
        WordFinder(dictionary, "brute")


def test_strategy_instances(dictionary):
    assert isinstance(WordFinder(dictionary).strategy, DictionaryScanStrategy)
    assert str(WordFinder(dictionary, "GENERATE").strategy) == "generate"


@pytest.mark.parametrize("characters,min_length,pattern", [
    ("stop", 1, None),
    ("stopa", 2, None),
    ("abcat", 1, None),
    ("paple", 3, None),
    ("zoot", 1, "z__"),
    ("abdac", 1, "_a_"),
])
def test_result_properties(finder, characters, min_length, pattern):
    words = finder.find_words(characters, min_length, pattern)
    letters = LetterMultiset.build(characters)

    assert len(words) == len(set(words))
    assert words == sorted(words, key=length_first_key)
    assert all(is_sub_multiset(word, letters) for word in words)
    if pattern is not None:
        assert all(len(word) == len(pattern) for word in words)
        assert all(word[i] == ch for word in words for i, ch in enumerate(pattern) if ch != "_")
    else:
        assert all(len(word) >= min_length for word in words)
    assert finder.find_words(characters, min_length, pattern) == words


@pytest.mark.parametrize("characters,min_length,pattern", [
    ("stop", 1, None),
    ("aabct", 2, None),
    ("apple", 1, None),
    ("stop", 1, "_o_"),
])
def test_strategies_agree(dictionary, characters, min_length, pattern):
    scan = WordFinder(dictionary, "scan").find_words(characters, min_length, pattern)
    generate = WordFinder(dictionary, "generate").find_words(characters, min_length, pattern)
    assert scan == generate


def test_pagination(finder):
    everything = finder.find_words("stop", 1)
    result = finder.find_words_paginated("stop", 1, offset=2, limit=3)
    assert result.total_matches == len(everything) == 8
    assert result.words == everything[2:5] == ["top", "post", "pots"]
    assert result.offset == 2


def test_pagination_past_end(finder):
    result = finder.find_words_paginated("stop", 1, offset=50, limit=3)
    assert result.words == []
    assert result.total_matches == 8


@pytest.mark.parametrize("limit", [0, -1, MAX_RETURN + 1])
def test_pagination_limit_clamped(finder, limit):
    result = finder.find_words_paginated("stop", 1, offset=-3, limit=limit)
    assert result.offset == 0
    assert result.words == finder.find_words("stop", 1)


def test_generate_pattern_replaces_min_length_before_range_check(dictionary):
    finder = WordFinder(dictionary, "generate")
    assert finder.find_words("ab", 3, pattern="a_") == ["ab"]
    assert finder.find_words("ab", 0, pattern="a_") == ["ab"]


def test_repeated_pattern_letter_accepted_but_never_matches(finder):
    assert finder.find_words("abc", 1, pattern="aa_") == []
