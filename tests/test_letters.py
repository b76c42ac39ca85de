import numpy as np
import pytest

from wordfinder.errors import InvalidInput
from wordfinder.letters import LetterMultiset, is_sub_multiset


def test_build_case_folds():
    letters = LetterMultiset.build("CaTa")
    assert letters.count("a") == 2
    assert letters.count("A") == 2
    assert letters.count("c") == 1
    assert letters.count("z") == 0
    assert letters.size() == 4
    assert len(letters) == 4


def test_contains_at_least():
    letters = LetterMultiset.build("aab")
    assert letters.contains_at_least("a", 2)
    assert not letters.contains_at_least("a", 3)
    assert letters.contains_at_least("q", 0)
    assert "b" in letters
    assert "c" not in letters


def test_letters_sorted_with_repeats():
    assert LetterMultiset.build("baBa").letters() == ["a", "a", "b", "b"]


@pytest.mark.parametrize("characters", ["", "ca t", "c4t", "café", "\u212Aat"])
def test_build_rejects_bad_input(characters):
    with pytest.raises(InvalidInput):
        LetterMultiset.build(characters)


def test_build_rejects_too_long():
    with pytest.raises(InvalidInput):
        LetterMultiset.build("abcdef", max_length=5)
    assert LetterMultiset.build("abcde", max_length=5).size() == 5


def test_to_vector():
    vec = LetterMultiset.build("zaaz").to_vector()
    assert vec.shape == (26,)
    assert vec[0] == 2
    assert vec[25] == 2
    assert int(np.sum(vec)) == 4


def test_equality_ignores_order():
    assert LetterMultiset.build("abc") == LetterMultiset.build("CBA")
    assert LetterMultiset.build("abc") != LetterMultiset.build("abb")


def test_is_sub_multiset():
    letters = LetterMultiset.build("stop")
    assert is_sub_multiset("pots", letters)
    assert is_sub_multiset("to", letters)
    assert not is_sub_multiset("toot", letters)
    assert not is_sub_multiset("stops", letters)
    assert not is_sub_multiset("cat", letters)
