import pytest

from wordfinder.dictionary import Dictionary
from wordfinder.wordfinder import WordFinder

WORDS = [
    "a", "at", "ta", "aa", "ab", "ba",
    "act", "cat", "bad", "cab",
    "opt", "pot", "top", "post", "pots", "spot", "stop", "tops",
    "zoo", "apple",
]


@pytest.fixture
def dictionary():
    return Dictionary(WORDS)


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return path


@pytest.fixture(params=["scan", "generate"])
def finder(request, dictionary):
    return WordFinder(dictionary, request.param)
