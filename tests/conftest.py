import pytest

from wordbreak import build_dictionary


@pytest.fixture
def make_dict():
    def _make(*words):
        return build_dictionary(words)
    return _make


@pytest.fixture
def english():
    return build_dictionary([
        "a", "an", "and", "apple", "at", "car", "cart", "cat", "cats",
        "dog", "hello", "i", "in", "is", "it", "pen", "pine", "pineapple",
        "sat", "the", "there", "world",
    ])


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("Apple\nbanana  cherry\n\ncar cart\n", encoding="utf-8")
    return path
