import pytest

from kwsearch.tokenizer import (
    WordClassifier,
    get_keyword,
    strip_trailing_punctuation,
    tokenize,
)


@pytest.fixture
def classifier() -> WordClassifier:
    return WordClassifier(["the", "A", "And"])


def test_strips_trailing_punctuation_and_lowercases(classifier: WordClassifier) -> None:
    assert classifier.get_keyword("Tree.") == "tree"
    assert classifier.get_keyword("hello?!") == "hello"
    assert classifier.get_keyword("Wait...;") == "wait"


def test_rejects_non_alphabetic(classifier: WordClassifier) -> None:
    assert classifier.get_keyword("5G") is None
    assert classifier.get_keyword("daisy-chain") is None
    assert classifier.get_keyword("'twas") is None
    # leading punctuation is not stripped
    assert classifier.get_keyword("!wow") is None


def test_rejects_noise_words_case_insensitively(classifier: WordClassifier) -> None:
    assert classifier.get_keyword("the") is None
    assert classifier.get_keyword("The,") is None
    assert classifier.get_keyword("a") is None
    assert classifier.get_keyword("AND!") is None


def test_single_character_is_never_stripped(classifier: WordClassifier) -> None:
    assert classifier.get_keyword("I.") == "i"
    assert classifier.get_keyword(".") is None
    assert classifier.get_keyword("?!") is None


def test_empty_and_whitespace_tokens(classifier: WordClassifier) -> None:
    assert classifier.get_keyword("") is None
    assert classifier.get_keyword("   ") is None
    assert classifier.get_keyword("  Rabbit:  ") == "rabbit"


def test_is_noise_word(classifier: WordClassifier) -> None:
    assert classifier.is_noise_word("THE")
    assert not classifier.is_noise_word("tree")


def test_module_level_get_keyword() -> None:
    assert get_keyword("Tree.") == "tree"
    assert get_keyword("the", ["the"]) is None
    assert get_keyword("the") == "the"


def test_strip_trailing_punctuation() -> None:
    assert strip_trailing_punctuation("end.,") == "end"
    assert strip_trailing_punctuation("x!") == "x"
    assert strip_trailing_punctuation("mid.dle") == "mid.dle"


def test_tokenize_splits_on_whitespace() -> None:
    text = "Alice  was\tbeginning,\nto get\r\nvery tired."
    assert list(tokenize(text)) == [
        "Alice",
        "was",
        "beginning,",
        "to",
        "get",
        "very",
        "tired.",
    ]


def test_tokenize_empty() -> None:
    assert list(tokenize("")) == []
    assert list(tokenize(" \n\t ")) == []
