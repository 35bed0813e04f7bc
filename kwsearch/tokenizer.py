from collections.abc import Iterable, Iterator

from nltk.tokenize import WhitespaceTokenizer

from kwsearch.globals import PUNCTUATION


def tokenize(text: str) -> Iterator[str]:
    # split text into whitespace-delimited raw tokens, punctuation left attached
    if not text:
        return
    tokenizer = WhitespaceTokenizer()
    for start, end in tokenizer.span_tokenize(text):
        raw = text[start:end]
        if raw:
            yield raw


def strip_trailing_punctuation(word: str) -> str:
    # a single remaining character is never stripped
    while len(word) > 1 and word[-1] in PUNCTUATION:
        word = word[:-1]
    return word


class WordClassifier:
    """Decides whether a raw token is an indexable keyword.

    A keyword is a word that, once stripped of trailing punctuation, is made
    only of letters and is not a noise word. Words are compared
    case-insensitively and keywords are returned lower-cased.
    """

    def __init__(self, noise_words: Iterable[str] = ()):
        self._noise_words: frozenset[str] = frozenset(w.lower() for w in noise_words)

    def get_keyword(self, word: str) -> str | None:
        word = strip_trailing_punctuation(word.strip()).lower()
        if not word or word in self._noise_words:
            return None
        if not word.isalpha():
            return None
        return word

    def is_noise_word(self, word: str) -> bool:
        return word.lower() in self._noise_words


def get_keyword(word: str, noise_words: Iterable[str] = ()) -> str | None:
    return WordClassifier(noise_words).get_keyword(word)
