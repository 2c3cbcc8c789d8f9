from typing import Iterable

from .text import only_letters


class DictionaryScorer:
    """
    Fitness of a candidate plaintext: how many dictionary words occur in it.

    Plain substring containment, not word-boundary aware, so a word found
    inside a longer word also counts ("HE" in "THE"). Each dictionary word
    counts at most once; the score is not normalised by text length.
    """

    def __init__(self, words: Iterable[str]):
        # words without letters can never match a decryption
        self.words = [w.upper() for w in dict.fromkeys(words) if only_letters(w)]

    @classmethod
    def from_dictionary(cls, dictionary) -> "DictionaryScorer":
        return cls(dictionary.words())

    def score(self, text: str) -> int:
        text = text.upper()
        return sum(1 for w in self.words if w in text)

    def found_words(self, text: str):
        text = text.upper()
        return [w for w in self.words if w in text]

    def __len__(self):
        return len(self.words)
