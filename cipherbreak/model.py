"""
Letter statistics of the reference language.

The unigram, bigram and trigram tables are dense numpy arrays indexed by
letter code (A=0 .. Z=25), e.g. ``bigram[IDX['T'], IDX['H']]``. Each table
is divided by its own total; a table whose total is zero is kept as raw
zeros and reading it raises EmptyModelError.
"""
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .errors import EmptyModelError
from .text import ALPHABET, IDX, M, to_indices

_NAMES = {1: "unigram", 2: "bigram", 3: "trigram"}


def ranked_frequencies(freqs, order: Optional[Sequence[str]] = None) -> List[Tuple[str, float]]:
    """
    RankedFrequencyList: (letter, frequency) pairs, highest frequency first.

    Equal frequencies keep their position in `order` (encounter order,
    alphabetical when not given); Python's sort is stable so the first
    encountered letter wins.
    """
    if isinstance(freqs, dict):
        lookup = freqs
    else:
        lookup = {ALPHABET[i]: float(freqs[i]) for i in range(M)}
    order = list(order) if order is not None else list(ALPHABET)
    seen = set(order)
    order.extend(ch for ch in ALPHABET if ch not in seen)
    pairs = [(ch, float(lookup.get(ch, 0.0))) for ch in order]
    return sorted(pairs, key=lambda kv: kv[1], reverse=True)


def ranked_ngrams(table: np.ndarray, top: Optional[int] = None) -> List[Tuple[str, float]]:
    """Non-zero n-grams of a table, most frequent first, ties in lexicographic order."""
    flat = table.ravel()
    nz = np.flatnonzero(flat)
    # stable sort on -freq keeps lexicographic order among ties
    ranked = nz[np.argsort(-flat[nz], kind="stable")]
    if top is not None:
        ranked = ranked[:top]
    n = table.ndim
    out = []
    for code in ranked:
        letters = np.unravel_index(int(code), (M,) * n)
        out.append((''.join(ALPHABET[int(i)] for i in letters), float(flat[code])))
    return out


class FrequencyModel:
    """Unigram/bigram/trigram probabilities built once from a Dictionary."""

    def __init__(self, unigram_counts, bigram_counts, trigram_counts):
        self._tables: Dict[int, np.ndarray] = {}
        self._totals: Dict[int, float] = {}
        for n, counts in ((1, unigram_counts), (2, bigram_counts), (3, trigram_counts)):
            counts = np.asarray(counts, dtype=np.float64)
            if counts.shape != (M,) * n:
                raise ValueError(f"{_NAMES[n]} table must have shape {(M,) * n}, got {counts.shape}")
            total = float(counts.sum())
            table = counts / total if total > 0 else counts.copy()
            table.setflags(write=False)
            self._tables[n] = table
            self._totals[n] = total

    @classmethod
    def from_dictionary(cls, dictionary, verbose: int = 0) -> "FrequencyModel":
        uni = np.zeros(M, dtype=np.float64)
        bi = np.zeros((M, M), dtype=np.float64)
        tri = np.zeros((M, M, M), dtype=np.float64)
        for word, count in dictionary:
            idx = np.array(to_indices(word), dtype=np.intp)
            if idx.size == 0:
                continue
            np.add.at(uni, idx, count)
            if idx.size >= 2:
                np.add.at(bi, (idx[:-1], idx[1:]), count)
            if idx.size >= 3:
                np.add.at(tri, (idx[:-2], idx[1:-1], idx[2:]), count)
        model = cls(uni, bi, tri)
        if verbose >= 1:
            print(f"[MODEL] {len(dictionary)} words -> unigram total {model.total(1):.0f}, "
                  f"bigram total {model.total(2):.0f}, trigram total {model.total(3):.0f}")
        return model

    def total(self, n: int) -> float:
        return self._totals[n]

    def is_empty(self, n: int) -> bool:
        return self._totals[n] == 0

    def table(self, n: int) -> np.ndarray:
        if self.is_empty(n):
            raise EmptyModelError(f"{_NAMES[n]} table has zero total count")
        return self._tables[n]

    @property
    def unigram(self) -> np.ndarray:
        return self.table(1)

    @property
    def bigram(self) -> np.ndarray:
        return self.table(2)

    @property
    def trigram(self) -> np.ndarray:
        return self.table(3)

    def probability(self, gram: str) -> float:
        """Probability of a 1-, 2- or 3-letter string, e.g. model.probability('TH')."""
        gram = gram.upper()
        return float(self.table(len(gram))[tuple(IDX[ch] for ch in gram)])

    def ranked_letters(self) -> List[Tuple[str, float]]:
        return ranked_frequencies(self.unigram)

    def ranked_bigrams(self, top: Optional[int] = None) -> List[Tuple[str, float]]:
        return ranked_ngrams(self.bigram, top)

    def ranked_trigrams(self, top: Optional[int] = None) -> List[Tuple[str, float]]:
        return ranked_ngrams(self.trigram, top)
