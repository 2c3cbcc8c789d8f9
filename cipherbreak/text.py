import string
from collections import Counter
from typing import Iterable, List

import numpy as np

ALPHABET = string.ascii_uppercase
M = len(ALPHABET)
IDX = {ch: i for i, ch in enumerate(ALPHABET)}

# -------------------------------------------------------------
# Text utilities
# -------------------------------------------------------------
def only_letters(s: str) -> str:
    return ''.join(ch for ch in s.upper() if ch in IDX)

def to_indices(s: str) -> List[int]:
    return [IDX[ch] for ch in only_letters(s)]

def from_indices(v: Iterable[int]) -> str:
    return ''.join(ALPHABET[i % M] for i in v)

def letter_runs(s: str) -> List[str]:
    """Split text into maximal runs of A-Z; everything else is a separator."""
    runs, cur = [], []
    for ch in s.upper():
        if ch in IDX:
            cur.append(ch)
        elif cur:
            runs.append(''.join(cur))
            cur = []
    if cur:
        runs.append(''.join(cur))
    return runs

def ngrams(s: str, n: int) -> List[str]:
    """n-grams that stay inside a word (never span a space)."""
    out = []
    for run in letter_runs(s):
        out.extend(run[i:i+n] for i in range(len(run) - n + 1))
    return out

# -------------------------------------------------------------
# Observed statistics of a ciphertext
# -------------------------------------------------------------
def letter_counts(s: str) -> np.ndarray:
    counts = np.zeros(M, dtype=np.float64)
    for ch, c in Counter(only_letters(s)).items():
        counts[IDX[ch]] = c
    return counts

def letter_frequencies(s: str) -> np.ndarray:
    """Relative letter frequencies; all zeros when the text has no letters."""
    counts = letter_counts(s)
    total = counts.sum()
    if total == 0:
        return counts
    return counts / total

def ngram_counts(s: str, n: int) -> np.ndarray:
    counts = np.zeros((M,) * n, dtype=np.float64)
    for g, c in Counter(ngrams(s, n)).items():
        counts[tuple(IDX[ch] for ch in g)] += c
    return counts

def first_seen_order(s: str) -> List[str]:
    """Letters in order of first appearance in the text."""
    return list(dict.fromkeys(only_letters(s)))

def index_of_coincidence(text: str) -> float:
    s = only_letters(text)
    N = len(s)
    if N <= 1:
        return 0.0
    counts = Counter(s)
    num = sum(c*(c-1) for c in counts.values())
    den = N*(N-1)
    return num/den if den else 0.0
