from typing import List, Optional, Tuple

import numpy as np

from .ciphers import VIGENERE, check_key_capacity, decrypt
from .config import DEFAULT_CONFIG, AnalysisConfig
from .errors import NoCandidateFound
from .results import AnalysisResult
from .text import M, from_indices, letter_frequencies, only_letters

# -------------------------------------------------------------
# Per-column rotation estimate
# -------------------------------------------------------------
def chi_squared(observed: np.ndarray, expected: np.ndarray, r: int) -> float:
    """
    sum_i (observed[(i+r) mod 26] - expected[i])^2 / expected[i]

    Letters the model never saw (expected 0) are left out of the sum.
    """
    shifted = np.roll(observed, -r)
    mask = expected > 0
    return float(np.sum((shifted[mask] - expected[mask]) ** 2 / expected[mask]))

def best_rotation(observed: np.ndarray, expected: np.ndarray) -> Tuple[int, float]:
    # strict '<' keeps the smallest rotation on ties
    best_r, best_stat = 0, float('inf')
    for r in range(M):
        stat = chi_squared(observed, expected, r)
        if stat < best_stat:
            best_r, best_stat = r, stat
    return best_r, best_stat

def coset_groups(text: str, L: int) -> List[str]:
    """Group i holds the characters at positions i, i+L, i+2L, ... in order."""
    return [text[i::L] for i in range(L)]

def estimate_key(ciphertext: str, L: int, expected: np.ndarray) -> List[int]:
    return [best_rotation(letter_frequencies(group), expected)[0]
            for group in coset_groups(ciphertext, L)]

# -------------------------------------------------------------
# Breaker
# -------------------------------------------------------------
def break_vigenere(ciphertext: str, scorer, model, config: AnalysisConfig = DEFAULT_CONFIG, *,
                   plaintext_capacity: Optional[int] = None,
                   key_capacity: Optional[int] = None,
                   verbose: int = 0) -> AnalysisResult:
    """
    For each key length from vigenere_min_key_length to vigenere_max_key_length,
    solve every coset group as a single rotation by chi-squared against the
    model's unigram table, decrypt with the assembled key and stop once more
    than `config.vigenere_threshold` dictionary words are found.

    When no length succeeds the last attempt is returned with found=False;
    check `score` to judge it. Ciphertext without letters raises
    NoCandidateFound; a key capacity below vigenere_max_key_length raises
    ConfigurationError before any work is done.
    """
    check_key_capacity(key_capacity, config.vigenere_max_key_length, VIGENERE)
    ciphertext = ciphertext.upper()
    if not only_letters(ciphertext):
        raise NoCandidateFound("ciphertext has no letters to analyse", AnalysisResult(VIGENERE, None, ciphertext))
    expected = model.unigram
    history = []
    scores_by_length = {}
    result = None
    attempts = 0
    for L in range(config.vigenere_min_key_length, config.vigenere_max_key_length + 1):
        key = estimate_key(ciphertext, L, expected)
        pt = decrypt(VIGENERE, key, ciphertext, plaintext_capacity)
        sc = scorer.score(pt)
        attempts += 1
        scores_by_length[L] = sc
        if not history or sc > history[-1]:
            history.append(sc)
        if verbose >= 1:
            print(f"[VIGE] L={L:2d} key={from_indices(key)} score={sc}")
        found = sc > config.vigenere_threshold
        result = AnalysisResult(VIGENERE, key, pt, sc, found, attempts, list(history),
                                {"key_length": L, "scores_by_length": dict(scores_by_length)})
        if found:
            return result

    if verbose >= 1:
        print(f"[VIGE] no key length cleared threshold {config.vigenere_threshold}")
    if config.require_threshold:
        raise NoCandidateFound(f"no key length found more than {config.vigenere_threshold} words", result)
    return result
