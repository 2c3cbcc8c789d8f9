import numpy as np
import pytest

from cipherbreak.text import (first_seen_order, from_indices, index_of_coincidence, letter_counts,
                              letter_frequencies, letter_runs, ngram_counts, ngrams, only_letters,
                              to_indices, IDX)


def test_letter_helpers():
    assert only_letters("Hi, there!") == "HITHERE"
    assert to_indices("abz") == [0, 1, 25]
    assert from_indices([0, 27]) == "AB"


def test_ngrams_stay_inside_words():
    assert letter_runs("THE CAT-SAT") == ["THE", "CAT", "SAT"]
    assert ngrams("THE CAT", 2) == ["TH", "HE", "CA", "AT"]
    assert ngrams("AB C", 3) == []


def test_counts_and_frequencies():
    counts = letter_counts("AAB ")
    assert counts[IDX["A"]] == 2 and counts[IDX["B"]] == 1
    assert letter_frequencies("AAB").sum() == pytest.approx(1.0)


def test_frequencies_of_letterless_text_are_zero():
    freqs = letter_frequencies("   ")
    assert not np.isnan(freqs).any()
    assert freqs.sum() == 0


def test_ngram_counts():
    counts = ngram_counts("THE THEN", 3)
    assert counts[IDX["T"], IDX["H"], IDX["E"]] == 2
    assert counts[IDX["H"], IDX["E"], IDX["N"]] == 1
    assert counts.sum() == 3


def test_first_seen_order():
    assert first_seen_order("BAAB C") == ["B", "A", "C"]


def test_index_of_coincidence():
    assert index_of_coincidence("AAAA") == 1.0
    assert index_of_coincidence("A") == 0.0
    assert index_of_coincidence("ABCD") == 0.0
