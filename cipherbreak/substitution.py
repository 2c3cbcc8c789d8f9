"""
Substitution cipher cryptanalysis: frequency seed followed by bigram- and
trigram-guided local search.

Phase 1  pair the model's letters with the ciphertext's letters rank by rank
         (most frequent with most frequent). Each pair gets a distance
         |expected - observed|; a pair below the confidence threshold is
         "matched".
Phase 2  for every unmatched plain letter p, walk the model's bigrams. When p
         shares a bigram with a matched letter, the ciphertext bigrams next to
         that letter's cipher symbol suggest which cipher symbol X stands for
         p. Swap p's symbol with the letter currently holding X, keep the swap
         if the dictionary score improves, otherwise remember it as rejected.
Phase 3  the same walk over trigrams, requiring both other letters of the
         trigram to be matched.

Swaps exchange two existing entries, so the key stays a permutation.
"""
import random
from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from .ciphers import SUBSTITUTION, check_key_capacity, decrypt
from .config import DEFAULT_CONFIG, AnalysisConfig
from .errors import NoCandidateFound
from .model import ranked_frequencies
from .results import AnalysisResult
from .text import ALPHABET, IDX, M, first_seen_order, letter_frequencies, ngram_counts, only_letters


@dataclass
class LetterMatch:
    plain: str
    cipher: str
    distance: float


class LetterMapping:
    """One LetterMatch per plain letter; the cipher symbols form a permutation."""

    def __init__(self, matches: List[LetterMatch]):
        self.entries: Dict[str, LetterMatch] = {m.plain: m for m in matches}
        self.validate()

    @classmethod
    def from_rankings(cls, expected_ranked, observed_ranked) -> "LetterMapping":
        """Pair two RankedFrequencyLists position by position."""
        matches = [LetterMatch(p, c, abs(pf - cf))
                   for (p, pf), (c, cf) in zip(expected_ranked, observed_ranked)]
        return cls(matches)

    def validate(self):
        plains = set(self.entries)
        ciphers = {m.cipher for m in self.entries.values()}
        if plains != set(ALPHABET) or ciphers != set(ALPHABET):
            raise ValueError("letter mapping is not a permutation of A-Z")

    def key(self) -> str:
        """Key string: position i is the cipher letter for plain letter ALPHABET[i]."""
        return ''.join(self.entries[ch].cipher for ch in ALPHABET)

    def cipher_of(self, plain: str) -> str:
        return self.entries[plain].cipher

    def plain_of(self, cipher: str) -> str:
        for m in self.entries.values():
            if m.cipher == cipher:
                return m.plain
        raise KeyError(cipher)

    def is_matched(self, plain: str, threshold: float) -> bool:
        return self.entries[plain].distance < threshold

    def matched_letters(self, threshold: float) -> List[str]:
        return [ch for ch in ALPHABET if self.is_matched(ch, threshold)]

    def swapped_key(self, p: str, q: str) -> str:
        key = list(self.key())
        i, j = IDX[p], IDX[q]
        key[i], key[j] = key[j], key[i]
        return ''.join(key)

    def swap(self, p: str, q: str):
        a, b = self.entries[p], self.entries[q]
        a.cipher, b.cipher = b.cipher, a.cipher


class RejectedKeySet:
    """
    Keys already tried without improvement. Holds at most `capacity` keys;
    when full the oldest key is evicted to make room.
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._keys = OrderedDict()

    def add(self, key: str):
        if self.capacity <= 0 or key in self._keys:
            return
        if len(self._keys) >= self.capacity:
            self._keys.popitem(last=False)
        self._keys[key] = None

    def __contains__(self, key):
        return key in self._keys

    def __len__(self):
        return len(self._keys)


def observed_ranking(ciphertext: str, rng: random.Random):
    """
    Ciphertext letters by frequency. Ties keep first-appearance order;
    letters absent from the ciphertext are appended in a shuffled order.
    """
    order = first_seen_order(ciphertext)
    unseen = [ch for ch in ALPHABET if ch not in order]
    rng.shuffle(unseen)
    return ranked_frequencies(letter_frequencies(ciphertext), order + unseen)


class _Search:
    """Running best key/score shared by the three phases."""

    def __init__(self, ciphertext, scorer, config, mapping, plaintext_capacity, verbose):
        self.ciphertext = ciphertext
        self.scorer = scorer
        self.config = config
        self.mapping = mapping
        self.plaintext_capacity = plaintext_capacity
        self.verbose = verbose
        self.rejected = RejectedKeySet(config.rejected_capacity)
        self.attempts = 0
        self.best_key = mapping.key()
        self.best_plain = decrypt(SUBSTITUTION, self.best_key, ciphertext, plaintext_capacity)
        self.best_score = scorer.score(self.best_plain)
        self.history = [self.best_score]

    def done(self) -> bool:
        return self.best_score > self.config.substitution_target

    def try_swap(self, p: str, q: str, weight: float, tag: str) -> Optional[bool]:
        """Score the key with p and q exchanged; None if it was rejected before."""
        cand = self.mapping.swapped_key(p, q)
        if cand in self.rejected:
            return None
        self.attempts += 1
        pt = decrypt(SUBSTITUTION, cand, self.ciphertext, self.plaintext_capacity)
        sc = self.scorer.score(pt)
        if self.verbose >= 2:
            print(f"[SUBS] {tag} swap {p}<->{q} key={cand} score={sc} best={self.best_score}")
        if sc <= self.best_score:
            self.rejected.add(cand)
            return False
        self.mapping.swap(p, q)
        self.mapping.entries[p].distance *= weight
        self.mapping.entries[q].distance *= weight
        self.best_key, self.best_plain, self.best_score = cand, pt, sc
        self.history.append(sc)
        if self.verbose >= 1:
            print(f"[SUBS] {tag} accepted {p}<->{q}: score {sc}")
        return True


def _partner_symbols(observed: np.ndarray, gram: str, pos: int, mapping: LetterMapping,
                     limit: int) -> List[str]:
    """
    Cipher symbols seen at position `pos` of ciphertext n-grams whose other
    positions hold the cipher symbols of gram's other letters, most frequent first.
    """
    index = tuple(slice(None) if i == pos else IDX[mapping.cipher_of(ch)]
                  for i, ch in enumerate(gram))
    column = observed[index]
    order = np.argsort(-column, kind="stable")
    return [ALPHABET[int(i)] for i in order[:limit] if column[i] > 0]


def _ngram_phase(search: _Search, n: int, ranking, rounds: int, budget: int) -> dict:
    config = search.config
    mapping = search.mapping
    tag = "bigram" if n == 2 else "trigram"
    observed = ngram_counts(search.ciphertext, n)
    threshold = config.confidence_threshold
    start = search.attempts
    rounds_run = 0

    def exhausted():
        return search.done() or search.attempts - start >= budget

    for _ in range(rounds):
        if exhausted():
            break
        rounds_run += 1
        for p in ALPHABET:
            if exhausted():
                break
            if mapping.is_matched(p, threshold):
                continue
            for gram, freq in ranking:
                if exhausted() or mapping.is_matched(p, threshold):
                    break
                if gram.count(p) != 1:
                    continue
                others = [ch for ch in gram if ch != p]
                if not all(mapping.is_matched(ch, threshold) for ch in others):
                    continue
                pos = gram.index(p)
                for sym in _partner_symbols(observed, gram, pos, mapping, config.partner_candidates):
                    if sym == mapping.cipher_of(p):
                        continue
                    q = mapping.plain_of(sym)
                    if search.try_swap(p, q, freq, tag):
                        break
                    if exhausted():
                        break
        threshold += config.confidence_increment
        if search.verbose >= 1:
            print(f"[SUBS] {tag} round {rounds_run} done: best={search.best_score} "
                  f"attempts={search.attempts - start} threshold={threshold:.4f}")
    return {"rounds": rounds_run, "attempts": search.attempts - start, "threshold": threshold}


def break_substitution(ciphertext: str, scorer, model, config: AnalysisConfig = DEFAULT_CONFIG, *,
                       rng: Optional[random.Random] = None,
                       mapping: Optional[LetterMapping] = None,
                       plaintext_capacity: Optional[int] = None,
                       key_capacity: Optional[int] = None,
                       verbose: int = 0) -> AnalysisResult:
    """
    Three-phase search for a 26-letter substitution key. The returned key maps
    plain letter ALPHABET[i] to key[i]. `rng` (default: Random(config.seed))
    orders letters that are absent from the ciphertext.

    A `mapping` resumes the search from that key and its distances instead
    of the monogram seed; it is updated in place. Ciphertext without letters
    raises NoCandidateFound whatever `require_threshold` says.
    """
    check_key_capacity(key_capacity, M, SUBSTITUTION)
    ciphertext = ciphertext.upper()
    if not only_letters(ciphertext):
        raise NoCandidateFound("ciphertext has no letters to analyse", AnalysisResult(SUBSTITUTION, None, ciphertext))

    if mapping is None:
        rng = rng if rng is not None else random.Random(config.seed)
        mapping = LetterMapping.from_rankings(model.ranked_letters(), observed_ranking(ciphertext, rng))
    mapping.validate()
    search = _Search(ciphertext, scorer, config, mapping, plaintext_capacity, verbose)
    if verbose >= 1:
        matched = ''.join(mapping.matched_letters(config.confidence_threshold))
        print(f"[SUBS] seed key={search.best_key} score={search.best_score} matched={matched or '-'}")

    phases = {}
    if not search.done():
        phases["bigram"] = _ngram_phase(search, 2, model.ranked_bigrams(config.bigram_top),
                                        config.bigram_rounds, config.bigram_attempts)
    if not search.done():
        phases["trigram"] = _ngram_phase(search, 3, model.ranked_trigrams(config.trigram_top),
                                         config.trigram_rounds, config.trigram_attempts)

    mapping.validate()
    found = search.done()
    result = AnalysisResult(SUBSTITUTION, search.best_key, search.best_plain, search.best_score,
                            found, search.attempts, list(search.history),
                            {"phases": phases, "rejected": len(search.rejected)})
    if verbose >= 1:
        print(f"[SUBS] final key={search.best_key} score={search.best_score} found={found}")
    if not found and config.require_threshold:
        raise NoCandidateFound(f"no key found more than {config.substitution_target} words", result)
    return result
