"""
Analysis session: build the frequency model and the dictionary scorer once,
then break any number of ciphertexts with them.

    >>> analyst = Cryptanalyst(load_dictionary("words.txt"))
    >>> result = analyst.analyze("rotx", "KHOOR ZRUOG")
    >>> result.key, result.plaintext
"""
import random
from typing import Optional

from .ciphers import ROTX, SUBSTITUTION, VIGENERE
from .config import DEFAULT_CONFIG, AnalysisConfig
from .errors import ConfigurationError
from .fitness import DictionaryScorer
from .model import FrequencyModel
from .results import AnalysisResult
from .rotx import break_rotx
from .substitution import break_substitution
from .vigenere import break_vigenere


class Cryptanalyst:
    """
    Holds the read-only model and scorer. Every analyze() call creates its
    own search state, so one session can serve several ciphertexts.
    """

    def __init__(self, dictionary, config: Optional[AnalysisConfig] = None, verbose: int = 0):
        self.dictionary = dictionary
        self.config = config or DEFAULT_CONFIG
        self.verbose = verbose
        self.scorer = DictionaryScorer.from_dictionary(dictionary)
        self.model = FrequencyModel.from_dictionary(dictionary, verbose=verbose)

    def analyze(self, kind: str, ciphertext: str, *,
                plaintext_capacity: Optional[int] = None,
                key_capacity: Optional[int] = None,
                config: Optional[AnalysisConfig] = None,
                rng: Optional[random.Random] = None) -> AnalysisResult:
        config = config or self.config
        opts = dict(plaintext_capacity=plaintext_capacity, key_capacity=key_capacity,
                    verbose=self.verbose)
        if kind == ROTX:
            return break_rotx(ciphertext, self.scorer, config, **opts)
        if kind == VIGENERE:
            return break_vigenere(ciphertext, self.scorer, self.model, config, **opts)
        if kind == SUBSTITUTION:
            return break_substitution(ciphertext, self.scorer, self.model, config, rng=rng, **opts)
        raise ConfigurationError(f"unknown cipher kind: {kind!r}")

    def analyze_rotx(self, ciphertext: str, **kwargs) -> AnalysisResult:
        return self.analyze(ROTX, ciphertext, **kwargs)

    def analyze_vigenere(self, ciphertext: str, **kwargs) -> AnalysisResult:
        return self.analyze(VIGENERE, ciphertext, **kwargs)

    def analyze_substitution(self, ciphertext: str, **kwargs) -> AnalysisResult:
        return self.analyze(SUBSTITUTION, ciphertext, **kwargs)
