"""
Tunable thresholds and search budgets.

The defaults were calibrated against a dictionary of a few thousand common
English words; a much smaller or larger dictionary needs different word
thresholds, since the fitness score counts dictionary words found.
"""
from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass
from typing import Any, Optional

from .errors import ConfigurationError

_FLOAT_FIELDS = ("confidence_threshold", "confidence_increment")


@dataclass(frozen=True)
class AnalysisConfig:
    # ROT-X: stop at the first rotation finding more than this many words
    rotx_threshold: int = 50

    # Vigenere
    vigenere_threshold: int = 50
    vigenere_min_key_length: int = 6
    vigenere_max_key_length: int = 11

    # Substitution: stop once more than this many words are found
    substitution_target: int = 450
    # a letter is "matched" while its distance is below this
    confidence_threshold: float = 0.0019
    # added to the threshold after every full round
    confidence_increment: float = 0.001
    bigram_rounds: int = 5
    bigram_attempts: int = 2000
    bigram_top: int = 60
    trigram_rounds: int = 5
    trigram_attempts: int = 2000
    trigram_top: int = 150
    # observed cipher symbols proposed per model n-gram
    partner_candidates: int = 3
    rejected_capacity: int = 10000
    # seed for the substitution tie-break shuffle; None = unseeded
    seed: Optional[int] = None

    # raise NoCandidateFound instead of returning a best-effort result
    require_threshold: bool = False

    def __post_init__(self):
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if f.name == "require_threshold":
                expected, ok = "a boolean", isinstance(value, bool)
            elif f.name in _FLOAT_FIELDS:
                expected, ok = "a number", isinstance(value, (int, float)) and not isinstance(value, bool)
            else:
                expected = "an integer"
                ok = (value is None and f.name == "seed") or (isinstance(value, int) and not isinstance(value, bool))
            if not ok:
                raise ConfigurationError(f"{f.name} must be {expected}, got {value!r}")
        if self.vigenere_min_key_length < 1 or self.vigenere_max_key_length < self.vigenere_min_key_length:
            raise ConfigurationError("Vigenere key length range must satisfy 1 <= min <= max")
        for name in ("bigram_rounds", "bigram_attempts", "trigram_rounds", "trigram_attempts",
                     "bigram_top", "trigram_top", "partner_candidates", "rejected_capacity"):
            if getattr(self, name) < 0:
                raise ConfigurationError(f"{name} must be non-negative")

    def replace(self, **overrides: Any) -> "AnalysisConfig":
        """Copy with some fields changed; None values are ignored."""
        overrides = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(overrides) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise ConfigurationError(f"unknown configuration keys: {', '.join(sorted(unknown))}")
        return dataclasses.replace(self, **overrides)

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisConfig":
        if not isinstance(data, dict):
            raise ConfigurationError("configuration must be a JSON object")
        return cls().replace(**data)

    @classmethod
    def from_json(cls, path: str) -> "AnalysisConfig":
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"{path}: invalid JSON ({e})")
        return cls.from_dict(data)

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


DEFAULT_CONFIG = AnalysisConfig()
