from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .ciphers import format_key


@dataclass
class AnalysisResult:
    cipher: str
    key: Any
    plaintext: str
    # number of dictionary words found in the plaintext; higher is better
    score: int = 0
    # True when the score cleared the cipher's threshold / target
    found: bool = False
    attempts: int = 0
    # best score after each accepted improvement
    history: list[int] = field(default_factory=list)
    meta: dict[str, Any] = field(default_factory=dict)

    def key_text(self) -> str:
        if self.key is None:
            return "-"
        return format_key(self.cipher, self.key)

    def to_dict(self) -> dict[str, Any]:
        return {
            "cipher": self.cipher,
            "key": None if self.key is None else self.key_text(),
            "plaintext": self.plaintext,
            "score": self.score,
            "found": self.found,
            "attempts": self.attempts,
            "history": list(self.history),
            "meta": dict(self.meta),
        }
