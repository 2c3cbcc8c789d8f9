"""
Cipher primitives used by the breakers to turn a candidate key into a
candidate plaintext.

Only the letters A-Z are transformed. Every other character (space,
digits, punctuation, lowercase) is passed through unchanged.
"""
import random
from typing import List, Optional, Sequence, Union

from .errors import ConfigurationError
from .text import ALPHABET, IDX, M

ROTX = "rotx"
VIGENERE = "vigenere"
SUBSTITUTION = "substitution"
CIPHERS = (ROTX, VIGENERE, SUBSTITUTION)

Key = Union[int, str, Sequence[int]]

# --- key handling ---
def parse_vigenere_key(key) -> List[int]:
    """Accept 'LEMON', '11,4,12' or a sequence of ints; return shifts 0..25."""
    if isinstance(key, str):
        key = key.strip().upper()
        if key.isalpha():
            return [IDX[ch] for ch in key]
        try:
            shifts = [int(part) for part in key.replace(",", " ").split()]
        except ValueError:
            raise ConfigurationError(f"invalid Vigenere key: {key!r}")
    else:
        shifts = [int(k) for k in key]
    if not shifts:
        raise ConfigurationError("Vigenere key must not be empty")
    return [k % M for k in shifts]

def parse_substitution_key(key_str: str) -> str:
    """
    Validate a 26-character key string: position i holds the cipher
    letter for plain letter ALPHABET[i].
    """
    key_str = str(key_str).upper()
    if len(key_str) != M or set(key_str) != set(ALPHABET):
        raise ConfigurationError("Substitution key must contain 26 unique letters.")
    return key_str

def generate_substitution_key(rng: Optional[random.Random] = None) -> str:
    """Random substitution key; pass a seeded Random for reproducible keys."""
    rng = rng or random.Random()
    letters = list(ALPHABET)
    rng.shuffle(letters)
    return ''.join(letters)

def format_key(kind: str, key) -> str:
    if kind == ROTX:
        return str(int(key) % M)
    if kind == VIGENERE:
        return ''.join(ALPHABET[k] for k in parse_vigenere_key(key))
    if kind == SUBSTITUTION:
        return parse_substitution_key(key)
    raise ConfigurationError(f"unknown cipher kind: {kind!r}")

# --- transforms ---
def rotate(text: str, shift: int) -> str:
    shift %= M
    return ''.join(ALPHABET[(IDX[ch] + shift) % M] if ch in IDX else ch for ch in text)

def vigenere_shift(text: str, shifts: Sequence[int], sign: int) -> str:
    # the key position is the character position, spaces included
    L = len(shifts)
    return ''.join(
        ALPHABET[(IDX[ch] + sign * shifts[i % L]) % M] if ch in IDX else ch
        for i, ch in enumerate(text)
    )

def substitute(text: str, key: str, inverse: bool = False) -> str:
    table = str.maketrans(key, ALPHABET) if inverse else str.maketrans(ALPHABET, key)
    return text.translate(table)

def _check_capacity(text: str, capacity: Optional[int]):
    if capacity is not None and capacity < len(text):
        raise ConfigurationError(
            f"output buffer too small: need {len(text)} characters, capacity is {capacity}")

def check_key_capacity(key_capacity: Optional[int], needed: int, kind: str):
    if key_capacity is not None and key_capacity < needed:
        raise ConfigurationError(
            f"key buffer too small for {kind}: need {needed}, capacity is {key_capacity}")

def encrypt(kind: str, key: Key, text: str, capacity: Optional[int] = None) -> str:
    _check_capacity(text, capacity)
    if kind == ROTX:
        return rotate(text, int(key))
    if kind == VIGENERE:
        return vigenere_shift(text, parse_vigenere_key(key), +1)
    if kind == SUBSTITUTION:
        return substitute(text, parse_substitution_key(key))
    raise ConfigurationError(f"unknown cipher kind: {kind!r}")

def decrypt(kind: str, key: Key, text: str, capacity: Optional[int] = None) -> str:
    _check_capacity(text, capacity)
    if kind == ROTX:
        return rotate(text, -int(key))
    if kind == VIGENERE:
        return vigenere_shift(text, parse_vigenere_key(key), -1)
    if kind == SUBSTITUTION:
        return substitute(text, parse_substitution_key(key), inverse=True)
    raise ConfigurationError(f"unknown cipher kind: {kind!r}")
