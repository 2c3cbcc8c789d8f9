import random

import pytest

from cipherbreak.dictionary import Dictionary

WORD_COUNTS = [
    ("THE", 500), ("AND", 300), ("THAT", 120), ("HAVE", 90), ("FOR", 110),
    ("NOT", 80), ("WITH", 90), ("YOU", 100), ("THIS", 85), ("BUT", 70),
    ("HIS", 75), ("FROM", 65), ("THEY", 60), ("SAY", 40), ("HER", 55),
    ("SHE", 50), ("WILL", 45), ("ONE", 60), ("ALL", 55), ("WOULD", 40),
    ("THERE", 45), ("THEIR", 45), ("WHAT", 45), ("OUT", 40), ("ABOUT", 35),
    ("WHO", 35), ("GET", 30), ("WHICH", 35), ("WHEN", 35), ("MAKE", 30),
    ("CAN", 35), ("LIKE", 30), ("TIME", 35), ("JUST", 25), ("HIM", 30),
    ("KNOW", 30), ("TAKE", 25), ("PEOPLE", 25), ("INTO", 25), ("YEAR", 20),
    ("YOUR", 25), ("GOOD", 25), ("SOME", 25), ("COULD", 25), ("THEM", 25),
    ("SEE", 20), ("OTHER", 20), ("THAN", 20), ("THEN", 20), ("NOW", 20),
    ("LOOK", 15), ("ONLY", 20), ("COME", 15), ("ITS", 20), ("OVER", 15),
    ("THINK", 15), ("ALSO", 15), ("BACK", 15), ("AFTER", 15), ("USE", 15),
    ("TWO", 15), ("HOW", 15), ("OUR", 15), ("WORK", 15), ("FIRST", 15),
    ("WELL", 15), ("WAY", 15), ("EVEN", 15), ("NEW", 15), ("WANT", 15),
    ("BECAUSE", 12), ("ANY", 12), ("THESE", 12), ("GIVE", 12), ("DAY", 12),
    ("MOST", 12), ("VERY", 12), ("QUICK", 8), ("BROWN", 8), ("FOX", 8),
    ("JUMPS", 8), ("LAZY", 8), ("DOG", 8), ("ZERO", 6), ("QUIZ", 6),
    ("JAZZ", 5), ("EXTRA", 6),
]


def make_plaintext(dictionary, n_words, seed):
    """Words drawn from the dictionary in proportion to their corpus counts."""
    rng = random.Random(seed)
    words = [w for w, _ in dictionary]
    weights = [c for _, c in dictionary]
    return " ".join(rng.choices(words, weights=weights, k=n_words))


@pytest.fixture
def english():
    return Dictionary(WORD_COUNTS)


@pytest.fixture
def toy():
    return Dictionary([("HELLO", 1), ("WORLD", 1)])


@pytest.fixture
def dict_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("".join(f"{w} {c}\n" for w, c in WORD_COUNTS))
    return str(path)


@pytest.fixture
def sample_text(english):
    def make(n_words, seed=1):
        return make_plaintext(english, n_words, seed)
    return make
