import random

import pytest

from cipherbreak.ciphers import (ROTX, SUBSTITUTION, VIGENERE, check_key_capacity, decrypt,
                                 encrypt, format_key, generate_substitution_key,
                                 parse_substitution_key, parse_vigenere_key)
from cipherbreak.errors import ConfigurationError


@pytest.mark.parametrize("k", range(26))
def test_rotx_round_trip(k):
    pt = "THE QUICK BROWN FOX JUMPS OVER THE LAZY DOG"
    assert decrypt(ROTX, k, encrypt(ROTX, k, pt)) == pt


def test_rotx_known_value():
    assert encrypt(ROTX, 3, "HELLO WORLD") == "KHOOR ZRUOG"
    assert decrypt(ROTX, 29, "KHOOR ZRUOG") == "HELLO WORLD"


def test_non_letters_pass_through():
    assert encrypt(ROTX, 1, "A-1, z!") == "B-1, z!"
    assert encrypt(VIGENERE, "B", "A 9.") == "B 9."


def test_vigenere_key_position_counts_spaces():
    # position 1 is a space but still consumes key letter 'C'
    assert encrypt(VIGENERE, "BC", "A A") == "B B"
    assert encrypt(VIGENERE, [1, 2], "AAAA") == "BCBC"


def test_vigenere_round_trip():
    pt = "ATTACK AT DAWN"
    ct = encrypt(VIGENERE, "LEMON", pt)
    assert ct != pt
    assert decrypt(VIGENERE, [11, 4, 12, 14, 13], ct) == pt


def test_parse_vigenere_key_forms():
    assert parse_vigenere_key("lemon") == [11, 4, 12, 14, 13]
    assert parse_vigenere_key("11, 4,12") == [11, 4, 12]
    assert parse_vigenere_key([27, -1]) == [1, 25]
    with pytest.raises(ConfigurationError):
        parse_vigenere_key("")
    with pytest.raises(ConfigurationError):
        parse_vigenere_key("AB1")


def test_substitution_round_trip():
    key = generate_substitution_key(random.Random(7))
    pt = "PACK MY BOX WITH FIVE DOZEN LIQUOR JUGS"
    ct = encrypt(SUBSTITUTION, key, pt)
    assert decrypt(SUBSTITUTION, key, ct) == pt


def test_substitution_key_direction():
    key = "BCDEFGHIJKLMNOPQRSTUVWXYZA"
    assert encrypt(SUBSTITUTION, key, "AZ") == "BA"
    assert decrypt(SUBSTITUTION, key, "BA") == "AZ"


def test_generate_substitution_key_is_seeded():
    a = generate_substitution_key(random.Random(3))
    b = generate_substitution_key(random.Random(3))
    assert a == b
    assert sorted(a) == [chr(ord("A") + i) for i in range(26)]


def test_invalid_substitution_key():
    with pytest.raises(ConfigurationError):
        parse_substitution_key("ABC")
    with pytest.raises(ConfigurationError):
        parse_substitution_key("A" * 26)


def test_output_capacity_too_small():
    with pytest.raises(ConfigurationError):
        decrypt(ROTX, 1, "HELLO", capacity=4)
    assert decrypt(ROTX, 1, "IFMMP", capacity=5) == "HELLO"


def test_key_capacity():
    check_key_capacity(None, 26, SUBSTITUTION)
    check_key_capacity(26, 26, SUBSTITUTION)
    with pytest.raises(ConfigurationError):
        check_key_capacity(25, 26, SUBSTITUTION)


def test_unknown_cipher_kind():
    with pytest.raises(ConfigurationError):
        encrypt("playfair", "KEY", "TEXT")
    with pytest.raises(ConfigurationError):
        format_key("playfair", "KEY")


def test_format_key():
    assert format_key(ROTX, 29) == "3"
    assert format_key(VIGENERE, [11, 4, 12, 14, 13]) == "LEMON"
