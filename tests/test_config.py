import json

import pytest

from cipherbreak.config import DEFAULT_CONFIG, AnalysisConfig
from cipherbreak.errors import ConfigurationError


def test_documented_defaults():
    assert DEFAULT_CONFIG.substitution_target == 450
    assert DEFAULT_CONFIG.confidence_threshold == 0.0019
    assert DEFAULT_CONFIG.confidence_increment == 0.001
    assert (DEFAULT_CONFIG.vigenere_min_key_length, DEFAULT_CONFIG.vigenere_max_key_length) == (6, 11)


def test_replace_ignores_none():
    config = DEFAULT_CONFIG.replace(rotx_threshold=5, seed=None)
    assert config.rotx_threshold == 5
    assert config.seed is None
    assert DEFAULT_CONFIG.rotx_threshold == 50


def test_unknown_key_rejected():
    with pytest.raises(ConfigurationError):
        DEFAULT_CONFIG.replace(max_words=3)


def test_invalid_key_length_range():
    with pytest.raises(ConfigurationError):
        AnalysisConfig(vigenere_min_key_length=8, vigenere_max_key_length=6)


def test_negative_budget():
    with pytest.raises(ConfigurationError):
        AnalysisConfig(bigram_attempts=-1)


def test_from_json(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"substitution_target": 300, "seed": 7}))
    config = AnalysisConfig.from_json(str(path))
    assert config.substitution_target == 300
    assert config.seed == 7
    assert config.to_dict()["rotx_threshold"] == 50


def test_from_json_errors(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    with pytest.raises(ConfigurationError):
        AnalysisConfig.from_json(str(bad))
    listed = tmp_path / "list.json"
    listed.write_text("[1, 2]")
    with pytest.raises(ConfigurationError):
        AnalysisConfig.from_json(str(listed))


@pytest.mark.parametrize("data", [
    {"rotx_threshold": "50"},
    {"bigram_attempts": 2.5},
    {"confidence_threshold": "0.002"},
    {"require_threshold": 1},
    {"seed": "7"},
    {"vigenere_max_key_length": True},
])
def test_wrongly_typed_values_rejected(data):
    with pytest.raises(ConfigurationError):
        AnalysisConfig.from_dict(data)


def test_numeric_types_accepted():
    config = AnalysisConfig.from_dict({"confidence_threshold": 1, "seed": None, "require_threshold": False})
    assert config.confidence_threshold == 1
