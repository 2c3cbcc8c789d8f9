"""Ciphertext-only cryptanalysis of ROT-X, Vigenere and substitution ciphers."""
from .ciphers import ROTX, SUBSTITUTION, VIGENERE, decrypt, encrypt
from .config import AnalysisConfig
from .dictionary import Dictionary, load_dictionary
from .engine import Cryptanalyst
from .errors import ConfigurationError, CryptanalysisError, EmptyModelError, NoCandidateFound
from .fitness import DictionaryScorer
from .model import FrequencyModel
from .results import AnalysisResult

__version__ = "0.1.0"
