from typing import Optional

from .ciphers import ROTX, check_key_capacity, decrypt
from .config import DEFAULT_CONFIG, AnalysisConfig
from .errors import NoCandidateFound
from .results import AnalysisResult
from .text import M, only_letters


def break_rotx(ciphertext: str, scorer, config: AnalysisConfig = DEFAULT_CONFIG, *,
               plaintext_capacity: Optional[int] = None,
               key_capacity: Optional[int] = None,
               verbose: int = 0) -> AnalysisResult:
    """
    Try all 26 rotations in ascending order and stop at the first one whose
    decryption contains more than `config.rotx_threshold` dictionary words.
    Without such a rotation the best-scoring one is returned (found=False),
    lowest rotation first on equal scores. Ciphertext without letters raises
    NoCandidateFound whatever `require_threshold` says.
    """
    check_key_capacity(key_capacity, 1, ROTX)
    ciphertext = ciphertext.upper()
    if not only_letters(ciphertext):
        raise NoCandidateFound("ciphertext has no letters to analyse", AnalysisResult(ROTX, None, ciphertext))
    best = None
    history = []
    attempts = 0
    for k in range(M):
        pt = decrypt(ROTX, k, ciphertext, plaintext_capacity)
        sc = scorer.score(pt)
        attempts += 1
        if verbose >= 2:
            print(f"[ROTX] k={k:2d} score={sc}")
        if best is None or sc > best[1]:
            best = (k, sc, pt)
            history.append(sc)
        if sc > config.rotx_threshold:
            if verbose >= 1:
                print(f"[ROTX] rotation {k} cleared threshold {config.rotx_threshold} with {sc} words")
            return AnalysisResult(ROTX, k, pt, sc, True, attempts, history)

    k, sc, pt = best
    result = AnalysisResult(ROTX, k, pt, sc, False, attempts, history)
    if verbose >= 1:
        print(f"[ROTX] no rotation cleared threshold {config.rotx_threshold}; best k={k} score={sc}")
    if config.require_threshold:
        raise NoCandidateFound(f"no rotation found more than {config.rotx_threshold} words", result)
    return result
