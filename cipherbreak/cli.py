#!/usr/bin/env python3
import argparse
import json
import sys

from .ciphers import CIPHERS, ROTX, SUBSTITUTION, VIGENERE, decrypt, encrypt, format_key
from .config import AnalysisConfig
from .dictionary import load_dictionary
from .engine import Cryptanalyst
from .errors import NoCandidateFound
from .model import FrequencyModel
from .text import ALPHABET, index_of_coincidence, letter_counts, letter_frequencies

THRESHOLD_FIELD = {
    ROTX: "rotx_threshold",
    VIGENERE: "vigenere_threshold",
    SUBSTITUTION: "substitution_target",
}

# -------------------------------------------------------------
# Helpers
# -------------------------------------------------------------
def read_text(args, name="ciphertext") -> str:
    inline = getattr(args, name, None)
    if inline is not None and args.file:
        raise ValueError(f"Provide either --{name} or --file, not both.")
    if args.file:
        if args.file == "-":
            return sys.stdin.read().rstrip("\n")
        with open(args.file, "r", encoding="utf-8") as f:
            return f.read().rstrip("\n")
    if inline is None:
        raise ValueError(f"Missing required input: --{name} or --file")
    return inline

def build_config(args, kind: str) -> AnalysisConfig:
    config = AnalysisConfig.from_json(args.config) if args.config else AnalysisConfig()
    overrides = {THRESHOLD_FIELD[kind]: args.threshold}
    if kind == SUBSTITUTION:
        overrides["seed"] = args.seed
    if args.require:
        overrides["require_threshold"] = True
    return config.replace(**overrides)

def print_result(result, as_json: bool):
    if as_json:
        print(json.dumps(result.to_dict(), indent=2))
        return
    print(f"=== {result.cipher} Attack ===")
    if result.cipher == VIGENERE and result.key is not None:
        print(f"Key length: {len(result.key)}")
    print(f"Recovered key: {result.key_text()}")
    print(f"Score: {result.score} dictionary words ({'threshold cleared' if result.found else 'below threshold'})")
    print(f"Candidates scored: {result.attempts}")
    print("Decryption:")
    print(result.plaintext)

# -------------------------------------------------------------
# Commands
# -------------------------------------------------------------
def cmd_attack(args):
    kind = args.cmd
    config = build_config(args, kind)
    ciphertext = read_text(args)
    analyst = Cryptanalyst(load_dictionary(args.dict), config, verbose=args.verbose)
    try:
        result = analyst.analyze(kind, ciphertext)
    except NoCandidateFound as e:
        print_result(e.result, args.json)
        raise
    print_result(result, args.json)

def cmd_transform(args):
    text = read_text(args, "text")
    fn = encrypt if args.cmd == "encrypt" else decrypt
    key = int(args.key) if args.cipher == ROTX else args.key
    print(f"Key: {format_key(args.cipher, key)}")
    print(fn(args.cipher, key, text.upper()))

def cmd_freq(args):
    text = read_text(args, "text")
    counts = letter_counts(text)
    observed = letter_frequencies(text)
    expected = None
    if args.dict:
        expected = FrequencyModel.from_dictionary(load_dictionary(args.dict), verbose=args.verbose).unigram
    print(f"Letters: {int(counts.sum())}")
    print(f"Index of coincidence: {index_of_coincidence(text):.4f}")
    for i in sorted(range(len(ALPHABET)), key=lambda i: -counts[i]):
        line = f"{ALPHABET[i]}: {int(counts[i]):5d}  {observed[i]:.4f}"
        if expected is not None:
            line += f"  model {expected[i]:.4f}"
        print(line)
    if args.plot:
        from .plot import plot_letter_frequencies
        plot_letter_frequencies(observed, expected, outplot=args.out)
        if args.out:
            print(f"Plot written to {args.out}")

# -------------------------------------------------------------
# CLI
# -------------------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cipherbreak",
                                     description="Ciphertext-only cryptanalysis for ROT-X, Vigenere and substitution ciphers")
    sub = parser.add_subparsers(dest="cmd", required=True)

    def add_text(p, name):
        p.add_argument(f"--{name}", "-c" if name == "ciphertext" else "-t", help=f"{name.capitalize()} (inline)")
        p.add_argument("--file", "-f", help=f"Read {name} from file ('-' = stdin)")
        p.add_argument("--verbose", type=int, default=0, help="0..2 (2 = every candidate)")

    helps = {
        ROTX: "Try all 26 rotations, keep the first that finds enough dictionary words",
        VIGENERE: "Per-column chi-squared for key lengths 6..11",
        SUBSTITUTION: "Frequency seed + bigram/trigram guided local search",
    }
    for kind in CIPHERS:
        p = sub.add_parser(kind, help=helps[kind])
        add_text(p, "ciphertext")
        p.add_argument("--dict", "-d", required=True, help="Dictionary file: WORD COUNT per line")
        p.add_argument("--config", help="JSON file with AnalysisConfig overrides")
        p.add_argument("--threshold", type=int, help="Dictionary words needed to accept a key")
        if kind == SUBSTITUTION:
            p.add_argument("--seed", type=int, help="Seed for tie-breaking (reproducible runs)")
        p.add_argument("--require", action="store_true", help="Exit with an error if no key clears the threshold")
        p.add_argument("--json", action="store_true", help="Print the result as JSON")
        p.set_defaults(func=cmd_attack)

    for name in ("encrypt", "decrypt"):
        p = sub.add_parser(name, help=f"{name.capitalize()} text with a known key")
        add_text(p, "text")
        p.add_argument("--cipher", choices=CIPHERS, required=True)
        p.add_argument("--key", "-k", required=True,
                       help="rotx: integer; vigenere: letters or comma-separated shifts; substitution: 26 letters")
        p.set_defaults(func=cmd_transform)

    p = sub.add_parser("freq", help="Letter frequencies and index of coincidence of a text")
    add_text(p, "text")
    p.add_argument("--dict", "-d", help="Compare with the dictionary's unigram model")
    p.add_argument("--plot", action="store_true", help="Draw observed vs model frequencies (matplotlib)")
    p.add_argument("--out", help="Save the plot to this file instead of showing it")
    p.set_defaults(func=cmd_freq)
    return parser

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        args.func(args)
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
