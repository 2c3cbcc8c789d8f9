"""Reference word list with corpus counts."""
from typing import Iterable, Iterator, List, Tuple


class Dictionary:
    """Indexed (word, corpus count) pairs. Words are stored upper-cased."""

    def __init__(self, entries: Iterable[Tuple[str, int]]):
        self._entries: List[Tuple[str, int]] = []
        for word, count in entries:
            word = word.strip().upper()
            if not word:
                continue
            count = int(count)
            if count <= 0:
                raise ValueError(f"corpus count for {word!r} must be positive (got {count})")
            self._entries.append((word, count))

    def size(self) -> int:
        return len(self._entries)

    def word_at(self, index: int) -> Tuple[str, int]:
        if not 0 <= index < len(self._entries):
            raise IndexError(f"dictionary index {index} out of range 0..{len(self._entries) - 1}")
        return self._entries[index]

    def words(self) -> List[str]:
        return [w for w, _ in self._entries]

    def __len__(self):
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[str, int]]:
        return iter(self._entries)


def parse_dictionary_lines(lines: Iterable[str]) -> Dictionary:
    """
    Parse 'WORD COUNT' lines (whitespace, tab or comma separated).
    Blank lines and '#' comments are skipped; a missing count means 1.
    """
    entries = []
    for lineno, line in enumerate(lines, 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.replace(",", " ").split()
        word = parts[0]
        if len(parts) == 1:
            entries.append((word, 1))
            continue
        try:
            count = int(parts[1])
        except ValueError:
            raise ValueError(f"line {lineno}: invalid count {parts[1]!r}")
        entries.append((word, count))
    return Dictionary(entries)


def load_dictionary(path: str) -> Dictionary:
    with open(path, "r", encoding="utf-8") as f:
        return parse_dictionary_lines(f)
