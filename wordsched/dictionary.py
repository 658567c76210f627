"""Loading of the English word list used by the wordle solver."""

from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path


def _is_word(token: str) -> bool:
    """Return True for lower-initial tokens made only of ASCII letters."""
    if token[0].isascii() and token[0].isupper():
        return False
    return token.isascii() and token.isalpha()


@lru_cache(maxsize=None)
def _load(path: Path) -> frozenset[str]:
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise OSError("Cannot open dictionary file.") from exc
    accepted = [token for token in text.split() if _is_word(token)]
    print(f"Read {len(accepted)} words into dictionary.", file=sys.stderr)
    return frozenset(accepted)


def read_dict_words(filename: str | Path) -> frozenset[str]:
    """Read whitespace-separated words from a file, once per file.

    Words starting with an upper-case letter and words containing anything
    other than letters are skipped. Later calls with the same file return
    the cached result.
    """
    return _load(Path(filename).resolve())