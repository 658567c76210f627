"""Find dictionary words matching a wordle-style pattern."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence, Set
from string import ascii_lowercase

from wordsched.dictionary import read_dict_words

BLANK = "-"
DICTIONARY_FILE = "dict-eng.txt"


def _candidates(word: str, position: int, floating: str) -> Iterator[str]:
    """Yield every filling of the blanks in ``word`` from ``position`` on."""
    if position == len(word):
        yield word
        return
    if word[position] != BLANK:
        yield from _candidates(word, position + 1, floating)
        return

    head, tail = word[:position], word[position + 1:]
    if word.count(BLANK) == len(floating):
        for index, letter in enumerate(floating):
            remaining = floating[:index] + floating[index + 1:]
            yield from _candidates(head + letter + tail, position + 1, remaining)
    else:
        for letter in ascii_lowercase:
            remaining = floating.replace(letter, "", 1)
            yield from _candidates(head + letter + tail, position + 1, remaining)


def wordle(pattern: str, floating: str, dictionary: Set[str]) -> set[str]:
    """Return all words in ``dictionary`` that fit ``pattern``.

    ``pattern`` holds fixed letters and ``-`` for open positions; the
    letters of ``floating`` must be placed somewhere in the open positions.
    """
    return {word for word in _candidates(pattern, 0, floating) if word in dictionary}


def main(argv: Sequence[str] | None = None) -> int:
    """Print every dictionary word matching the pattern given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(
            'Please provide an initial string (e.g. "s---ng")'
            " and optional string of floating characters."
        )
        return 1
    try:
        dictionary = read_dict_words(DICTIONARY_FILE)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    pattern = args[0]
    floating = args[1] if len(args) > 1 else ""
    for word in sorted(wordle(pattern, floating, dictionary)):
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())