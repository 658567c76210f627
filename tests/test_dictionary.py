from pathlib import Path

import pytest

from wordsched.dictionary import read_dict_words


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "words.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_keeps_only_lowercase_initial_alphabetic_words(tmp_path):
    path = _write(tmp_path, "apple Banana cherry don't abc1 iPhone\nzebra")
    words = read_dict_words(path)
    assert words == {"apple", "cherry", "iPhone", "zebra"}


def test_reports_count_on_stderr(tmp_path, capsys):
    path = _write(tmp_path, "one two Three")
    read_dict_words(path)
    assert "Read 2 words into dictionary." in capsys.readouterr().err


def test_second_call_is_cached(tmp_path, capsys):
    path = _write(tmp_path, "alpha beta")
    first = read_dict_words(path)
    path.write_text("gamma", encoding="utf-8")
    second = read_dict_words(str(path))
    assert second == first == {"alpha", "beta"}
    assert capsys.readouterr().err.count("Read ") == 1


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError, match="Cannot open dictionary file."):
        read_dict_words(tmp_path / "absent.txt")


def test_non_ascii_words_are_skipped(tmp_path):
    path = _write(tmp_path, "café plain")
    assert read_dict_words(path) == {"plain"}