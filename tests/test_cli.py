import io
import os

import pytest

from hybridcrypt.cli import hybrid_encrypt, main, split_halves
from hybridcrypt.keys import Key, digit_sum
from hybridcrypt.matrix import MatrixCipher
from hybridcrypt.tree import TreeCipher


def test_split_halves_odd_length():
    assert split_halves("abcde") == ("ab", "cde")


def test_split_halves_joins_back():
    first, second = split_halves("hello world")
    assert first + second == "hello world"
    assert len(second) - len(first) in (0, 1)


def test_odd_digit_sum_puts_tree_first():
    key = Key(pid=100, second=0, minute=0)
    result = hybrid_encrypt("Hi!Hi!", key)
    assert result.digit_sum == 1
    assert result.decrypted == "Hi!Hi!"
    expected = TreeCipher(key).encrypt("Hi!").replace(" ", "") + MatrixCipher(key).encrypt("Hi!")
    assert result.encrypted == expected


def test_even_digit_sum_puts_matrix_first():
    key = Key(pid=11, second=0, minute=0)
    result = hybrid_encrypt("AH", key)
    assert result.digit_sum == 2
    assert result.decrypted == "AH"
    expected = MatrixCipher(key).encrypt("A") + TreeCipher(key).encrypt("H").replace(" ", "")
    assert result.encrypted == expected


def test_non_ascii_raises():
    with pytest.raises(ValueError):
        hybrid_encrypt("xé", Key(pid=100, second=0, minute=0))


def test_main_with_empty_line(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        str(digit_sum(os.getpid())),
        "enter string",
        "encrypted text:",
        "decrypted text:",
    ]


def test_main_reports_text_lines(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Hello\n"))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "enter string"
    assert lines[2].startswith("encrypted text:")
    assert lines[3].startswith("decrypted text:")


def test_main_rejects_non_ascii(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("é\n"))
    assert main([]) == 1
    assert "not ASCII" in capsys.readouterr().err