"""Digit-matrix cipher keyed by the process id and the clock."""

from __future__ import annotations

import math

from hybridcrypt.keys import Key

_KEY_ROWS = 3
_KEY_COLUMNS = 5
_CELLS = 3
_ZERO = ord("0")


def _trailing_zeros(number: int) -> int:
    return sum(number % modulus == 0 for modulus in (10, 100, 1000))


def _reverse_number(number: int) -> int:
    if number <= 0:
        return 0
    return int(str(number)[::-1])


def key_digit_rows(key: Key) -> list[list[int]]:
    """Lay the digits of pid, minute and second out as rows of a 3x5 matrix.

    Trailing zeros of each number are lost and a number with more than five
    digits does not advance the row, so the next number overwrites it.
    """
    rows = [[-1] * _KEY_COLUMNS for _ in range(_KEY_ROWS)]
    row = 0
    for number in (key.pid, key.minute, key.second):
        remaining = _reverse_number(number)
        for column in range(_KEY_COLUMNS):
            rows[row][column] = remaining % 10
            remaining //= 10
            if remaining == 0:
                row += 1
                break
    return rows


def char_digits(char: str) -> list[int]:
    """Return the decimal digits of a character code, padded to three with -1."""
    code = ord(char)
    if code > 127:
        raise ValueError(f"character {char!r} is not ASCII")
    cells = [int(digit) for digit in str(code).rstrip("0")]
    cells += [0] * _trailing_zeros(code)
    return cells + [-1] * (_CELLS - len(cells))


def _fold(value: int) -> int:
    return 2 * value if value >= 0 else 1 - 2 * value


def _unfold(value: int) -> int:
    return value // 2 if value % 2 == 0 else (1 - value) // 2


class MatrixCipher:
    """Encrypts text as a matrix of character digits shifted by key digits."""

    def __init__(self, key: Key) -> None:
        self.key = key
        self.stdev_ceiling = 0
        self._key_rows = key_digit_rows(key)

    def _key_row(self, index: int) -> list[int]:
        if index < len(self._key_rows):
            return self._key_rows[index]
        return [-1] * _KEY_COLUMNS

    def encrypt(self, text: str) -> str:
        """Encrypt ASCII text into three cipher characters per character.

        The rounded-up deviation of the matrix is kept on the instance and is
        needed again by :meth:`decrypt`.
        """
        sums = [
            [digit + key_digit for digit, key_digit in zip(char_digits(char), self._key_row(index))]
            for index, char in enumerate(text)
        ]
        if not sums:
            self.stdev_ceiling = 0
            return ""
        cells = [value for row in sums for value in row]
        rows = len(sums)
        # The mean is taken over the five key columns per row; the cipher depends on it.
        mean = sum(cells) / (rows * _KEY_COLUMNS)
        variance = sum(value * value for value in cells) / (rows * _CELLS) - mean * mean
        self.stdev_ceiling = math.ceil(math.sqrt(variance))
        return "".join(chr(_ZERO + _fold(value - self.stdev_ceiling)) for value in cells)

    def decrypt(self, crypt: str) -> str:
        """Recover the text from a cipher made with this key and deviation."""
        if len(crypt) % _CELLS:
            raise ValueError("cipher length must be a multiple of three")
        chars = []
        for index, start in enumerate(range(0, len(crypt), _CELLS)):
            value = 0
            for cell, key_digit in zip(crypt[start:start + _CELLS], self._key_row(index)):
                digit = _unfold(ord(cell) - _ZERO) + self.stdev_ceiling - key_digit
                if digit != -1:
                    value = value * 10 + digit
            chars.append(chr(value % 256))
        return "".join(chars)