"""Command line: encrypt a line with both ciphers and decrypt it again."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from hybridcrypt.keys import Key
from hybridcrypt.matrix import MatrixCipher
from hybridcrypt.tree import TreeCipher


@dataclass(frozen=True)
class HybridResult:
    """Outcome of encrypting one text with both ciphers."""

    digit_sum: int
    encrypted: str
    decrypted: str


def split_halves(text: str) -> tuple[str, str]:
    """Split text in two; the second half gets the odd character."""
    middle = len(text) // 2
    return text[:middle], text[middle:]


def hybrid_encrypt(text: str, key: Key) -> HybridResult:
    """Encrypt one half with each cipher, ordered by the pid's digit parity."""
    parity = key.digit_sum()
    first, second = split_halves(text)
    matrix = MatrixCipher(key)
    tree = TreeCipher(key)
    if parity % 2 == 0:
        matrix_part = matrix.encrypt(first)
        tree_part = tree.encrypt(second)
        encrypted = matrix_part + tree_part.replace(" ", "")
        decrypted = matrix.decrypt(matrix_part) + tree.decrypt(tree_part)
    else:
        tree_part = tree.encrypt(first)
        matrix_part = matrix.encrypt(second)
        encrypted = tree_part.replace(" ", "") + matrix_part
        decrypted = tree.decrypt(tree_part) + matrix.decrypt(matrix_part)
    return HybridResult(digit_sum=parity, encrypted=encrypted, decrypted=decrypted)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hybridcrypt",
        description="Read a line, encrypt it with a session key and decrypt it again.",
    )
    parser.parse_args(argv)
    key = Key.from_environment()
    print(key.digit_sum())
    print("enter string")
    line = sys.stdin.readline().rstrip("\n")
    try:
        result = hybrid_encrypt(line, key)
    except ValueError as exc:
        print(f"hybridcrypt: {exc}", file=sys.stderr)
        return 1
    print(f"encrypted text:{result.encrypted}")
    print(f"decrypted text:{result.decrypted}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())