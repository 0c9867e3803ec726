"""Binary-tree cipher: digits are stored in a tree and sent as traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from hybridcrypt.keys import Key

# Each recorded postorder is reversed and followed by this many zeros.
_POSTORDER_PADDING = 6


@dataclass(eq=False)
class Node:
    """A binary tree node holding one digit."""

    data: int
    left: Node | None = None
    right: Node | None = None


def insert_level_order(root: Node | None, data: int) -> Node:
    """Insert at the first free place in level order and return the root."""
    if root is None:
        return Node(data)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None:
            node.left = Node(data)
            return root
        queue.append(node.left)
        if node.right is None:
            node.right = Node(data)
            return root
        queue.append(node.right)
    return root


def inorder(root: Node | None) -> list[int]:
    if root is None:
        return []
    return inorder(root.left) + [root.data] + inorder(root.right)


def preorder(root: Node | None) -> list[int]:
    if root is None:
        return []
    return [root.data] + preorder(root.left) + preorder(root.right)


def postorder(root: Node | None) -> list[int]:
    if root is None:
        return []
    return postorder(root.left) + postorder(root.right) + [root.data]


def level_order(root: Node | None) -> list[int]:
    if root is None:
        return []
    values = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        values.append(node.data)
        queue.extend(child for child in (node.left, node.right) if child is not None)
    return values


def _check_lengths(first: list[int], second: list[int]) -> None:
    if len(first) != len(second):
        raise ValueError("traversals must have the same length")


def build_from_preorder_inorder(preorder_values: list[int], inorder_values: list[int]) -> Node | None:
    """Rebuild a tree from its preorder and inorder traversals."""
    _check_lengths(preorder_values, inorder_values)
    count = len(preorder_values)
    marked: set[Node] = set()
    stack: list[Node] = []
    root = None
    pre = ino = 0
    while pre < count:
        while True:
            node = Node(preorder_values[pre])
            if root is None:
                root = node
            if stack:
                top = stack[-1]
                if top in marked:
                    marked.discard(top)
                    top.right = node
                    stack.pop()
                else:
                    top.left = node
            stack.append(node)
            matched = ino < count and preorder_values[pre] == inorder_values[ino]
            pre += 1
            if matched or pre >= count:
                break
        node = None
        while stack and ino < count and stack[-1].data == inorder_values[ino]:
            node = stack.pop()
            ino += 1
        if node is not None:
            marked.add(node)
            stack.append(node)
    return root


def build_from_inorder_postorder(inorder_values: list[int], postorder_values: list[int]) -> Node | None:
    """Rebuild a tree from its inorder and postorder traversals."""
    _check_lengths(inorder_values, postorder_values)
    marked: set[Node] = set()
    stack: list[Node] = []
    root = None
    post = ino = len(inorder_values) - 1
    while post >= 0:
        while True:
            node = Node(postorder_values[post])
            if root is None:
                root = node
            if stack:
                top = stack[-1]
                if top in marked:
                    marked.discard(top)
                    top.left = node
                    stack.pop()
                else:
                    top.right = node
            stack.append(node)
            matched = ino >= 0 and postorder_values[post] == inorder_values[ino]
            post -= 1
            if matched or post < 0:
                break
        node = None
        while stack and ino >= 0 and stack[-1].data == inorder_values[ino]:
            node = stack.pop()
            ino -= 1
        if node is not None:
            marked.add(node)
            stack.append(node)
    return root


def _trailing_zeros(number: int) -> int:
    return sum(number % modulus == 0 for modulus in (10, 100, 1000))


def _number_digits(number: int) -> list[int]:
    digits = [int(d) for d in str(number).rstrip("0")] if number > 0 else []
    return digits + [0] * _trailing_zeros(number)


def _pair_char(high: int, low: int) -> str:
    value = high * 10 + low
    if value < 33:
        value += 100
    return chr(value)


def _cipher_char_digits(char: str) -> list[int]:
    code = ord(char)
    zero_pair = char == "d"
    if code >= 100:
        code -= 100
    digits = [0] if code < 10 else []
    if code > 0:
        digits += [int(d) for d in str(code).rstrip("0")]
    digits += [0] * (1 if zero_pair else _trailing_zeros(code))
    return digits


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class TreeCipher:
    """Encrypts each character as the inorder and preorder walk of a digit tree.

    Decryption needs the postorders recorded by :meth:`encrypt` on the same
    instance.
    """

    def __init__(self, key: Key) -> None:
        self.key = key
        self._postorders: list[list[int]] = []

    def encrypt(self, text: str) -> str:
        """Encrypt ASCII text; every character's cipher ends with a space."""
        multiplier = self.key.digit_sum()
        self._postorders = []
        pieces = []
        for char in text:
            code = ord(char)
            if code > 127:
                raise ValueError(f"character {char!r} is not ASCII")
            root = None
            for digit in _number_digits(code * multiplier + self.key.second):
                root = insert_level_order(root, digit)
            walk = inorder(root) + preorder(root)
            pieces.append("".join(_pair_char(a, b) for a, b in zip(walk[::2], walk[1::2])) + " ")
            self._postorders.append(postorder(root)[::-1] + [0] * _POSTORDER_PADDING)
        return "".join(pieces)

    def decrypt(self, text: str) -> str:
        """Recover the text from a cipher made by this instance."""
        divisor = self.key.digit_sum()
        if divisor == 0:
            raise ValueError("the key's pid has a digit sum of zero")
        chars = []
        for index, segment in enumerate(text.split(" ")[:-1]):
            digits = [d for char in segment for d in _cipher_char_digits(char)]
            half = len(digits) // 2
            if half == 0:
                continue
            if index >= len(self._postorders):
                raise ValueError(f"no tree recorded for character {index}")
            recorded = self._postorders[index]
            if half > len(recorded):
                raise ValueError(f"cipher for character {index} is too long")
            inorder_values = digits[:half]
            preorder_values = digits[half:2 * half]
            if inorder_values == preorder_values:
                root = build_from_inorder_postorder(inorder_values, recorded[:half])
            else:
                root = build_from_preorder_inorder(preorder_values, inorder_values)
            value = int("".join(str(d) for d in level_order(root)))
            chars.append(chr(_truncating_div(value - self.key.second, divisor) % 256))
        return "".join(chars)