# hybridcrypt

A small, educational text cipher made of two independent schemes:

* **Matrix cipher** (`hybridcrypt.matrix.MatrixCipher`): every character's
  decimal code is split into digits, the digits of the key are added to them,
  and the result is shifted by the rounded-up standard deviation of the matrix
  and folded into non-negative values. Each input character becomes three
  cipher characters.
* **Tree cipher** (`hybridcrypt.tree.TreeCipher`): every character's code is
  multiplied by the digit sum of the key's process id and offset by the key's
  seconds; the digits of that number are placed into a binary tree in level
  order. The tree's in-order and pre-order traversals, taken two digits at a
  time, become the cipher text, and each character's cipher ends with a space.
  Decryption rebuilds the tree and reads it in level order.

The key (`hybridcrypt.keys.Key`) holds a process id, a second and a minute.
`Key.from_environment()` builds one from the current process id and the local
time. The hybrid mode splits the input in half and runs one half through each
cipher; whether the matrix cipher takes the first or the second half depends on
whether the digit sum of the process id is even or odd.

Both ciphers accept ASCII text only and raise `ValueError` for anything else.

This is a toy. It is not secure and must not be used to protect real data.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
hybridcrypt
```

The command prints the digit sum of the process id, prints `enter string`,
reads one line from standard input, and then prints the encrypted text
(with the tree cipher's spaces removed) and the decrypted text.

## Library use

```python
from hybridcrypt.keys import Key
from hybridcrypt.matrix import MatrixCipher
from hybridcrypt.tree import TreeCipher
from hybridcrypt.cli import hybrid_encrypt, split_halves

key = Key(pid=1234, second=7, minute=42)

matrix = MatrixCipher(key)
cipher_text = matrix.encrypt("hi")
print(matrix.decrypt(cipher_text))

tree = TreeCipher(key)
cipher_text = tree.encrypt("hello")
print(tree.decrypt(cipher_text))

first, second = split_halves("hello world")
result = hybrid_encrypt("hello world", key)
print(result.digit_sum, result.encrypted, result.decrypted)
```

A `MatrixCipher` keeps the standard-deviation value it found while encrypting
(`stdev_ceiling`), and a `TreeCipher` keeps the post-order traversals it
recorded. Decrypt with the same cipher object that did the encrypting.

The tree helpers in `hybridcrypt.tree` (`insert_level_order`, `inorder`,
`preorder`, `postorder`, `level_order`, `build_from_preorder_inorder`,
`build_from_inorder_postorder`) can also be used on their own with `Node`.

## What it does not do

The cipher state needed for decryption lives only in the cipher objects; the
package does not save keys or cipher state, so a cipher text cannot be
decrypted later by another process.