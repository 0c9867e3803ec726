import pytest
from hypothesis import given
from hypothesis import strategies as st

from hybridcrypt.keys import Key
from hybridcrypt.tree import (
    TreeCipher,
    build_from_inorder_postorder,
    build_from_preorder_inorder,
    inorder,
    insert_level_order,
    level_order,
    postorder,
    preorder,
)

KEY = Key(pid=100, second=0, minute=0)

permutations = st.integers(min_value=1, max_value=12).flatmap(
    lambda n: st.permutations(list(range(n)))
)
ascii_text = st.text(alphabet=st.characters(max_codepoint=127), max_size=15)


def _tree(values):
    root = None
    for value in values:
        root = insert_level_order(root, value)
    return root


def test_traversals_of_complete_tree():
    root = _tree([1, 2, 3, 4, 5])
    assert level_order(root) == [1, 2, 3, 4, 5]
    assert inorder(root) == [4, 2, 5, 1, 3]
    assert preorder(root) == [1, 2, 4, 5, 3]
    post = postorder(root)
    assert post[-1] == 1
    assert sorted(post) == [1, 2, 3, 4, 5]


def test_traversals_of_empty_tree():
    assert inorder(None) == []
    assert level_order(None) == []


@given(permutations)
def test_rebuild_from_preorder_inorder(values):
    root = _tree(values)
    rebuilt = build_from_preorder_inorder(preorder(root), inorder(root))
    assert level_order(rebuilt) == values


@given(permutations)
def test_rebuild_from_inorder_postorder(values):
    root = _tree(values)
    rebuilt = build_from_inorder_postorder(inorder(root), postorder(root))
    assert level_order(rebuilt) == values


def test_rebuild_empty_and_mismatched():
    assert build_from_preorder_inorder([], []) is None
    assert build_from_inorder_postorder([], []) is None
    with pytest.raises(ValueError):
        build_from_preorder_inorder([1, 2], [1])


def test_encrypt_worked_example():
    assert TreeCipher(KEY).encrypt("Hi") == "\x7fH e3i "


def test_round_trip_with_known_key():
    cipher = TreeCipher(KEY)
    assert cipher.decrypt(cipher.encrypt("Hi!")) == "Hi!"


def test_round_trip_with_repeated_digits():
    cipher = TreeCipher(KEY)
    assert cipher.decrypt(cipher.encrypt("!!")) == "!!"


def test_encrypt_replaces_recorded_trees():
    cipher = TreeCipher(KEY)
    cipher.encrypt("Hi")
    assert cipher.decrypt(cipher.encrypt("!")) == "!"


@given(
    st.builds(
        Key,
        pid=st.integers(min_value=1, max_value=4_000_000),
        second=st.integers(min_value=0, max_value=59),
        minute=st.integers(min_value=0, max_value=59),
    ),
    ascii_text,
)
def test_one_separator_per_character(key, text):
    encrypted = TreeCipher(key).encrypt(text)
    assert encrypted.count(" ") == len(text)
    assert encrypted.endswith(" ") or text == ""


def test_decrypt_without_recorded_trees_fails():
    encrypted = TreeCipher(KEY).encrypt("Hi")
    with pytest.raises(ValueError):
        TreeCipher(KEY).decrypt(encrypted)


def test_decrypt_with_zero_digit_sum_fails():
    cipher = TreeCipher(Key(pid=0, second=5, minute=5))
    encrypted = cipher.encrypt("a")
    with pytest.raises(ValueError):
        cipher.decrypt(encrypted)


def test_encrypt_rejects_non_ascii():
    with pytest.raises(ValueError):
        TreeCipher(KEY).encrypt("é")