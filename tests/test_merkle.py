import math

import pytest

from merkledrop.errors import EmptyTreeError
from merkledrop.felt import from_hex, to_hex
from merkledrop.hashing import hash_pair
from merkledrop.merkle import MerkleTree, verify_inclusion


def _leaves(n):
    return [(f"a{i}", 1000 + 7 * i) for i in range(n)]


def test_merkle_basic():
    tree = MerkleTree.build(_leaves(5), sort_leaves=False)
    assert tree.root
    proof = [from_hex(p) for p in tree.proof(2)]
    assert verify_inclusion(tree.leaves[2], proof, tree.root)


def test_empty_tree_rejected():
    with pytest.raises(EmptyTreeError):
        MerkleTree.build([])


def test_single_leaf_is_root():
    tree = MerkleTree.build([("only", 42)])
    assert tree.root == 42
    assert len(tree.levels) == 1
    assert tree.proofs() == {"only": []}


def test_odd_level_pads_with_zero():
    a, b, c = 30, 10, 20
    tree = MerkleTree.build([("a", a), ("b", b), ("c", c)], sort_leaves=False)
    assert tree.levels[1] == [hash_pair(a, b), hash_pair(c, 0)]
    assert tree.root == hash_pair(hash_pair(a, b), hash_pair(c, 0))
    assert tree.proof(2) == [to_hex(0), to_hex(hash_pair(a, b))]
    assert tree.proof(1) == [to_hex(a), to_hex(hash_pair(c, 0))]


def test_sorting_reorders_level_zero():
    tree = MerkleTree.build([("x", 9), ("y", 3), ("z", 6)], sort_leaves=True)
    assert tree.leaves == [3, 6, 9]
    assert tree.labels == ["y", "z", "x"]


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 8, 9, 17])
def test_proof_length_and_soundness(n):
    tree = MerkleTree.build(_leaves(n))
    assert len(tree.levels[-1]) == 1
    expected_len = math.ceil(math.log2(n)) if n > 1 else 0
    for i in range(n):
        proof = tree.proof(i)
        assert len(proof) == expected_len
        assert all(len(p) == 66 for p in proof)
        assert verify_inclusion(tree.leaves[i], [from_hex(p) for p in proof], tree.root)


def test_wrong_leaf_fails():
    tree = MerkleTree.build(_leaves(4))
    proof = [from_hex(p) for p in tree.proof(0)]
    assert not verify_inclusion(tree.leaves[0] + 1, proof, tree.root)


def test_proof_index_out_of_range():
    tree = MerkleTree.build(_leaves(2))
    with pytest.raises(IndexError):
        tree.proof(2)


def test_root_bytes_big_endian():
    tree = MerkleTree.build([("only", 0x0102)])
    assert tree.root_bytes == b"\x00" * 30 + b"\x01\x02"
