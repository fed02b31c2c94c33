"""Leaf hashing.

Two incompatible layouts exist; the tree and its verifier must agree on one.

standard:   H(address, len(data), *data, 0)
compatible: H(address, claim_contract, selector, len(data), *data)
"""
from __future__ import annotations
from typing import Sequence

from .hashing import hash_many

# Empty legacy og_token_ids list kept at the end of standard leaves
_STANDARD_TRAILER = 0


def standard_leaf_hash(address: int, data: Sequence[int]) -> int:
    elements = [address, len(data), *data, _STANDARD_TRAILER]
    return hash_many(elements)


def compatible_leaf_hash(
    address: int, data: Sequence[int], claim_contract: int, selector: int
) -> int:
    elements = [address, claim_contract, selector, len(data), *data]
    return hash_many(elements)
