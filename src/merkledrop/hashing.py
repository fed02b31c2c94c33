from __future__ import annotations
from typing import Sequence

from eth_utils import keccak
from poseidon_py.poseidon_hash import poseidon_hash_many

from .errors import NonAsciiEntrypointError

_MASK_250 = 2**250 - 1

_DEFAULT_ENTRY_POINTS = ("__default__", "__l1_default__")


def hash_many(elements: Sequence[int]) -> int:
    """Poseidon sponge hash over a variable-length list of field elements."""
    return poseidon_hash_many(list(elements))


def hash_pair(a: int, b: int) -> int:
    """Commutative node hash: operands are ordered before hashing."""
    if b < a:
        a, b = b, a
    return poseidon_hash_many([a, b])


def starknet_keccak(data: bytes) -> int:
    """Keccak-256 with the 6 most significant bits cleared so it fits a felt."""
    return int.from_bytes(keccak(data), "big") & _MASK_250


def get_selector_from_name(name: str) -> int:
    if name in _DEFAULT_ENTRY_POINTS:
        return 0
    if not name.isascii():
        raise NonAsciiEntrypointError(name)
    return starknet_keccak(name.encode("ascii"))
