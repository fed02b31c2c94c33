from typing import Any, Optional, Sequence, Union

from merkledrop.api import parse_claim
from merkledrop.errors import MerkleDropError
from merkledrop.felt import FIELD_PRIME, from_bytes, from_hex, parse_address
from merkledrop.hashing import get_selector_from_name
from merkledrop.leaf import compatible_leaf_hash, standard_leaf_hash
from merkledrop.merkle import verify_inclusion

FeltLike = Union[int, str, bytes]


def _felt(v: FeltLike) -> int:
    if isinstance(v, bool):
        raise ValueError("bool is not a field element")
    if isinstance(v, int):
        if not 0 <= v < FIELD_PRIME:
            raise ValueError(f"{v} is outside the field")
        return v
    if isinstance(v, (bytes, bytearray)):
        return from_bytes(bytes(v))
    if isinstance(v, str):
        return from_hex(v)
    raise ValueError(f"unsupported field element type {type(v).__name__}")


def verify_proof(leaf_hash: FeltLike, proof: Sequence[FeltLike], root: FeltLike) -> bool:
    """Return True if folding ``proof`` onto ``leaf_hash`` reaches ``root``.

    Each step hashes the running value with the next sibling in ascending
    order, the same rule the claim contract applies. Malformed hex, values
    outside the field and unsupported types in any argument yield False.
    """
    try:
        leaf = _felt(leaf_hash)
        siblings = [_felt(p) for p in proof]
        expected = _felt(root)
    except ValueError:
        return False
    return verify_inclusion(leaf, siblings, expected)


def verify_claim(
    claim: Any,
    proof: Sequence[FeltLike],
    root: FeltLike,
    claim_contract_address: Optional[str] = None,
    entrypoint_name: Optional[str] = None,
) -> bool:
    """Re-derive the leaf from claim data, then check its proof.

    Passing a claim contract selects the reference-compatible leaf layout,
    which also needs the entrypoint name.
    """
    if claim_contract_address is not None and entrypoint_name is None:
        raise ValueError("entrypoint name is required with a claim contract")
    try:
        _, address, data = parse_claim(claim)
        if claim_contract_address is None:
            leaf = standard_leaf_hash(address, data)
        else:
            leaf = compatible_leaf_hash(
                address,
                data,
                parse_address(claim_contract_address),
                get_selector_from_name(entrypoint_name),
            )
    except MerkleDropError:
        return False
    return verify_proof(leaf, proof, root)
