from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from .errors import DataParseError
from .felt import parse_address, parse_data_item, to_hex
from .hashing import get_selector_from_name
from .leaf import compatible_leaf_hash, standard_leaf_hash
from .merkle import MerkleTree
from .models import Claim, MerkleDropResult

log = logging.getLogger(__name__)

Proofs = Dict[str, List[str]]
TreeResult = Tuple[bytes, Proofs]


def _as_claim(obj: Any, index: int) -> Claim:
    if isinstance(obj, Claim):
        return obj
    try:
        if isinstance(obj, Mapping):
            return Claim(**obj)
        if isinstance(obj, (list, tuple)):
            return Claim.from_row(obj)
    except (ValidationError, ValueError, TypeError) as e:
        raise DataParseError(obj, f"malformed claim: {e}", index=index) from e
    raise DataParseError(obj, "claim must be a Claim, mapping or [address, data] row", index=index)


def parse_claim(obj: Any, index: int = 0) -> Tuple[str, int, List[int]]:
    """Return ``(label, address_felt, data_felts)`` for one claim."""
    claim = _as_claim(obj, index)
    address = parse_address(claim.address, index)
    data = []
    for j, item in enumerate(claim.data):
        try:
            data.append(parse_data_item(item, j))
        except DataParseError as e:
            raise e.at(index) from None
    return claim.address, address, data


def _parse_claims(claims: Iterable[Any]) -> List[Tuple[str, int, List[int]]]:
    return [parse_claim(c, i) for i, c in enumerate(claims)]


def build_tree(claims: Iterable[Any]) -> TreeResult:
    """Standard-mode tree; the root only depends on the claim set."""
    tree = standard_tree(claims)
    return tree.root_bytes, tree.proofs()


def build_tree_reference_compatible(
    claims: Iterable[Any], claim_contract_address: str, entrypoint_name: str
) -> TreeResult:
    """Tree in the reference builder's layout: unsorted leaves, sorted pairs.

    Leaves are bound to the claim contract and entrypoint selector and kept in
    caller order, so permuting ``claims`` changes the root.
    """
    tree = compatible_tree(claims, claim_contract_address, entrypoint_name)
    return tree.root_bytes, tree.proofs()


def standard_tree(claims: Iterable[Any]) -> MerkleTree:
    parsed = _parse_claims(claims)
    leaves = [(label, standard_leaf_hash(addr, data)) for label, addr, data in parsed]
    return MerkleTree.build(leaves, sort_leaves=True)


def compatible_tree(
    claims: Iterable[Any], claim_contract_address: str, entrypoint_name: str
) -> MerkleTree:
    contract = parse_address(claim_contract_address)
    selector = get_selector_from_name(entrypoint_name)
    log.debug(
        "compatible leaves: contract %s, selector %s", to_hex(contract), to_hex(selector)
    )
    parsed = _parse_claims(claims)
    leaves = [
        (label, compatible_leaf_hash(addr, data, contract, selector))
        for label, addr, data in parsed
    ]
    return MerkleTree.build(leaves, sort_leaves=False)


def get_proof(proofs: Mapping[str, List[str]], address: str) -> List[str]:
    """Look up the proof for ``address`` as it was spelled in the claims."""
    try:
        return list(proofs[address])
    except KeyError:
        raise KeyError(f"no proof for address {address}") from None


def build_drop(
    claims: Iterable[Any],
    claim_contract_address: Optional[str] = None,
    entrypoint_name: Optional[str] = None,
) -> MerkleDropResult:
    """Build either tree flavour and package it for serialization.

    The reference-compatible mode is selected when a claim contract is given.
    """
    if claim_contract_address is not None:
        if entrypoint_name is None:
            raise ValueError("entrypoint name is required with a claim contract")
        tree = compatible_tree(claims, claim_contract_address, entrypoint_name)
    else:
        tree = standard_tree(claims)
    return MerkleDropResult(
        merkle_root=to_hex(tree.root),
        tree_size=len(tree),
        proofs=tree.proofs(),
        claim_contract=claim_contract_address,
        entrypoint=entrypoint_name,
    )
