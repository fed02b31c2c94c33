"""Inclusion proof fuzzing with mutated proofs (reference-compatible trees)."""
from __future__ import annotations
import atheris
import sys
import random

with atheris.instrument_imports():
    from merkledrop.api import compatible_tree
    from merkledrop.felt import to_hex
    from merkledrop_sdk.verify import verify_proof

CLAIM_CONTRACT = "0x2803f7953e7403d204906467e2458ca4b206723607acae26c9c729a926e491f"


def TestOneInput(data: bytes):  # noqa: N802
    if len(data) < 8:
        return
    seed = int.from_bytes(data[:4], 'little')
    random.seed(seed)
    body = data[4:]
    claims = [
        {"address": hex(1 + i), "data": [b]} for i, b in enumerate(body[:64])
    ]
    if len(claims) < 3:
        return
    tree = compatible_tree(claims, CLAIM_CONTRACT, "claim_from_forwarder")
    idx = seed % len(claims)
    proof = tree.proof(idx)
    leaf = tree.leaves[idx]
    # With some probability, flip one sibling to exercise the negative path
    if random.random() < 0.2 and proof:
        tampered = int(proof[0], 16) ^ 0x01
        proof[0] = to_hex(tampered)
        if verify_proof(leaf, proof, tree.root):
            raise RuntimeError("tampered proof unexpectedly verified")
    elif not verify_proof(leaf, proof, tree.root):
        raise RuntimeError("valid proof failed")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
