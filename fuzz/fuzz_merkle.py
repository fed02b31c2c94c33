"""Fuzz harness for drop tree construction & proof verification."""
from __future__ import annotations
import atheris
import sys

with atheris.instrument_imports():
    from merkledrop.api import build_tree, standard_tree
    from merkledrop_sdk.verify import verify_proof


def TestOneInput(data: bytes):  # noqa: N802
    if len(data) < 2:
        return
    fdp = atheris.FuzzedDataProvider(data)
    count = fdp.ConsumeIntInRange(1, 40)
    claims = []
    for i in range(count):
        n_items = fdp.ConsumeIntInRange(0, 5)
        items = [fdp.ConsumeIntInRange(0, 2**64) for _ in range(n_items)]
        claims.append({"address": hex(i + 1), "data": items})
    tree = standard_tree(claims)
    root, proofs = build_tree(list(reversed(claims)))
    if root != tree.root_bytes:
        raise RuntimeError("standard root depends on claim order")
    for idx, label in enumerate(tree.labels):
        if not verify_proof(tree.leaves[idx], proofs[label], root):
            raise RuntimeError("valid proof failed")


def main():
    atheris.Setup(sys.argv, TestOneInput, enable_python_coverage=True)
    atheris.Fuzz()


if __name__ == "__main__":
    main()
