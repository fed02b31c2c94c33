from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .errors import EmptyTreeError
from .felt import to_hex
from .hashing import hash_pair

log = logging.getLogger(__name__)

ZERO = 0


@dataclass
class MerkleTree:
    labels: List[str]
    levels: List[List[int]]  # level 0 = leaves, last level = [root]

    @classmethod
    def build(
        cls, leaf_hashes: Sequence[Tuple[str, int]], sort_leaves: bool = True
    ) -> "MerkleTree":
        if not leaf_hashes:
            raise EmptyTreeError()
        pairs = list(leaf_hashes)
        if sort_leaves:
            pairs.sort(key=lambda p: p[1])
        lvl = [h for _, h in pairs]
        levels = [lvl]
        while len(lvl) > 1:
            nxt = []
            for i in range(0, len(lvl), 2):
                a = lvl[i]
                b = lvl[i + 1] if i + 1 < len(lvl) else ZERO  # pad odd level with zero
                nxt.append(hash_pair(a, b))
            levels.append(nxt)
            lvl = nxt
        log.debug(
            "built tree: %d leaves, %d levels, root %s",
            len(pairs), len(levels), to_hex(lvl[0]),
        )
        return cls([label for label, _ in pairs], levels)

    @property
    def root(self) -> int:
        return self.levels[-1][0]

    @property
    def root_bytes(self) -> bytes:
        return self.root.to_bytes(32, "big")

    @property
    def leaves(self) -> List[int]:
        return self.levels[0]

    def __len__(self) -> int:
        return len(self.levels[0])

    def proof(self, index: int) -> List[str]:
        """Sibling path (hex) for the leaf at ``index`` of level 0."""
        if not 0 <= index < len(self):
            raise IndexError(f"leaf index {index} out of range")
        proof = []
        idx = index
        for level in self.levels[:-1]:
            if idx % 2 == 0:
                sibling = level[idx + 1] if idx + 1 < len(level) else ZERO
            else:
                sibling = level[idx - 1]
            proof.append(to_hex(sibling))
            idx //= 2
        return proof

    def proofs(self) -> Dict[str, List[str]]:
        """Proof per label; a repeated label keeps the proof of its last leaf."""
        return {label: self.proof(i) for i, label in enumerate(self.labels)}


def verify_inclusion(leaf: int, proof: Sequence[int], root: int) -> bool:
    h = leaf
    for sibling in proof:
        h = hash_pair(h, sibling)
    return h == root
