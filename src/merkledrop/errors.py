from __future__ import annotations
from typing import Any, Optional


class MerkleDropError(ValueError):
    """Base class for every failure raised while building a drop tree."""


class EmptyTreeError(MerkleDropError):
    def __init__(self) -> None:
        super().__init__("cannot build merkle tree with no claims")


class AddressParseError(MerkleDropError):
    def __init__(self, address: Any, index: Optional[int] = None):
        self.address = address
        self.index = index
        where = f" (claim {index})" if index is not None else ""
        super().__init__(f"failed to parse address {address!r}{where}")


class DataParseError(MerkleDropError):
    def __init__(
        self,
        value: Any,
        reason: str,
        index: Optional[int] = None,
        item_index: Optional[int] = None,
    ):
        self.value = value
        self.reason = reason
        self.index = index
        self.item_index = item_index
        where = []
        if index is not None:
            where.append(f"claim {index}")
        if item_index is not None:
            where.append(f"item {item_index}")
        loc = f" ({', '.join(where)})" if where else ""
        super().__init__(f"invalid claim data {value!r}{loc}: {reason}")

    def at(self, index: int) -> "DataParseError":
        """Return a copy tagged with the claim index."""
        return DataParseError(self.value, self.reason, index, self.item_index)


class NonAsciiEntrypointError(MerkleDropError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"entrypoint name contains non-ASCII characters: {name!r}")
