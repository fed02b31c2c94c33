from __future__ import annotations
from typing import Any, Dict, List, Optional, Sequence, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Claim(BaseModel):
    """One entitlement: a recipient address and its claim data.

    ``data`` is a tuple whose items stay in their textual/JSON form here;
    conversion to field elements happens in the codec so parse failures can
    name the claim.
    """

    model_config = ConfigDict(frozen=True)

    address: str
    data: Tuple[Any, ...] = ()

    @field_validator("address", mode="before")
    @classmethod
    def _address_must_be_string(cls, v):  # type: ignore[override]
        if not isinstance(v, str):
            raise ValueError("address must be a string")
        return v

    @field_validator("data", mode="before")
    @classmethod
    def _keep_items_verbatim(cls, v):  # type: ignore[override]
        # Reject early only on shape; item values are checked by the codec
        if not isinstance(v, (list, tuple)):
            raise ValueError("data must be a list")
        return tuple(v)

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "Claim":
        """Build from a snapshot row ``[address, [data...]]``."""
        if len(row) != 2:
            raise ValueError("snapshot row must be [address, data]")
        address, data = row
        if not isinstance(data, (list, tuple)):
            data = [data]
        return cls(address=address, data=tuple(data))


class MerkleDropResult(BaseModel):
    merkle_root: str
    tree_size: int
    proofs: Dict[str, List[str]] = Field(default_factory=dict)
    claim_contract: Optional[str] = None
    entrypoint: Optional[str] = None


class DropFile(BaseModel):
    """Drop description as written by the snapshot/process tooling."""

    name: str = ""
    network: str = ""
    description: str = ""
    claim_contract: Optional[str] = None
    entrypoint: Optional[str] = None
    merkle_root: Optional[str] = None
    snapshot: List[List[Any]] = Field(default_factory=list)

    def claims(self) -> List[Claim]:
        return [Claim.from_row(row) for row in self.snapshot]
