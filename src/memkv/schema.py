"""Data transfer objects for whole-store snapshots.

These Pydantic models define the contract between the store and the
refresher that feeds it.  ``MemoryStore.export`` produces the same shape
that ``MemoryStore.load`` accepts.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from memkv.kvpair import KVPair


class KVPairSchema(BaseModel):
    """Single key/value entry.

    Attributes:
        key: Full slash-delimited path
        value: Opaque string value
    """

    key: str
    value: str


class SnapshotSchema(BaseModel):
    """A complete store mapping.

    Attributes:
        pairs: Every entry of the snapshot, one per key
        pair_count: Number of entries (informational)
    """

    pairs: list[KVPairSchema] = Field(default_factory=list)
    pair_count: int | None = None

    @field_validator("pairs")
    @classmethod
    def unique_keys(cls, pairs: list[KVPairSchema]) -> list[KVPairSchema]:
        seen: set[str] = set()
        for pair in pairs:
            if pair.key in seen:
                raise ValueError(f"duplicate key '{pair.key}' in snapshot")
            seen.add(pair.key)
        return sorted(pairs, key=lambda p: p.key)

    @classmethod
    def from_pairs(cls, pairs: Iterable[KVPair]) -> SnapshotSchema:
        items = [KVPairSchema.model_validate(p.to_dict()) for p in pairs]
        return cls(pairs=items, pair_count=len(items))

    def as_mapping(self) -> dict[str, str]:
        return {p.key: p.value for p in self.pairs}
