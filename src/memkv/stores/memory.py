"""MemoryStore — dict-backed, thread-safe store with a derived path hierarchy."""

from __future__ import annotations

import builtins
import logging
import threading
from typing import TYPE_CHECKING, Any

from memkv._internal import glob
from memkv._internal.paths import SEPARATOR, basename, child_of, normalize_dir
from memkv.exceptions import KeyNotExistError
from memkv.kvpair import KVPair
from memkv.schema import SnapshotSchema
from memkv.stores.base import Store

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class MemoryStore(Store):
    """In-memory store over a single ``dict``.  Data is lost on process exit.

    A private lock serializes every read and write, so a reader running
    alongside a refresher never sees a half-applied :meth:`replace`.
    Directory listings are computed from the flat key space on each call;
    no tree is kept alongside the mapping.

    Parameters:
        initial: Optional mapping to seed the store with.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._lock = threading.Lock()
        self._data: dict[str, str] = dict(initial or {})

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    # ── mutation ─────────────────────────────────────────────

    def set(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def purge(self) -> None:
        with self._lock:
            count = len(self._data)
            self._data.clear()
        logger.debug("Purged %d keys", count)

    def replace(self, mapping: Mapping[str, str]) -> None:
        fresh = dict(mapping)
        with self._lock:
            count = len(self._data)
            self._data = fresh
        logger.debug("Replaced %d keys with %d keys", count, len(fresh))

    # ── point lookup ─────────────────────────────────────────

    def get(self, key: str) -> KVPair:
        with self._lock:
            try:
                value = self._data[key]
            except KeyError:
                raise KeyNotExistError(key) from None
        return KVPair(key, value)

    def exists(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def get_value_or_default(self, key: str, default: str = "") -> str:
        with self._lock:
            return self._data.get(key, default)

    # ── queries ──────────────────────────────────────────────

    def get_all(self, pattern: str) -> list[KVPair]:
        # Compile before taking the lock so a bad pattern fails on an empty store too.
        regex = glob.compile_pattern(pattern)
        with self._lock:
            pairs = [KVPair(k, v) for k, v in self._data.items() if regex.fullmatch(k)]
        pairs.sort(key=lambda p: p.key)
        return pairs

    def list(self, path: str) -> list[str]:
        path = normalize_dir(path)
        with self._lock:
            if path in self._data:
                return [basename(path)]
            return self._children(path, dirs_only=False)

    def list_dir(self, path: str) -> builtins.list[str]:
        path = normalize_dir(path)
        with self._lock:
            return self._children(path, dirs_only=True)

    def _children(self, path: str, *, dirs_only: bool) -> builtins.list[str]:
        """Collect immediate child names under *path*.  Caller holds the lock."""
        prefix = path + SEPARATOR
        names: set[str] = set()
        for key in self._data:
            child = child_of(key, prefix)
            if child is None:
                continue
            name, has_descendants = child
            if dirs_only and not has_descendants:
                continue
            names.add(name)
        return sorted(names)

    # ── snapshots ────────────────────────────────────────────

    def export(self) -> dict[str, Any]:
        """Return a JSON-serializable snapshot of every stored pair."""
        with self._lock:
            pairs = [KVPair(k, v) for k, v in self._data.items()]
        return SnapshotSchema.from_pairs(pairs).model_dump()

    def load(self, snapshot: SnapshotSchema | dict[str, Any] | str) -> None:
        """Validate *snapshot* and make it the whole content of the store.

        Accepts a :class:`SnapshotSchema`, a dict shaped like :meth:`export`
        output, or the same as JSON text.

        Raises:
            pydantic.ValidationError: if the snapshot is malformed.
        """
        if isinstance(snapshot, str):
            snapshot = SnapshotSchema.model_validate_json(snapshot)
        elif not isinstance(snapshot, SnapshotSchema):
            snapshot = SnapshotSchema.model_validate(snapshot)
        logger.debug("Loading snapshot of %d keys", len(snapshot.pairs))
        self.replace(snapshot.as_mapping())
