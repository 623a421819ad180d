"""Store protocol — a flat key space viewed as a path hierarchy."""

from __future__ import annotations

import builtins
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from memkv.exceptions import KeyNotExistError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from memkv.kvpair import KVPair


class Store(ABC):
    """Abstract base for all store backends.

    Keys are slash-delimited paths such as ``"/app/db/user"``, stored and
    compared as opaque strings.  Directories are never stored; they are
    derived on demand from the segments of existing keys.  Every operation
    that returns several items sorts them ascending.
    """

    # ── mutation ─────────────────────────────────────────────

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Create or overwrite a value."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete a value.  No-op if the key does not exist."""
        ...

    @abstractmethod
    def purge(self) -> None:
        """Delete every key."""
        ...

    @abstractmethod
    def replace(self, mapping: Mapping[str, str]) -> None:
        """Swap the whole content for *mapping* in one step."""
        ...

    # ── point lookup ─────────────────────────────────────────

    @abstractmethod
    def get(self, key: str) -> KVPair:
        """Return the stored pair.

        Raises:
            KeyNotExistError: if the key is absent.
        """
        ...

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Return ``True`` if the key is stored."""
        ...

    def get_value_or_default(self, key: str, default: str = "") -> str:
        """Return the stored value, or *default* if the key is absent."""
        try:
            return self.get(key).value
        except KeyNotExistError:
            return default

    # ── queries ──────────────────────────────────────────────

    @abstractmethod
    def get_all(self, pattern: str) -> list[KVPair]:
        """Return every pair whose key matches the glob *pattern*, sorted by key.

        Raises:
            BadPatternError: if *pattern* is malformed.
        """
        ...

    def get_all_values(self, pattern: str) -> list[str]:
        """Return the values of :meth:`get_all`, sorted ascending."""
        return sorted(pair.value for pair in self.get_all(pattern))

    @abstractmethod
    def list(self, path: str) -> list[str]:
        """Return the immediate children of *path*, leaves and directories alike."""
        ...

    @abstractmethod
    def list_dir(self, path: str) -> builtins.list[str]:
        """Return the immediate children of *path* that are directories."""
        ...
