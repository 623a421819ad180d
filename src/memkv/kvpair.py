"""KVPair — a single key/value entry returned by store lookups."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class KVPair:
    """Immutable ``(key, value)`` pair.

    ``KVPair()`` is the empty pair.  It is a legal entry in its own right,
    so a missing key is reported by :class:`~memkv.exceptions.KeyNotExistError`
    and never by returning an empty pair.

    Attributes:
        key:   Full slash-delimited path of the entry.
        value: Opaque string value.
    """

    key: str = ""
    value: str = ""

    def to_dict(self) -> dict[str, str]:
        return {"key": self.key, "value": self.value}
