"""Custom exceptions for the memkv package."""

from __future__ import annotations


class MemKVError(Exception):
    """Base exception for all store errors."""


class KeyNotExistError(MemKVError, KeyError):
    """Raised when a point lookup targets a key that is not stored."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key '{key}' does not exist")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class BadPatternError(MemKVError, ValueError):
    """Raised when a glob pattern is syntactically invalid."""

    def __init__(self, pattern: str, detail: str = "") -> None:
        self.pattern = pattern
        msg = f"Bad pattern '{pattern}'"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
