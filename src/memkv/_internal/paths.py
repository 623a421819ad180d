"""Helpers for treating slash-delimited keys as filesystem-like paths.

Keys are opaque strings: nothing here collapses repeated separators or
resolves ``.``/``..``.  The only normalization is dropping a single
trailing separator from a *query* path.
"""

from __future__ import annotations

SEPARATOR = "/"


def normalize_dir(path: str) -> str:
    """Drop one trailing separator, so ``/a/b/`` and ``/a/b`` are the same query."""
    if path.endswith(SEPARATOR):
        return path[: -len(SEPARATOR)]
    return path


def basename(key: str) -> str:
    """Return the final segment of *key* (``/a/b/c`` → ``c``)."""
    return key.rsplit(SEPARATOR, 1)[-1]


def child_of(key: str, prefix: str) -> tuple[str, bool] | None:
    """Return the immediate child of *prefix* that *key* lives under.

    *prefix* must already carry its trailing separator.  The result is
    ``(name, has_descendants)`` where ``has_descendants`` is ``True`` when
    *key* continues below ``prefix + name``.  Returns ``None`` when *key*
    is not a strict descendant of *prefix*.
    """
    if not key.startswith(prefix):
        return None
    name, sep, _ = key[len(prefix) :].partition(SEPARATOR)
    return name, bool(sep)
