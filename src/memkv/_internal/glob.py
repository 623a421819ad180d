"""Single-segment glob matching over slash-delimited keys.

Pattern syntax::

    *         any run of characters except the separator
    ?         exactly one character except the separator
    [abc]     one character from the set
    [a-z]     one character from the range
    [^a-z]    one character outside the range, never the separator;
              ``!`` has no special meaning
    \\c        the literal character ``c``
    c         any other character matches itself

Patterns are translated to regular expressions once and cached.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from memkv._internal.paths import SEPARATOR
from memkv.exceptions import BadPatternError

logger = logging.getLogger(__name__)

_ANY_RUN = f"[^{re.escape(SEPARATOR)}]*"
_ANY_ONE = f"[^{re.escape(SEPARATOR)}]"
_NEVER = "(?!)"


def _class_char(pattern: str, i: int) -> tuple[str, int]:
    if i >= len(pattern):
        raise BadPatternError(pattern, "unterminated character class")
    c = pattern[i]
    if c in "-]":
        raise BadPatternError(pattern, f"unexpected '{c}' in character class")
    if c == "\\":
        i += 1
        if i >= len(pattern):
            raise BadPatternError(pattern, "unterminated character class")
        c = pattern[i]
    return c, i + 1


def _translate_class(pattern: str, i: int) -> tuple[str, int]:
    """Translate the class starting just after ``[``; return (regex, next index)."""
    negate = False
    if i < len(pattern) and pattern[i] == "^":
        negate = True
        i += 1

    items: list[str] = []
    ranges = 0
    while True:
        if i >= len(pattern):
            raise BadPatternError(pattern, "unterminated character class")
        if pattern[i] == "]" and ranges > 0:
            i += 1
            break
        lo, i = _class_char(pattern, i)
        hi = lo
        if i < len(pattern) and pattern[i] == "-":
            hi, i = _class_char(pattern, i + 1)
        ranges += 1
        # A reversed range is legal but matches nothing.
        if lo == hi:
            items.append(re.escape(lo))
        elif lo < hi:
            items.append(f"{re.escape(lo)}-{re.escape(hi)}")

    body = "".join(items)
    if negate:
        return f"[^{re.escape(SEPARATOR)}{body}]", i
    if not body:
        return _NEVER, i
    return f"[{body}]", i


def translate(pattern: str) -> str:
    """Return the regular expression source equivalent to *pattern*.

    Raises:
        BadPatternError: if *pattern* is malformed.
    """
    parts: list[str] = []
    i = 0
    n = len(pattern)
    while i < n:
        c = pattern[i]
        i += 1
        if c == "*":
            while i < n and pattern[i] == "*":
                i += 1
            parts.append(_ANY_RUN)
        elif c == "?":
            parts.append(_ANY_ONE)
        elif c == "[":
            cls, i = _translate_class(pattern, i)
            parts.append(cls)
        elif c == "\\":
            if i >= n:
                raise BadPatternError(pattern, "trailing escape character")
            parts.append(re.escape(pattern[i]))
            i += 1
        else:
            parts.append(re.escape(c))
    return "".join(parts)


@lru_cache(maxsize=256)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile *pattern* into a regex to be applied with ``fullmatch``."""
    try:
        source = translate(pattern)
    except BadPatternError:
        logger.debug("Rejected glob pattern %r", pattern)
        raise
    return re.compile(source, re.DOTALL)
