"""Tests for the single-segment glob matcher."""

import pytest

from memkv import BadPatternError
from memkv._internal.glob import compile_pattern, translate


def match(pattern, key):
    return compile_pattern(pattern).fullmatch(key) is not None


@pytest.mark.parametrize(
    ("pattern", "key"),
    [
        ("/app/db/user", "/app/db/user"),
        ("/app/db/*", "/app/db/user"),
        ("/app/db/*", "/app/db/"),
        ("/app/*/user", "/app/db/user"),
        ("/app/db/us?r", "/app/db/user"),
        ("/app/db/[abu]ser", "/app/db/user"),
        ("/app/db/[a-z]ser", "/app/db/user"),
        ("/app/db/[^a-t]ser", "/app/db/user"),
        ("/app/db/[\\]]", "/app/db/]"),
        ("/app/db/[a\\-]", "/app/db/-"),
        ("/app/\\*", "/app/*"),
        ("/app/**", "/app/db"),
        ("/app/(db)+", "/app/(db)+"),
        ("/app/db.*", "/app/db.conf"),
        ("*", "no-separator"),
        ("/x/[!]", "/x/!"),
        ("/x/[!a]", "/x/a"),
    ],
)
def test_matches(pattern, key):
    assert match(pattern, key)


@pytest.mark.parametrize(
    ("pattern", "key"),
    [
        ("/app/db/*", "/app/db/user/domain"),
        ("/app/*", "/app/db/user"),
        ("/app/db/?", "/app/db/us"),
        ("/app?db", "/app/db"),
        ("/app/db/[^a-z]ser", "/app/db/user"),
        ("/app[^a]db", "/app/db"),
        ("/app/db/[z-a]", "/app/db/m"),
        ("/app/\\*", "/app/db"),
        ("/app/db.*", "/app/dbxconf"),
        ("/app/db", "/app/db/user"),
        ("/app/db/user", "/app/db"),
        ("*", "/app"),
        ("/x/[!a]", "/x/b"),
        ("/app/db/[!a-t]ser", "/app/db/user"),
    ],
)
def test_non_matches(pattern, key):
    assert not match(pattern, key)


@pytest.mark.parametrize(
    "pattern",
    [
        "[]a]",
        "[",
        "/app/[a",
        "/app/[^",
        "/app/[a-",
        "/app/[a-]",
        "/app/[-a]",
        "/app/[]",
        "/app/[\\",
        "/app/\\",
    ],
)
def test_bad_patterns(pattern):
    with pytest.raises(BadPatternError):
        translate(pattern)


def test_bad_pattern_message():
    with pytest.raises(BadPatternError, match="unterminated character class"):
        compile_pattern("/app/[a")


def test_star_never_crosses_separator():
    assert translate("*") == "[^/]*"


def test_compile_is_cached():
    assert compile_pattern("/app/db/*") is compile_pattern("/app/db/*")
