"""Template helper functions bound to a store.

The returned mapping can be merged into the globals of any template
engine, e.g. ``jinja_env.globals.update(template_functions(store))``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from memkv.stores.base import Store


def template_functions(store: Store) -> dict[str, Callable[..., Any]]:
    """Return the helper set ``exists, get, gets, getv, getvs, ls, lsdir``."""

    def getv(key: str, *default: str) -> str:
        # Without a default an absent key raises, same as ``get``.
        if default:
            return store.get_value_or_default(key, default[0])
        return store.get(key).value

    return {
        "exists": store.exists,
        "get": store.get,
        "gets": store.get_all,
        "getv": getv,
        "getvs": store.get_all_values,
        "ls": store.list,
        "lsdir": store.list_dir,
    }
