"""memkv — an in-memory key-value store with a virtual path hierarchy.

Keys are slash-delimited paths.  Alongside plain get/set the store
answers glob queries (``/app/db/*``) and directory-style listings derived
from the flat key space.
"""

from memkv.exceptions import BadPatternError, KeyNotExistError, MemKVError
from memkv.kvpair import KVPair
from memkv.schema import KVPairSchema, SnapshotSchema
from memkv.stores import MemoryStore, Store
from memkv.templating import template_functions

__all__ = [
    "BadPatternError",
    "KVPair",
    "KVPairSchema",
    "KeyNotExistError",
    "MemKVError",
    "MemoryStore",
    "SnapshotSchema",
    "Store",
    "template_functions",
]
