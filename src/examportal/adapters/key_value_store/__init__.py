"""Key-value store backends.

- ``InMemoryKeyValueStore``: RAM only, for tests and ephemeral use.
- ``JsonFileKeyValueStore``: a single JSON document on the local filesystem.
- ``SqlAlchemyKeyValueStore``: rows of a ``kv_entry`` table, one namespace each.
"""

from .json_file import JsonFileKeyValueStore
from .memory import InMemoryKeyValueStore
from .sqlalchemy_store import SqlAlchemyKeyValueStore

__all__ = ["InMemoryKeyValueStore", "JsonFileKeyValueStore", "SqlAlchemyKeyValueStore"]
