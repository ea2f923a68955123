"""In-memory key-value store backend.

Values are kept as JSON text in a plain dict, the way browser storage keeps
strings, so reads always return fresh copies and a caller can never mutate
stored state through a returned object. There is no persistence across
process restarts; use it for tests, examples and throwaway sessions.
"""

from __future__ import annotations

from collections.abc import Mapping

from examportal.interfaces.key_value_store import KeyValueStore

__all__ = ["InMemoryKeyValueStore"]


class InMemoryKeyValueStore(KeyValueStore):
    """Non-durable ``KeyValueStore`` backed by a dict of JSON text.

    Args:
        initial: Optional raw contents (key -> JSON text). The text is not
            validated, which lets tests seed corrupt entries.
    """

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(initial or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}(<{len(self._entries)} keys>)"

    # ---- KeyValueStore ----

    def _read(self, key: str) -> str | None:
        return self._entries.get(key)

    def _write(self, key: str, text: str) -> None:
        self._entries[key] = text

    def _delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def _delete_all(self) -> None:
        self._entries.clear()

    def _list_keys(self) -> list[str]:
        return list(self._entries)
