"""Key-value store interface definitions.

A ``KeyValueStore`` maps string keys to JSON values inside one namespace. The
public operations (``get``/``set``/``remove``/``clear``/``keys``) never raise:
every failure is logged and turned into a default value or a ``False`` result.

Backends only implement the raw text operations (``_read``, ``_write``,
``_delete``, ``_delete_all``, ``_list_keys``) and report infrastructure
failures by raising ``StoreUnavailableError``. JSON encoding, decoding and the
failure-to-result conversion live here so every backend behaves the same.

Concurrency
-----------
Stores assume a single writer. There is no locking and no compare-and-swap, so
two writers doing read-modify-write on the same key may lose one of the writes
(last write wins).
"""

from __future__ import annotations

import abc
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

__all__ = ["KeyValueStore", "KeyValueStoreError", "StoreUnavailableError"]


class KeyValueStoreError(Exception):
    """Base class for key-value store errors."""


class StoreUnavailableError(KeyValueStoreError):
    """The backing storage could not be read or written."""


class KeyValueStore(abc.ABC):
    """Abstract base class for JSON key-value stores."""

    # --- Core Operations ---

    def get(self, key: str, default: Any = None) -> Any:
        """Return the JSON value stored at ``key``.

        Args:
            key: The key to read.
            default: Returned when the key is absent, when the stored text is
                not valid JSON, or when the backend fails.

        Returns:
            The decoded value, or ``default``.
        """
        try:
            text = self._read(key)
        except StoreUnavailableError:
            logger.exception("Error reading %r from %s", key, self)
            return default
        if text is None:
            return default
        try:
            return json.loads(text)
        except (ValueError, RecursionError):
            logger.error("Discarding corrupt value stored at %r in %s", key, self)
            return default

    def set(self, key: str, value: Any) -> bool:
        """Serialize ``value`` as JSON and store it at ``key``.

        Encoding is strict: ``NaN``/``Infinity``, circular structures and
        non-JSON types are serialization failures, as is nesting too deep to
        encode.

        Returns:
            bool: True if the value was stored, False otherwise.
        """
        try:
            text = json.dumps(value, allow_nan=False)
        except (TypeError, ValueError, RecursionError):
            logger.exception("Error serializing value for %r", key)
            return False
        try:
            self._write(key, text)
        except StoreUnavailableError:
            logger.exception("Error writing %r to %s", key, self)
            return False
        return True

    def remove(self, key: str) -> bool:
        """Delete ``key``. Removing an absent key succeeds.

        Returns:
            bool: True on success, False if the backend failed.
        """
        try:
            self._delete(key)
        except StoreUnavailableError:
            logger.exception("Error removing %r from %s", key, self)
            return False
        return True

    def clear(self) -> bool:
        """Delete every entry in this store's namespace.

        Returns:
            bool: True on success, False if the backend failed.
        """
        try:
            self._delete_all()
        except StoreUnavailableError:
            logger.exception("Error clearing %s", self)
            return False
        return True

    # --- Convenience Methods ---

    def keys(self) -> list[str]:
        """List the keys in this namespace in insertion order.

        Returns:
            list[str]: The keys, or an empty list if the backend failed.
        """
        try:
            return self._list_keys()
        except StoreUnavailableError:
            logger.exception("Error listing keys of %s", self)
            return []

    def __contains__(self, key: str) -> bool:
        try:
            return self._read(key) is not None
        except StoreUnavailableError:
            logger.exception("Error reading %r from %s", key, self)
            return False

    # --- Backend Operations ---

    @abc.abstractmethod
    def _read(self, key: str) -> str | None:
        """Return the raw JSON text at ``key`` or None if absent.

        Raises:
            StoreUnavailableError: If the backend cannot be read.
        """

    @abc.abstractmethod
    def _write(self, key: str, text: str) -> None:
        """Store raw JSON text at ``key``, replacing any previous value.

        Raises:
            StoreUnavailableError: If the backend cannot be written.
        """

    @abc.abstractmethod
    def _delete(self, key: str) -> None:
        """Delete ``key`` if present.

        Raises:
            StoreUnavailableError: If the backend cannot be written.
        """

    @abc.abstractmethod
    def _delete_all(self) -> None:
        """Delete every key of the namespace.

        Raises:
            StoreUnavailableError: If the backend cannot be written.
        """

    @abc.abstractmethod
    def _list_keys(self) -> list[str]:
        """Return the namespace's keys in insertion order.

        Raises:
            StoreUnavailableError: If the backend cannot be read.
        """
