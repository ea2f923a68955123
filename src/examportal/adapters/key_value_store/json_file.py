"""Local filesystem key-value store backend.

The whole namespace is one JSON document mapping each key to the JSON *text*
of its value, mirroring how browser storage keeps strings. Every operation
re-reads the document so separate processes (e.g. successive CLI calls) see
each other's writes; writes land through a temporary file and ``os.replace``
so the document on disk is always complete.

A document that cannot be parsed is logged and treated as empty; the next
write replaces it.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from examportal.interfaces.key_value_store import KeyValueStore, StoreUnavailableError

logger = logging.getLogger(__name__)

__all__ = ["JsonFileKeyValueStore"]


class JsonFileKeyValueStore(KeyValueStore):
    """``KeyValueStore`` persisted as a single JSON file.

    Args:
        path: Location of the document. Parent directories are created on
            first write.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"

    @property
    def path(self) -> Path:
        """Location of the backing document."""
        return self._path

    # ---- KeyValueStore ----

    def _read(self, key: str) -> str | None:
        return self._load().get(key)

    def _write(self, key: str, text: str) -> None:
        entries = self._load()
        entries[key] = text
        self._dump(entries)

    def _delete(self, key: str) -> None:
        entries = self._load()
        if entries.pop(key, None) is not None:
            self._dump(entries)

    def _delete_all(self) -> None:
        self._dump({})

    def _list_keys(self) -> list[str]:
        return list(self._load())

    # --- Internal Helpers ---

    def _load(self) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except UnicodeDecodeError:
            logger.error("Store document %s is not valid UTF-8, ignoring it", self._path)
            return {}
        except OSError as e:
            raise StoreUnavailableError(f"cannot read {self._path}: {e}") from e

        try:
            document = json.loads(raw)
        except ValueError:
            logger.error("Store document %s is not valid JSON, ignoring it", self._path)
            return {}
        if not isinstance(document, dict) or not all(
            isinstance(v, str) for v in document.values()
        ):
            logger.error("Store document %s has an unexpected shape, ignoring it", self._path)
            return {}
        return document

    def _dump(self, entries: dict[str, str]) -> None:
        tmp_path: Path | None = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._path.parent,
                prefix=f".{self._path.name}.",
                delete=False,
            ) as tmp:  # pragma: no mutate
                tmp_path = Path(tmp.name)
                json.dump(entries, tmp, indent=2)
            os.replace(tmp_path, self._path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise StoreUnavailableError(f"cannot write {self._path}: {e}") from e
