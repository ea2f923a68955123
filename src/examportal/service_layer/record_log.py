"""Defines the shared base class for append-only record logs."""

from __future__ import annotations

import abc
import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from examportal.domain.errors import InvalidRecordError
from examportal.domain.records import iso_timestamp

if TYPE_CHECKING:
    from examportal.interfaces.id_generator import IdGenerator
    from examportal.interfaces.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

N = TypeVar("N")  # New record (caller input)
R = TypeVar("R")  # Stored record

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class RecordLog(abc.ABC, Generic[N, R]):
    """Shared mechanics for append-only record logs: read, filter, append.

    The whole log is one JSON list stored under ``STORAGE_KEY``, in insertion
    order. Appending reads the list, adds one entry and writes the list back,
    so it is only safe with a single writer.

    Stored entries that cannot be read back as records are skipped on read
    (with a warning) but preserved on append.
    """

    KIND: str  # e.g., "test result", "registration"
    STORAGE_KEY: str  # e.g., "testResults"
    ID_PREFIX: str  # e.g., "TEST"

    def __init__(
        self,
        store: KeyValueStore,
        id_generator: IdGenerator,
        clock: Clock = utc_now,
    ) -> None:
        self._store = store
        self._id_generator = id_generator
        self._clock = clock

    def _load_raw(self) -> list[Any]:
        raw = self._store.get(self.STORAGE_KEY, [])
        if not isinstance(raw, list):
            logger.warning(
                "Ignoring %r: expected a list of %s records, got %s",
                self.STORAGE_KEY,
                self.KIND,
                type(raw).__name__,
            )
            return []
        return raw

    def _all(self) -> list[R]:
        records: list[R] = []
        for position, entry in enumerate(self._load_raw()):
            try:
                records.append(self._parse(entry))
            except InvalidRecordError as e:
                logger.warning("Skipping %s entry #%d: %s", self.KIND, position, e)
        return records

    def _for_user(self, user_id: str) -> list[R]:
        return [record for record in self._all() if self._owner_of(record) == user_id]

    def _append(self, new: N) -> R | None:
        """Complete ``new`` with an id and timestamp and append it to the log.

        Returns:
            The stored record, or None if the store refused the write.
        """
        record = self._build(
            new,
            record_id=self._id_generator.new_id(self.ID_PREFIX),
            date=iso_timestamp(self._clock()),
        )
        entries = self._load_raw()
        entries.append(self._serialize(record))
        if not self._store.set(self.STORAGE_KEY, entries):
            logger.error("Could not save %s for %s", self.KIND, self._owner_of(record))
            return None
        logger.info(
            "Saved %s %s for %s",
            self.KIND,
            getattr(record, "id"),
            self._owner_of(record),
        )
        return record

    @staticmethod
    def _owner_of(record: R) -> str:
        return getattr(record, "student_id")

    @staticmethod
    def _serialize(record: R) -> dict[str, Any]:
        return record.to_dict()  # type: ignore[attr-defined]

    @abc.abstractmethod
    def _parse(self, data: object) -> R:
        """Build a record from a stored entry.

        Raises:
            InvalidRecordError: If the entry is not a valid record.
        """

    @abc.abstractmethod
    def _build(self, new: N, *, record_id: str, date: str) -> R:
        """Complete a caller-supplied record with its generated fields."""
