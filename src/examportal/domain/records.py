"""Record types persisted by the exam portal.

Each record is a frozen dataclass with a ``to_dict()``/``from_dict()`` pair that
maps it to the JSON object stored in the key-value store. Stored objects use
camelCase keys (``studentId``, ``timeUsed``, ``registrationDate``) and may
carry additional caller-supplied keys, which are kept in ``extra`` and merged
back on serialization.

Records with generated fields come in two flavours:

- ``New*`` types are what callers build. They have no ``id`` and no timestamp,
  and refuse extra keys that would shadow a managed field.
- The full record types are only built through ``from_new()`` (when saving) or
  ``from_dict()`` (when reading back), so ``id`` and the timestamp are always
  assigned by the record log, never by the caller.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from .errors import InvalidRecordError, ReservedFieldError

JSONObject = dict[str, Any]

USER_KEYS = ("id", "name")
TEST_RESULT_KEYS = ("id", "studentId", "percentage", "timeUsed", "date")
REGISTRATION_KEYS = ("id", "studentId", "testName", "registrationDate")


def iso_timestamp(moment: datetime | None = None) -> str:
    """Render a moment as an ISO-8601 UTC string with millisecond precision.

    Args:
        moment: The instant to render. Naive values are treated as UTC.
            Defaults to now.

    Returns:
        str: e.g. ``"2026-10-19T07:39:00.123Z"``.
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _check_extra(kind: str, extra: Mapping[str, Any], reserved: Iterable[str]) -> None:
    clashes = [key for key in reserved if key in extra]
    if clashes:
        raise ReservedFieldError(kind, clashes)


def _require_mapping(kind: str, data: object) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise InvalidRecordError(kind, f"expected an object, got {type(data).__name__}")
    return data


def _check_str(kind: str, key: str, value: object) -> str:
    if not isinstance(value, str):
        raise InvalidRecordError(kind, f"'{key}' must be a string")
    return value


def _check_number(kind: str, key: str, value: object) -> int | float:
    # bool is an int subclass but never a score
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidRecordError(kind, f"'{key}' must be a number")
    return value


def _require_str(kind: str, data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise InvalidRecordError(kind, f"missing '{key}'")
    return _check_str(kind, key, data[key])


def _require_number(kind: str, data: Mapping[str, Any], key: str) -> int | float:
    if key not in data:
        raise InvalidRecordError(kind, f"missing '{key}'")
    return _check_number(kind, key, data[key])


def _extra_of(data: Mapping[str, Any], known: Iterable[str]) -> JSONObject:
    known = set(known)
    return {key: value for key, value in data.items() if key not in known}


# ============================================================================
#                                   Users
# ============================================================================


@dataclass(frozen=True, slots=True)
class User:
    """The client-trusted identity stored as the current session.

    Only ``id`` and ``name`` are interpreted; every other profile field is
    carried opaquely in ``extra``.
    """

    id: str
    name: str = ""
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_extra("User", self.extra, USER_KEYS)

    def to_dict(self) -> JSONObject:
        """Return the JSON object stored for this user."""
        return {"id": self.id, "name": self.name, **self.extra}

    @classmethod
    def from_dict(cls, data: object) -> User:
        """Build a user from a stored JSON object.

        Raises:
            InvalidRecordError: If ``data`` is not an object or has no string ``id``.
        """
        data = _require_mapping("User", data)
        name = data.get("name", "")
        if not isinstance(name, str):
            raise InvalidRecordError("User", "'name' must be a string")
        return cls(
            id=_require_str("User", data, "id"),
            name=name,
            extra=_extra_of(data, USER_KEYS),
        )


# ============================================================================
#                                Test results
# ============================================================================


@dataclass(frozen=True, slots=True)
class NewTestResult:
    """A test attempt as submitted by the caller, before an id and date exist.

    Field types are checked with the same rules ``TestResult.from_dict`` applies,
    so anything accepted here reads back after saving.

    Raises:
        InvalidRecordError: If ``student_id`` is not a string or a score is not a
            number (strings such as ``"80"`` and booleans are refused).
        ReservedFieldError: If ``extra`` shadows a managed key.
    """

    __test__ = False  # not a pytest test class

    student_id: str
    percentage: int | float
    time_used: int | float
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_str("TestResult", "studentId", self.student_id)
        _check_number("TestResult", "percentage", self.percentage)
        _check_number("TestResult", "timeUsed", self.time_used)
        _check_extra("TestResult", self.extra, TEST_RESULT_KEYS)


@dataclass(frozen=True, slots=True)
class TestResult:
    """The outcome of one test attempt, as stored in the result log."""

    __test__ = False  # not a pytest test class

    id: str
    student_id: str
    percentage: int | float
    time_used: int | float
    date: str
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_extra("TestResult", self.extra, TEST_RESULT_KEYS)

    @classmethod
    def from_new(cls, new: NewTestResult, *, record_id: str, date: str) -> TestResult:
        """Complete a submitted attempt with its generated id and save date."""
        return cls(
            id=record_id,
            student_id=new.student_id,
            percentage=new.percentage,
            time_used=new.time_used,
            date=date,
            extra=dict(new.extra),
        )

    def to_dict(self) -> JSONObject:
        """Return the JSON object stored for this result."""
        return {
            "studentId": self.student_id,
            "percentage": self.percentage,
            "timeUsed": self.time_used,
            **self.extra,
            "id": self.id,
            "date": self.date,
        }

    @classmethod
    def from_dict(cls, data: object) -> TestResult:
        """Build a result from a stored JSON object.

        Raises:
            InvalidRecordError: If a required key is missing or has the wrong type.
        """
        data = _require_mapping("TestResult", data)
        return cls(
            id=_require_str("TestResult", data, "id"),
            student_id=_require_str("TestResult", data, "studentId"),
            percentage=_require_number("TestResult", data, "percentage"),
            time_used=_require_number("TestResult", data, "timeUsed"),
            date=_require_str("TestResult", data, "date"),
            extra=_extra_of(data, TEST_RESULT_KEYS),
        )


@dataclass(frozen=True, slots=True)
class UserStats:
    """Aggregate statistics over one user's test results."""

    total_tests: int = 0
    average_score: int = 0
    best_score: int | float = 0
    total_time: int | float = 0

    @classmethod
    def from_results(cls, results: Iterable[TestResult]) -> UserStats:
        """Aggregate a user's results; an empty input gives all-zero stats.

        The average is rounded half-up (``84.5 -> 85``).
        """
        results = list(results)
        if not results:
            return cls()
        total_score = sum(r.percentage for r in results)
        return cls(
            total_tests=len(results),
            average_score=math.floor(total_score / len(results) + 0.5),
            best_score=max(r.percentage for r in results),
            total_time=sum(r.time_used for r in results),
        )

    def to_dict(self) -> JSONObject:
        """Return the camelCase JSON object used by page-level code."""
        return {
            "totalTests": self.total_tests,
            "averageScore": self.average_score,
            "bestScore": self.best_score,
            "totalTime": self.total_time,
        }


# ============================================================================
#                                Registrations
# ============================================================================


@dataclass(frozen=True, slots=True)
class NewRegistration:
    """A test registration as submitted by the caller.

    Raises:
        InvalidRecordError: If ``student_id`` or ``test_name`` is not a string.
        ReservedFieldError: If ``extra`` shadows a managed key.
    """

    student_id: str
    test_name: str
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_str("Registration", "studentId", self.student_id)
        _check_str("Registration", "testName", self.test_name)
        _check_extra("Registration", self.extra, REGISTRATION_KEYS)


@dataclass(frozen=True, slots=True)
class Registration:
    """A student's registration for a named test."""

    id: str
    student_id: str
    test_name: str
    registration_date: str
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _check_extra("Registration", self.extra, REGISTRATION_KEYS)

    @classmethod
    def from_new(
        cls, new: NewRegistration, *, record_id: str, date: str
    ) -> Registration:
        """Complete a submitted registration with its generated id and date."""
        return cls(
            id=record_id,
            student_id=new.student_id,
            test_name=new.test_name,
            registration_date=date,
            extra=dict(new.extra),
        )

    def to_dict(self) -> JSONObject:
        """Return the JSON object stored for this registration."""
        return {
            "studentId": self.student_id,
            "testName": self.test_name,
            **self.extra,
            "id": self.id,
            "registrationDate": self.registration_date,
        }

    @classmethod
    def from_dict(cls, data: object) -> Registration:
        """Build a registration from a stored JSON object.

        Raises:
            InvalidRecordError: If a required key is missing or has the wrong type.
        """
        data = _require_mapping("Registration", data)
        return cls(
            id=_require_str("Registration", data, "id"),
            student_id=_require_str("Registration", data, "studentId"),
            test_name=_require_str("Registration", data, "testName"),
            registration_date=_require_str("Registration", data, "registrationDate"),
            extra=_extra_of(data, REGISTRATION_KEYS),
        )
