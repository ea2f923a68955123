"""Fake implementations shared by the test suites."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from examportal.interfaces.key_value_store import KeyValueStore, StoreUnavailableError
from examportal.interfaces.presenter import Presenter


@dataclass
class RecordingPresenter(Presenter):
    """Presenter that remembers every notification, navigation and refresh."""

    successes: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    navigations: list[tuple[str, float]] = field(default_factory=list)
    sessions: list[Mapping[str, Any] | None] = field(default_factory=list)

    def show_success(self, message: str) -> None:
        self.successes.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def navigate(self, target: str, delay: float = 0.0) -> None:
        self.navigations.append((target, delay))

    def session_changed(self, user: Mapping[str, Any] | None) -> None:
        self.sessions.append(user)


class UnavailableKeyValueStore(KeyValueStore):
    """A store whose backend fails on every operation."""

    def __repr__(self) -> str:
        return "UnavailableKeyValueStore()"

    def _read(self, key: str) -> str | None:
        raise StoreUnavailableError("backend is down")

    def _write(self, key: str, text: str) -> None:
        raise StoreUnavailableError("backend is down")

    def _delete(self, key: str) -> None:
        raise StoreUnavailableError("backend is down")

    def _delete_all(self) -> None:
        raise StoreUnavailableError("backend is down")

    def _list_keys(self) -> list[str]:
        raise StoreUnavailableError("backend is down")


class FixedClock:
    """Callable clock returning a fixed instant, advanced manually."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        """Move the clock forward by ``timedelta(**kwargs)``."""
        self.now += timedelta(**kwargs)
