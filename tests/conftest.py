"""Global pytest fixtures for EXAMPORTAL."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING

import pytest

from examportal.adapters.id_generators import SimpleIdGenerator
from examportal.adapters.key_value_store import InMemoryKeyValueStore
from examportal.bootstrap import bootstrap

from .fakes import FixedClock, RecordingPresenter

if TYPE_CHECKING:
    from examportal.bootstrap import AppContainer

pytest_plugins = ["tests.fixtures.sqlite"]

# pylint: disable=redefined-outer-name

FIXED_NOW = datetime(2026, 10, 19, 7, 39, 0, 123000, tzinfo=timezone.utc)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    """A fresh, empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def presenter() -> RecordingPresenter:
    """A presenter that records every call for assertions."""
    return RecordingPresenter()


@pytest.fixture
def id_generator() -> SimpleIdGenerator:
    """Deterministic sequential ID generator."""
    return SimpleIdGenerator()


@pytest.fixture
def clock() -> FixedClock:
    """A clock frozen at ``FIXED_NOW``."""
    return FixedClock(FIXED_NOW)


@pytest.fixture
def app(store, presenter, id_generator) -> AppContainer:
    """Services wired to the in-memory store and recording presenter."""
    return bootstrap(store=store, presenter=presenter, id_generator=id_generator)
