"""Pytest fixtures for key-value store contract tests.

Provided fixtures
-----------------
- **kv_store**: Parametrized backend that returns a **fresh**, empty
  `KeyValueStore` per test.
- **kv_store_factory**: Module-scoped factory building a fresh store per call,
  for Hypothesis tests that need a new store per generated example.

Backends: ``"memory"``, ``"json"`` (file under a temp dir) and ``"sqlite"``
(in-memory SQLite through `SqlAlchemyKeyValueStore`).
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from examportal.adapters.db.engine import make_engine
from examportal.adapters.key_value_store import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    SqlAlchemyKeyValueStore,
)

if TYPE_CHECKING:
    from examportal.interfaces.key_value_store import KeyValueStore

BACKENDS = ["memory", "json", "sqlite"]


def make_store(kind: str, directory: Path) -> KeyValueStore:
    """Construct a fresh store of the given kind."""
    match kind:
        case "memory":
            return InMemoryKeyValueStore()
        case "json":
            return JsonFileKeyValueStore(directory / "store.json")
        case "sqlite":
            return SqlAlchemyKeyValueStore(make_engine("sqlite+pysqlite:///:memory:"))
        case _:
            raise ValueError(f"unknown store type: {kind}")


@pytest.fixture(params=BACKENDS)
def kv_store(request: pytest.FixtureRequest, tmp_path: Path) -> Iterator[KeyValueStore]:
    """Return a fresh key-value store for the requested backend."""
    store = make_store(request.param, tmp_path)
    yield store
    if isinstance(store, SqlAlchemyKeyValueStore):
        store._engine.dispose()  # pylint: disable=protected-access


@pytest.fixture(scope="module", params=BACKENDS)
def kv_store_factory(
    request: pytest.FixtureRequest, tmp_path_factory: pytest.TempPathFactory
) -> Callable[[], KeyValueStore]:
    """Factory returning a **fresh** store per Hypothesis example."""
    counter = itertools.count()
    base = tmp_path_factory.mktemp(f"kv-{request.param}")

    def make() -> KeyValueStore:
        directory = base / str(next(counter))
        return make_store(request.param, directory)

    return make
