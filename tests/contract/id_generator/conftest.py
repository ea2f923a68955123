"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from examportal.adapters.id_generators import RandomBase36IdGenerator, SimpleIdGenerator
from examportal.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["base36", "simple"])
def id_generator(
    request: pytest.FixtureRequest,
) -> Iterable[IdGenerator]:
    """Return a fresh IdGenerator instance for the requested backend.

    Supported params:
      - `"base36"` → RandomBase36IdGenerator
      - `"simple"` → SimpleIdGenerator
    """

    match request.param:
        case "base36":
            yield RandomBase36IdGenerator()
        case "simple":
            yield SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")
