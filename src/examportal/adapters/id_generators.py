"""ID generators for EXAMPORTAL."""

from __future__ import annotations

import itertools
import random
import string

from examportal.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods

BASE36_ALPHABET = string.digits + string.ascii_uppercase
SUFFIX_LENGTH = 9


class RandomBase36IdGenerator(IdGenerator):
    """Short, prefixed, pseudo-random identifiers.

    Each ID is the prefix followed by nine uppercase base-36 characters
    (e.g. ``"TESTK3F9Q0ZP1"``). The suffix comes from a non-cryptographic
    PRNG; duplicates are possible and not checked for.

    Args:
        seed: Optional seed for reproducible sequences in tests.
    """

    def __init__(self, seed: int | str | None = None) -> None:
        self._random = random.Random(seed)

    def new_id(self, prefix: str = "ID") -> str:
        """Generate a new prefixed identifier."""
        suffix = "".join(self._random.choices(BASE36_ALPHABET, k=SUFFIX_LENGTH))
        return f"{prefix}{suffix}"


class SimpleIdGenerator(IdGenerator):
    """Sequential, zero-padded identifiers shared across all prefixes.

    Deterministic output makes stored records easy to assert on in tests and
    demos; the counter restarts with every instance.

    Args:
        length: Minimum number of digits after the prefix.
    """

    def __init__(self, length: int = SUFFIX_LENGTH) -> None:
        self._counter = itertools.count(1)
        self._length = length

    def new_id(self, prefix: str = "ID") -> str:
        """Generate the next identifier, e.g. ``"REG000000001"``."""
        return f"{prefix}{next(self._counter):0{self._length}d}"


_default_generator = RandomBase36IdGenerator()


def generate_id(prefix: str = "ID") -> str:
    """Generate a prefixed random identifier from a shared generator."""
    return _default_generator.new_id(prefix)
