"""Interface for ID generators."""

import abc

# pylint: disable=too-few-public-methods


class IdGenerator(abc.ABC):
    """Contract for a prefixed record ID generator."""

    @abc.abstractmethod
    def new_id(self, prefix: str = "ID") -> str:
        """Generate a new identifier starting with ``prefix``.

        Uniqueness is probabilistic; implementations are not required to
        check against identifiers that were issued before.
        """
