"""Interface for reading form control values."""

import abc

# pylint: disable=too-few-public-methods


class FormSource(abc.ABC):
    """Contract for looking up the current value of a form control."""

    @abc.abstractmethod
    def lookup(self, field_id: str | None, field_name: str | None) -> str | None:
        """Return the value of the control matching ``field_id`` or ``field_name``.

        A control matched by id wins over one matched by name.

        Returns:
            The control's raw value, or None if no such control exists.
        """
