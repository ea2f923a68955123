"""Form validation helpers.

Validation never raises for bad input: problems come back as a list of
human-readable messages, which ``show_errors`` hands to the presenter.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from examportal.domain.errors import InvalidFieldSpecError

if TYPE_CHECKING:
    from examportal.interfaces.form_source import FormSource
    from examportal.interfaces.presenter import Presenter

# Deliberately loose: one "@", and a "." somewhere after it.
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def is_valid_email(value: str) -> bool:
    """Return True if ``value`` looks like ``local@domain.tld``."""
    return EMAIL_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """A required form field, found by control id or control name.

    Attributes:
        id: Control id; looked up first.
        name: Control name; looked up when no control has ``id``.
        message: Error to report instead of ``"<name> is required"``.
    """

    id: str | None = None
    name: str | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        if self.id is None and self.name is None:
            raise InvalidFieldSpecError

    @property
    def default_message(self) -> str:
        """The message used when no custom one is given."""
        return f"{self.name or self.id} is required"


class FormValidator:
    """Checks form input before it reaches the record logs.

    Args:
        presenter: Shows the joined error message in ``show_errors``.
        form_source: Default source of control values for ``validate_required``.
    """

    def __init__(self, presenter: Presenter, form_source: FormSource | None = None) -> None:
        self._presenter = presenter
        self._form_source = form_source

    def validate_required(
        self, fields: Iterable[FieldSpec], form_source: FormSource | None = None
    ) -> list[str]:
        """Report every required field that is missing or blank.

        Args:
            fields: The required fields, in display order.
            form_source: Where to read control values; defaults to the
                validator's own source.

        Returns:
            list[str]: One message per failing field, in order. Empty when valid.

        Raises:
            ValueError: If no form source is available.
        """
        source = form_source or self._form_source
        if source is None:
            raise ValueError("validate_required needs a form source")
        errors: list[str] = []
        for spec in fields:
            value = source.lookup(spec.id, spec.name)
            if value is None or not value.strip():
                errors.append(spec.message or spec.default_message)
        return errors

    @staticmethod
    def validate_email(value: str) -> bool:
        """Return True if ``value`` looks like an email address."""
        return is_valid_email(value)

    def show_errors(self, errors: list[str]) -> bool:
        """Show ``errors`` as one notification.

        Returns:
            bool: True when there is nothing to show (the form is valid).
        """
        if errors:
            self._presenter.show_error(", ".join(errors))
            return False
        return True
