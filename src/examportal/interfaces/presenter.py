"""Interface for the presentation collaborator.

The data layer never renders anything itself. It reports user-visible
notifications, navigation requests and session changes to a ``Presenter``,
which decides how (and whether) to show them: a browser page, a terminal, or
a recording fake in tests.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any


class Presenter(abc.ABC):
    """Contract for the presentation side effects the data layer triggers."""

    @abc.abstractmethod
    def show_success(self, message: str) -> None:
        """Show a transient success notification."""

    @abc.abstractmethod
    def show_error(self, message: str) -> None:
        """Show a transient error notification."""

    @abc.abstractmethod
    def navigate(self, target: str, delay: float = 0.0) -> None:
        """Move to ``target`` after ``delay`` seconds.

        Fire-and-forget: there is no handle to cancel the navigation, and the
        call returns before it happens.
        """

    @abc.abstractmethod
    def session_changed(self, user: Mapping[str, Any] | None) -> None:
        """Refresh anything that displays the login state.

        Args:
            user: The stored current-user object, or None when logged out.
        """
