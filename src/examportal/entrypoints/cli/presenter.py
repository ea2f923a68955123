"""Terminal presenter for the EXAMPORTAL CLI.

Notifications become styled stderr lines. A terminal has no pages, so
navigation requests are announced rather than performed.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from examportal.interfaces.presenter import Presenter

from .helpers import messages

logger = logging.getLogger(__name__)


class ConsolePresenter(Presenter):
    """Presenter writing notices to stderr via the CLI message helpers."""

    def show_success(self, message: str) -> None:
        messages.success(message)

    def show_error(self, message: str) -> None:
        messages.error(message)

    def navigate(self, target: str, delay: float = 0.0) -> None:
        messages.redirect(target, delay)

    def session_changed(self, user: Mapping[str, Any] | None) -> None:
        if user is None:
            logger.debug("Login state: logged out")
        else:
            logger.debug("Login state: %s (%s)", user.get("name"), user.get("id"))
