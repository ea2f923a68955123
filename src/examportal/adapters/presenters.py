"""Headless presenter for EXAMPORTAL.

Used when no interactive surface is attached (scripts, background jobs): every
notification becomes a log record and navigation requests are only recorded.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from examportal.interfaces.presenter import Presenter

logger = logging.getLogger(__name__)


class LoggingPresenter(Presenter):
    """Presenter that routes everything to the ``logging`` module.

    Attributes:
        last_navigation: The most recent ``(target, delay)`` request, if any.
    """

    def __init__(self) -> None:
        self.last_navigation: tuple[str, float] | None = None

    def show_success(self, message: str) -> None:
        logger.info("%s", message)

    def show_error(self, message: str) -> None:
        logger.warning("%s", message)

    def navigate(self, target: str, delay: float = 0.0) -> None:
        self.last_navigation = (target, delay)
        logger.debug("Navigation to %s requested (delay %.1fs)", target, delay)

    def session_changed(self, user: Mapping[str, Any] | None) -> None:
        if user is None:
            logger.debug("Session cleared")
        else:
            logger.debug("Session now belongs to %s", user.get("id"))
