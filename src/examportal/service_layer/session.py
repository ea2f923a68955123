"""Session manager: the single client-trusted "current user" slot.

There is no credential check here. Whoever calls ``login`` has already decided
the user is who they claim to be (e.g. a login form checked a user directory);
the session only remembers that decision until ``logout``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from examportal.domain.errors import InvalidRecordError
from examportal.domain.records import User

if TYPE_CHECKING:
    from examportal.interfaces.key_value_store import KeyValueStore
    from examportal.interfaces.presenter import Presenter

logger = logging.getLogger(__name__)

CURRENT_USER_KEY = "currentUser"
HOME_PAGE = "index.html"
LOGIN_PAGE = "login.html"
LOGIN_REQUIRED_MSG = "Please login to access this page."
AUTH_REDIRECT_DELAY = 2.0  # seconds


class SessionManager:
    """Tracks the logged-in user and guards pages that need one.

    Args:
        store: Store holding the current-user record under ``currentUser``.
        presenter: Receives login-state refreshes, notifications and redirects.
    """

    def __init__(self, store: KeyValueStore, presenter: Presenter) -> None:
        self._store = store
        self._presenter = presenter

    def get_current_user(self) -> User | None:
        """Return the logged-in user, or None.

        A stored value that is not a valid user record counts as logged out.
        """
        raw = self._store.get(CURRENT_USER_KEY)
        if raw is None:
            return None
        try:
            return User.from_dict(raw)
        except InvalidRecordError as e:
            logger.warning("Ignoring stored current user: %s", e)
            return None

    def login(self, user: User) -> bool:
        """Make ``user`` the current user, replacing whoever was logged in.

        Returns:
            bool: True if the session was stored.
        """
        stored = self._store.set(CURRENT_USER_KEY, user.to_dict())
        if stored:
            logger.info("Logged in as %s", user.id)
        self.refresh()
        return stored

    def logout(self, redirect_target: str | None = HOME_PAGE) -> None:
        """Forget the current user and go to ``redirect_target``.

        Safe to call when nobody is logged in. Pass ``None`` to stay put.
        """
        self._store.remove(CURRENT_USER_KEY)
        logger.info("Logged out")
        self.refresh()
        if redirect_target is not None:
            self._presenter.navigate(redirect_target)

    def is_logged_in(self) -> bool:
        """Return True if a current user is stored."""
        return self.get_current_user() is not None

    def require_auth(self, redirect_target: str = LOGIN_PAGE) -> bool:
        """Guard a page that needs a logged-in user.

        When nobody is logged in, shows an error and schedules navigation to
        ``redirect_target`` after a short delay. Never raises; callers must
        check the result.

        Returns:
            bool: True if a user is logged in.
        """
        if self.is_logged_in():
            return True
        logger.debug("Access denied, redirecting to %s", redirect_target)
        self._presenter.show_error(LOGIN_REQUIRED_MSG)
        self._presenter.navigate(redirect_target, delay=AUTH_REDIRECT_DELAY)
        return False

    def refresh(self) -> None:
        """Push the current login state to the presenter."""
        user = self.get_current_user()
        self._presenter.session_changed(None if user is None else user.to_dict())
