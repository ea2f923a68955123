"""Test registration log."""

from __future__ import annotations

from examportal.domain.records import NewRegistration, Registration

from .record_log import RecordLog

REGISTRATIONS_KEY = "testRegistrations"
REGISTRATION_ID_PREFIX = "REG"


class RegistrationManager(RecordLog[NewRegistration, Registration]):
    """Reads and appends registrations stored under ``testRegistrations``.

    Note:
        Writes never refuse a second registration for the same test. Callers
        that want one registration per test consult ``is_registered`` first.
    """

    KIND = "registration"
    STORAGE_KEY = REGISTRATIONS_KEY
    ID_PREFIX = REGISTRATION_ID_PREFIX

    def get_all_registrations(self) -> list[Registration]:
        """Return every stored registration in insertion order."""
        return self._all()

    def get_user_registrations(self, user_id: str) -> list[Registration]:
        """Return the registrations of ``user_id``, in order."""
        return self._for_user(user_id)

    def save_registration(self, registration: NewRegistration) -> Registration | None:
        """Append a registration with a fresh ``REG`` id and the current date.

        Returns:
            The stored registration, or None if the store refused the write.
        """
        return self._append(registration)

    def is_registered(self, user_id: str, test_name: str) -> bool:
        """Return True if ``user_id`` has a registration for exactly ``test_name``.

        The comparison is exact and case-sensitive.
        """
        return any(
            registration.test_name == test_name
            for registration in self._for_user(user_id)
        )

    # ---- RecordLog ----

    def _parse(self, data: object) -> Registration:
        return Registration.from_dict(data)

    def _build(
        self, new: NewRegistration, *, record_id: str, date: str
    ) -> Registration:
        return Registration.from_new(new, record_id=record_id, date=date)
