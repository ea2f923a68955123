"""Test result log: append-only storage and per-user statistics."""

from __future__ import annotations

from examportal.domain.records import NewTestResult, TestResult, UserStats
from examportal.utils.timing import timed

from .record_log import RecordLog

RESULTS_KEY = "testResults"
RESULT_ID_PREFIX = "TEST"


class ResultManager(RecordLog[NewTestResult, TestResult]):
    """Reads and appends test results stored under ``testResults``."""

    KIND = "test result"
    STORAGE_KEY = RESULTS_KEY
    ID_PREFIX = RESULT_ID_PREFIX

    def get_all_results(self) -> list[TestResult]:
        """Return every stored result in insertion order."""
        return self._all()

    def get_user_results(self, user_id: str) -> list[TestResult]:
        """Return the results whose ``student_id`` is ``user_id``, in order."""
        return self._for_user(user_id)

    def save_result(self, result: NewTestResult) -> TestResult | None:
        """Append a result with a fresh ``TEST`` id and the current date.

        Returns:
            The stored result, or None if the store refused the write.
        """
        return self._append(result)

    @timed("ResultManager.get_user_stats")
    def get_user_stats(self, user_id: str) -> UserStats:
        """Aggregate ``user_id``'s results (all zeros when there are none)."""
        return UserStats.from_results(self._for_user(user_id))

    # ---- RecordLog ----

    def _parse(self, data: object) -> TestResult:
        return TestResult.from_dict(data)

    def _build(self, new: NewTestResult, *, record_id: str, date: str) -> TestResult:
        return TestResult.from_new(new, record_id=record_id, date=date)
