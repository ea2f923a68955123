"""End-to-end tests driving the portal commands against a JSON store file.

Every invocation is a fresh process-like run: state only survives through the
``store.json`` file in the isolated working directory.
"""

import json
from pathlib import Path

import pytest

# pylint: disable=redefined-outer-name,unused-argument

STORE_FILE = "store.json"


@pytest.fixture
def logged_in(invoke):
    """Log in as S001 and return the invoke helper."""
    result = invoke("login", "S001", "--name", "Ada Lovelace", "-f", "grade=10")
    assert result.exit_code == 0, result.output
    return invoke


def stored() -> dict:
    """Decode the JSON store document."""
    document = json.loads(Path(STORE_FILE).read_text(encoding="utf-8"))
    return {key: json.loads(text) for key, text in document.items()}


class TestSession:
    """login / whoami / logout."""

    @staticmethod
    def test_login_persists_user(logged_in) -> None:
        assert stored()["currentUser"] == {"id": "S001", "name": "Ada Lovelace", "grade": 10}
        result = logged_in("whoami")
        assert result.exit_code == 0
        assert result.stdout.strip() == "Ada Lovelace (S001)"

    @staticmethod
    def test_whoami_json(logged_in) -> None:
        result = logged_in("whoami", "--json")
        assert json.loads(result.stdout) == {"id": "S001", "name": "Ada Lovelace", "grade": 10}

    @staticmethod
    def test_login_replaces_user(logged_in) -> None:
        logged_in("login", "S002", "--name", "Grace")
        assert json.loads(logged_in("whoami", "--json").stdout)["id"] == "S002"

    @staticmethod
    def test_reserved_field_is_rejected(invoke) -> None:
        result = invoke("login", "S001", "--name", "Ada", "-f", "id=S999")
        assert result.exit_code == 2
        assert "reserved" in result.output
        assert not Path(STORE_FILE).exists()

    @staticmethod
    def test_logout(logged_in) -> None:
        result = logged_in("logout")
        assert result.exit_code == 0
        assert "Logged out." in result.output
        assert "currentUser" not in stored()
        # logging out twice is fine
        assert logged_in("logout").exit_code == 0

    @staticmethod
    @pytest.mark.parametrize(
        "args",
        [
            ["whoami"],
            ["results", "save", "--percentage", "50", "--time-used", "10"],
            ["results", "list"],
            ["results", "stats"],
            ["registrations", "add", "Algebra I"],
            ["registrations", "list"],
            ["registrations", "check", "Algebra I"],
        ],
    )
    def test_commands_require_login(invoke, args) -> None:
        """Guarded commands show the login notice and exit with status 2."""
        result = invoke(*args)
        assert result.exit_code == 2
        assert "Please login to access this page." in result.output
        assert "Redirecting to login.html in 2s" in result.output
        assert result.stdout == ""


class TestResults:
    """results save / list / stats."""

    @staticmethod
    def test_save_and_list(logged_in) -> None:
        first = logged_in("results", "save", "--percentage", "85", "--time-used", "1200")
        assert first.exit_code == 0, first.output
        result_id = first.stdout.strip()
        assert result_id.startswith("TEST") and len(result_id) == 13
        logged_in(
            "results", "save", "--percentage", "72.5", "--time-used", "900",
            "-f", "testName=Algebra I",
        )

        listing = json.loads(logged_in("results", "list", "--json").stdout)
        assert [r["percentage"] for r in listing] == [85, 72.5]
        assert listing[0]["id"] == result_id
        assert listing[0]["studentId"] == "S001"
        assert listing[0]["date"].endswith("Z")
        assert listing[1]["testName"] == "Algebra I"

        text = logged_in("results", "list").stdout.splitlines()
        assert len(text) == 2
        assert "S001  85%  1200s" in text[0]

    @staticmethod
    def test_list_is_per_user_unless_all(logged_in) -> None:
        logged_in("results", "save", "--percentage", "90", "--time-used", "60")
        logged_in("login", "S002", "--name", "Grace")
        logged_in("results", "save", "--percentage", "40", "--time-used", "30")

        mine = json.loads(logged_in("results", "list", "--json").stdout)
        everyone = json.loads(logged_in("results", "list", "--all", "--json").stdout)
        assert [r["studentId"] for r in mine] == ["S002"]
        assert [r["studentId"] for r in everyone] == ["S001", "S002"]

    @staticmethod
    def test_stats(logged_in) -> None:
        for percentage, time_used in [("85", "100"), ("90", "200"), ("72", "300")]:
            logged_in("results", "save", "--percentage", percentage, "--time-used", time_used)
        summary = json.loads(logged_in("results", "stats", "--json").stdout)
        assert summary == {
            "totalTests": 3,
            "averageScore": 82,
            "bestScore": 90,
            "totalTime": 600,
        }
        text = logged_in("results", "stats").stdout
        assert "Average score: 82%" in text

    @staticmethod
    def test_stats_without_results(logged_in) -> None:
        summary = json.loads(logged_in("results", "stats", "--json").stdout)
        assert summary == {"totalTests": 0, "averageScore": 0, "bestScore": 0, "totalTime": 0}

    @staticmethod
    def test_list_shows_unparseable_dates_as_stored(logged_in) -> None:
        document = json.loads(Path(STORE_FILE).read_text(encoding="utf-8"))
        document["testResults"] = json.dumps(
            [{"id": "TEST1", "studentId": "S001", "percentage": 50, "timeUsed": 5,
              "date": "yesterday"}]
        )
        document["testRegistrations"] = json.dumps(
            [{"id": "REG1", "studentId": "S001", "testName": "Geometry",
              "registrationDate": "soon"}]
        )
        Path(STORE_FILE).write_text(json.dumps(document), encoding="utf-8")

        listed = logged_in("results", "list")
        assert listed.exit_code == 0, listed.output
        assert "TEST1  yesterday  S001  50%  5s" in listed.stdout
        registered = logged_in("registrations", "list")
        assert registered.exit_code == 0, registered.output
        assert "REG1  soon  S001  Geometry" in registered.stdout


class TestRegistrations:
    """registrations add / list / check."""

    @staticmethod
    def test_add_check_and_refuse_duplicate(logged_in) -> None:
        added = logged_in("registrations", "add", "Algebra I", "-f", "slot=AM")
        assert added.exit_code == 0, added.output
        assert added.stdout.strip().startswith("REG")
        assert "Registered for Algebra I." in added.output

        check = logged_in("registrations", "check", "Algebra I")
        assert (check.exit_code, check.stdout.strip()) == (0, "registered")
        other = logged_in("registrations", "check", "algebra i")
        assert (other.exit_code, other.stdout.strip()) == (1, "not registered")

        again = logged_in("registrations", "add", "Algebra I")
        assert again.exit_code == 1
        assert "Already registered for Algebra I." in again.output
        assert len(stored()["testRegistrations"]) == 1

    @staticmethod
    def test_list(logged_in) -> None:
        logged_in("registrations", "add", "Algebra I")
        logged_in("registrations", "add", "Geometry")
        listing = json.loads(logged_in("registrations", "list", "--json").stdout)
        assert [r["testName"] for r in listing] == ["Algebra I", "Geometry"]
        assert all(r["registrationDate"].endswith("Z") for r in listing)
        assert len(logged_in("registrations", "list").stdout.splitlines()) == 2


class TestValidate:
    """validate email / form."""

    @staticmethod
    @pytest.mark.parametrize(("value", "code"), [("a@b.com", 0), ("a@b", 1), ("a.b.com", 1)])
    def test_email(invoke, value, code) -> None:
        assert invoke("validate", "email", value).exit_code == code

    @staticmethod
    def test_form_reports_every_missing_field(invoke) -> None:
        result = invoke(
            "validate", "form",
            "-r", "name", "-r", "email:Email is required!", "-r", "phone",
            "-f", "name=Ada", "-f", "email=   ",
        )
        assert result.exit_code == 1
        assert "Email is required!, phone is required" in result.output

    @staticmethod
    def test_form_ok(invoke) -> None:
        result = invoke("validate", "form", "-r", "name", "-f", "name=Ada")
        assert result.exit_code == 0
        assert "All required fields are filled in." in result.output


class TestStore:
    """store keys / clear."""

    @staticmethod
    def test_keys_and_clear(logged_in) -> None:
        logged_in("registrations", "add", "Algebra I")
        assert logged_in("store", "keys").stdout.split() == ["currentUser", "testRegistrations"]

        aborted = logged_in("store", "clear", input="n\n")
        assert aborted.exit_code == 1
        assert "This will delete" in aborted.output
        assert stored()

        cleared = logged_in("store", "clear", "--yes")
        assert cleared.exit_code == 0
        assert stored() == {}
        assert logged_in("store", "keys").stdout == ""

    @staticmethod
    def test_memory_store_forgets(invoke) -> None:
        assert invoke("--store", "memory://", "login", "S1", "--name", "Ada").exit_code == 0
        assert invoke("--store", "memory://", "whoami").exit_code == 2

    @staticmethod
    def test_sqlite_store(invoke) -> None:
        url = "sqlite:///portal.db"
        assert invoke("--store", url, "login", "S1", "--name", "Ada").exit_code == 0
        result = invoke("--store", url, "--namespace", "other", "whoami")
        assert result.exit_code == 2
        assert invoke("--store", url, "whoami").stdout.strip() == "Ada (S1)"

    @staticmethod
    def test_unknown_store_url(invoke) -> None:
        result = invoke("--store", "portal.db", "store", "keys")
        assert result.exit_code == 2
        assert "Cannot tell which store" in result.output
