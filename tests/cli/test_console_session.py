from __future__ import annotations

from datetime import date

import pytest

from src.smart_leave.smart_leave.cli.console import Console
from src.smart_leave.smart_leave.cli.session import ConsoleSession
from src.smart_leave.smart_leave.cli.tables import fit, render_table
from src.smart_leave.smart_leave.container import build_container
from src.smart_leave.smart_leave.core.enums import RequestStatus


class ScriptedConsole(Console):
    def __init__(self, inputs):
        self._inputs = list(inputs)
        self.lines: list[str] = []

    def read(self, prompt: str) -> str:
        if not self._inputs:
            raise EOFError
        return self._inputs.pop(0)

    def write(self, message: str = "") -> None:
        self.lines.append(message)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def container(tmp_path):
    return build_container(app_config={"seed_demo_data": True, "export_dir": str(tmp_path)})


def run(container, inputs, **kwargs) -> ScriptedConsole:
    console = ScriptedConsole(inputs)
    ConsoleSession(container, console, **kwargs).run()
    return console


def test_employee_applies_for_leave(container):
    out = run(
        container,
        ["1", "shubhangi@email.com", "pass123", "1", "2025-12-01", "2025-12-02", "Casual", "Trip", "9", "5"],
    )

    assert "[OK] Logged in as Shubhangi Tyagi (Employee)" in out.lines
    assert "[OK] Leave submitted as #1001! Remaining: 22" in out.lines
    assert out.lines[-1] == "Goodbye!"
    req = container.ledger.get(1001)
    assert req.status == RequestStatus.PENDING
    assert req.requested_days == 2


def test_invalid_inputs_are_reprompted(container):
    out = run(
        container,
        ["1", "bad-email", "shubhangi@email.com", "pass123", "1", "2025-13-01", "2025-12-05", "2025-12-01", "9", "5"],
    )

    assert "[ERROR] Invalid email! Please re-enter." in out.lines
    assert "[ERROR] Invalid date! Please re-enter." in out.lines
    assert "[ERROR] End before Start!" in out.lines
    assert container.directory.find_by_id(101).leave_balance == 24


def test_wrong_credentials(container):
    out = run(container, ["2", "shubhangi@email.com", "pass123", "5"])
    assert "[ERROR] No such Manager or wrong credentials." in out.lines


def test_insufficient_balance_is_reported(container):
    out = run(
        container,
        ["1", "shubhangi@email.com", "pass123", "1", "2025-12-01", "2025-12-31", "Vacation", "", "9", "5"],
    )
    assert any(line.startswith("[ERROR] Leave balance too low") for line in out.lines)
    assert len(container.ledger.all()) == 1


def test_employee_cancels_pending_leave(container):
    req = container.ledger.apply(101, date(2025, 12, 1), date(2025, 12, 3), "Sick", "")

    out = run(container, ["1", "shubhangi@email.com", "pass123", "2", str(req.request_id), "C", "9", "5"])

    assert "[OK] Cancelled & leave restored." in out.lines
    assert container.ledger.get(req.request_id) is None
    assert container.directory.find_by_id(101).leave_balance == 24


def test_employee_edits_pending_leave(container):
    req = container.ledger.apply(101, date(2025, 12, 1), date(2025, 12, 3), "Sick", "")

    out = run(
        container,
        ["1", "shubhangi@email.com", "pass123", "2", str(req.request_id), "E", "2025-12-10", "2025-12-10", "WFH", "moved", "9", "5"],
    )

    assert f"[OK] Edited (old #{req.request_id} deleted, new #{req.request_id + 1} added)." in out.lines
    assert container.directory.find_by_id(101).leave_balance == 23


def test_manager_rejects_and_balance_is_restored(container):
    req = container.ledger.apply(101, date(2025, 12, 1), date(2025, 12, 2), "Casual", "")

    out = run(container, ["2", "parul@email.com", "manager1", "2", str(req.request_id), "R", "7", "5"])

    assert "[OK] Rejected, leave restored." in out.lines
    assert container.ledger.get(req.request_id).status == RequestStatus.REJECTED
    assert container.directory.find_by_id(101).leave_balance == 24


def test_manager_cannot_decide_terminal_request(container):
    out = run(container, ["2", "parul@email.com", "manager1", "2", "1000", "7", "5"])
    assert "[INFO] No such pending request." in out.lines


def test_admin_exports_feedback(container, tmp_path):
    container.feedback_service.submit(employee_id=101, message="Great team, thanks")

    out = run(container, ["3", "admin@email.com", "admin2050", "1", "3", "4", "6", "1", "8", "5"])

    assert "Employees: 1" in out.lines
    assert "Shubhangi Tyagi: Great team, thanks" in out.lines
    assert "🏆 Employee of the Year: Shubhangi Tyagi (Badges: 1)" in out.lines
    files = list(tmp_path.glob("hr_feedback_*.csv"))
    assert len(files) == 1
    assert files[0].read_text(encoding="utf-8") == "From,Message\nShubhangi Tyagi,Great team  thanks\n"


def test_employee_screens(container):
    out = run(
        container,
        ["1", "shubhangi@email.com", "pass123", "3", "5", "6", "7", "Nice", "8", "9", "5"],
        qr_renderer=lambda data: f"QR<{data}>",
    )

    assert "Leaves taken: 6" in out.lines
    assert "Past leaves: 1 | Sick: 0 | WFH: 1 | Vacation: 0" in out.lines
    assert "Predicted: Next leave could be WFH" in out.lines
    assert "QR<Shubhangi Tyagi#101>" in out.lines
    assert container.directory.find_by_id(101).badges == 1
    assert "| 1000   | WFH      |" in out.text


def test_audit_menu_verifies_hashes(container):
    out = run(container, ["4", "1", "2", "5", "5"])
    assert any(line.startswith("Block: ReqID 1000 | Hash: ") for line in out.lines)
    assert "[OK] All hashes verified." in out.lines


def test_session_ends_on_closed_input(container):
    out = run(container, ["1"])
    assert out.lines[-1] == "Goodbye!"


def test_table_rendering():
    assert fit("abcdefgh", 5) == "abcd…"
    assert fit(None, 3) == "   "

    table = render_table(["A", "B"], [3, 2], [])
    assert table.splitlines() == [
        "+-----+----+",
        "| A   | B  |",
        "+-----+----+",
        "| No… |    |",
        "+-----+----+",
    ]
