from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from ..common.validators import is_int, is_valid_email, try_parse_date
from ..core.enums import ExportFormat, Role
from ..core.exceptions import ExportError, ValidationError
from ..container import Container
from ..reports.audit import hash_leave, verify
from ..reports.exporters.base import Table
from ..users.model import User
from .console import Console
from .qr import render_qr
from .tables import render_table

logger = logging.getLogger(__name__)

HISTORY_HEADERS = ["ReqID", "Type", "Start", "End", "Days", "Status", "Comments"]
HISTORY_WIDTHS = [6, 8, 10, 10, 4, 8, 28]
ALL_HEADERS = ["ReqID", "EmpID", "Start", "End", "Days", "Type", "Status", "Comments"]
ALL_WIDTHS = [6, 6, 10, 10, 4, 8, 8, 20]
TEAM_HEADERS = ["EmpID", "Name", "Leaves Used", "Leave Balance"]
TEAM_WIDTHS = [6, 20, 12, 12]


class ConsoleSession:
    """Interactive menu loop.

    Logs a user in against the directory, then dispatches on their role to
    the employee, manager or admin menu. All state changes go through the
    container's services.
    """

    def __init__(self, container: Container, console: Console, *, qr_renderer: Callable[[str], str] = render_qr):
        self._c = container
        self._io = console
        self._render_qr = qr_renderer
        self._recorded_hashes: dict[int, str] = {}

    # ---------- prompts ----------

    def _prompt_date(self, label: str) -> date:
        while True:
            value = try_parse_date(self._io.read(f"{label} [YYYY-MM-DD]"))
            if value:
                return value
            self._io.error("Invalid date! Please re-enter.")

    def _prompt_email(self, label: str) -> str:
        while True:
            value = self._io.read(label).strip()
            if is_valid_email(value):
                return value
            self._io.error("Invalid email! Please re-enter.")

    def _prompt_int(self, label: str) -> int:
        while True:
            value = self._io.read(label).strip()
            if is_int(value):
                return int(value)
            self._io.error("Not a valid number! Try again.")

    def _choose(self, title: str, options: list[str]) -> str:
        self._io.heading(title)
        for i, option in enumerate(options, start=1):
            self._io.write(f"{i}. {option}")
        return self._io.read("Choose").strip()

    def _user(self, user_id: int) -> User:
        # users are immutable snapshots; always re-read the current one
        return self._c.directory.find_by_id(user_id)

    # ---------- main loop ----------

    def run(self) -> None:
        self._io.heading("════════ SMART LEAVE MANAGEMENT SYSTEM ════════")
        try:
            while True:
                choice = self._choose(
                    "Main Menu",
                    ["Employee Login", "Manager Login", "Admin Login", "Audit Features", "Exit"],
                )
                if choice == "1":
                    self.role_login(Role.EMPLOYEE)
                elif choice == "2":
                    self.role_login(Role.MANAGER)
                elif choice == "3":
                    self.role_login(Role.ADMIN)
                elif choice == "4":
                    self.audit_menu()
                elif choice == "5":
                    break
                else:
                    self._io.error("Try again!")
        except EOFError:
            logger.debug("input closed, leaving session")
        self._io.write("Goodbye!")

    def role_login(self, role: Role) -> Optional[User]:
        email = self._prompt_email("Email")
        password = self._io.read_secret("Password")
        user = self._c.directory.find_by_credentials(email, password, role)
        if not user:
            logger.info("failed %s login for %s", role.value, email)
            self._io.error(f"No such {role.label} or wrong credentials.")
            return None

        logger.info("user %s logged in as %s", user.user_id, role.value)
        self._io.success(f"Logged in as {user.full_name} ({role.label})")
        menus = {
            Role.EMPLOYEE: self.employee_menu,
            Role.MANAGER: self.manager_menu,
            Role.ADMIN: self.admin_menu,
        }
        menus[user.role](user.user_id)
        return user

    # ---------- employee ----------

    def employee_menu(self, user_id: int) -> None:
        while True:
            user = self._user(user_id)
            self._io.info(f"Employee Dashboard ({user.full_name})")
            self._io.write(f"Leaves: {user.leave_balance}/{user.total_leaves_allowed} | Badges: {user.badges}")
            choice = self._choose(
                "Employee Menu",
                [
                    "Apply for Leave",
                    "Cancel/Edit Pending Leave",
                    "View Leave History",
                    "View/Export My Data",
                    "Stress Detector",
                    "Leave Pattern Prediction",
                    "Submit HR feedback",
                    "Show QR code",
                    "Logout",
                ],
            )
            if choice == "1":
                self.apply_leave(user_id)
            elif choice == "2":
                self.cancel_or_edit(user_id)
            elif choice == "3":
                self.history_table(user_id)
            elif choice == "4":
                self.export_my_data(user_id)
            elif choice == "5":
                self.stress(user_id)
            elif choice == "6":
                self.prediction(user_id)
            elif choice == "7":
                self.feedback(user_id)
            elif choice == "8":
                self._io.write(f"QR for [{user.full_name}#{user.user_id}]:")
                self._io.write(self._render_qr(f"{user.full_name}#{user.user_id}"))
            elif choice == "9":
                return
            else:
                self._io.error("Invalid.")

    def _prompt_leave(self) -> Optional[tuple]:
        start = self._prompt_date("Start Date")
        end = self._prompt_date("End Date")
        if end < start:
            self._io.error("End before Start!")
            return None
        leave_type = self._io.read("Type (Sick/Casual/WFH/Vacation/Others)").strip()
        reason = self._io.read("Reason")
        return start, end, leave_type, reason

    def apply_leave(self, user_id: int) -> None:
        details = self._prompt_leave()
        if not details:
            return
        try:
            req = self._c.ledger.apply(user_id, *details)
        except ValidationError as e:
            self._io.error(str(e))
            return
        self._io.success(f"Leave submitted as #{req.request_id}! Remaining: {self._user(user_id).leave_balance}")

    def cancel_or_edit(self, user_id: int) -> None:
        pending = self._c.ledger.pending_for(user_id)
        if not pending:
            self._io.info("No pending requests.")
            return

        self._io.write("Your pending requests:")
        for r in pending:
            self._io.write(f"ReqID:{r.request_id} {r.leave_type} {r.start_date}-{r.end_date} [{r.status.value}]")

        rid = self._prompt_int("Enter ReqID to Cancel/Edit")
        if rid not in {r.request_id for r in pending}:
            self._io.info("Not found.")
            return

        option = self._io.read("Cancel(C) or Edit(E)?").strip().upper()
        try:
            if option == "C":
                self._c.ledger.cancel(user_id, rid)
                self._io.success("Cancelled & leave restored.")
            elif option == "E":
                details = self._prompt_leave()
                if not details:
                    return
                new = self._c.ledger.edit(user_id, rid, *details)
                self._io.success(f"Edited (old #{rid} deleted, new #{new.request_id} added).")
            else:
                self._io.info("Nothing changed.")
        except ValidationError as e:
            self._io.error(str(e))

    def history_table(self, user_id: int) -> None:
        rows = [
            [r.request_id, r.leave_type, r.start_date, r.end_date, r.requested_days, r.status.value, r.reason]
            for r in self._c.ledger.requests_for(user_id)
        ]
        self._io.write(render_table(HISTORY_HEADERS, HISTORY_WIDTHS, rows))

    def export_my_data(self, user_id: int) -> None:
        choice = self._choose("My Data Export", ["Export CSV", "Export TXT", "Show on screen"])
        reports = self._c.report_service
        if choice == "1":
            self._export([reports.profile_table(user_id)], ExportFormat.CSV, f"employee_{user_id}")
        elif choice == "2":
            tables = [reports.profile_table(user_id), reports.requests_table(user_id=user_id)]
            self._export(tables, ExportFormat.TXT, f"employee_{user_id}")
        else:
            user = self._user(user_id)
            self._io.write(f"Name: {user.full_name}")
            self._io.write(f"Leaves Used: {user.leaves_used}")
            self._io.write(f"Leave Balance: {user.leave_balance}")
            self._io.write("My Requests:")
            self.history_table(user_id)

    def stress(self, user_id: int) -> None:
        report = self._c.report_service.stress(user_id)
        self._io.write("Stress Analysis:")
        self._io.write(f"Leaves taken: {report.leaves_taken}")
        self._io.write(f"Suggestion: {report.suggestion}")

    def prediction(self, user_id: int) -> None:
        p = self._c.report_service.leave_pattern(user_id)
        self._io.write(f"Past leaves: {p.total} | Sick: {p.sick} | WFH: {p.wfh} | Vacation: {p.vacation}")
        self._io.write(f"Predicted: Next leave could be {p.predicted}")

    def feedback(self, user_id: int) -> None:
        message = self._io.read("Please enter feedback for HR")
        try:
            self._c.feedback_service.submit(employee_id=user_id, message=message)
        except ValidationError as e:
            self._io.error(str(e))
            return
        self._io.success("Feedback submitted. Thank you!")

    # ---------- manager ----------

    def manager_menu(self, user_id: int) -> None:
        while True:
            user = self._user(user_id)
            self._io.info(f"Manager Dashboard ({user.full_name})")
            self._io.write(f"Team Leaves Used: {self._c.report_service.team_leaves_used()} | Badges: {user.badges}")
            choice = self._choose(
                "Manager Menu",
                [
                    "View All Leave Requests",
                    "Approve/Reject Leave",
                    "View Team Leave Summary",
                    "Download Leave Request Data (CSV/TXT)",
                    "Download Team Statistics (CSV/TXT)",
                    "Team Analytics Dashboard",
                    "Logout",
                ],
            )
            if choice == "1":
                self.all_requests_table()
            elif choice == "2":
                self.approve_reject()
            elif choice == "3":
                self.team_summary()
            elif choice == "4":
                self._download(self._c.report_service.requests_table(), "leave_requests", self.all_requests_table)
            elif choice == "5":
                self._download(self._c.report_service.team_table(), "team_stats", self.team_summary)
            elif choice == "6":
                self.analytics()
            elif choice == "7":
                return
            else:
                self._io.error("Invalid.")

    def all_requests_table(self) -> None:
        rows = [
            [r.request_id, r.user_id, r.start_date, r.end_date, r.requested_days, r.leave_type, r.status.value, r.reason]
            for r in self._c.ledger.all()
        ]
        self._io.write(render_table(ALL_HEADERS, ALL_WIDTHS, rows))

    def approve_reject(self) -> None:
        self.all_requests_table()
        rid = self._prompt_int("Enter RequestID to Approve/Reject")
        req = self._c.ledger.get(rid)
        if not req or not req.is_pending:
            self._io.info("No such pending request.")
            return

        option = self._io.read("Approve (A) or Reject (R)?").strip().upper()
        try:
            if option == "A":
                self._c.ledger.approve(rid)
                self._io.success("Leave approved.")
            elif option == "R":
                outcome = self._c.ledger.reject(rid)
                if outcome.warning:
                    logger.warning(outcome.warning)
                    self._io.error(outcome.warning)
                if outcome.balance_restored:
                    self._io.success("Rejected, leave restored.")
                else:
                    self._io.success("Rejected.")
            else:
                self._io.info("Nothing changed.")
        except ValidationError as e:
            self._io.error(str(e))

    def team_summary(self) -> None:
        rows = [[u.user_id, u.full_name, u.leaves_used, u.leave_balance] for u in self._c.directory.all_employees()]
        self._io.write(render_table(TEAM_HEADERS, TEAM_WIDTHS, rows))

    def analytics(self) -> None:
        data = self._c.report_service.team_analytics()
        self._io.write("--- Team Analytics ---")
        self._io.write(f"Total leaves by team: {data['total_leaves']}")
        if data["top_absentee"]:
            top = data["top_absentee"]
            self._io.write(f"Top absentee: {top['name']} ({top['days']} leaves)")
        self._io.write(f"Current pending leave requests: {data['pending']}")

    # ---------- admin ----------

    def admin_menu(self, user_id: int) -> None:
        while True:
            user = self._user(user_id)
            self._io.info(f"Admin Dashboard ({user.full_name})")
            self._io.write(
                f"Total Employees: {self._c.directory.count_by_role(Role.EMPLOYEE)}, "
                f"Total Requests: {len(self._c.ledger.all())}"
            )
            choice = self._choose(
                "Admin Menu",
                [
                    "Organization Stats",
                    "Attendance Summary",
                    "View HR Feedback",
                    "Award Board",
                    "Announce Policy Update",
                    "Export HR Feedback",
                    "Audit Features",
                    "Logout",
                ],
            )
            if choice == "1":
                self.org_stats()
            elif choice == "2":
                self._io.write("--- Attendance Summary ---")
                for row in self._c.report_service.attendance_summary():
                    self._io.write(f"{row['name']}: {row['days_attended']} days attended this year.")
            elif choice == "3":
                self.feedback_list()
            elif choice == "4":
                self.award_board()
            elif choice == "5":
                message = self._io.read("Enter policy update message")
                logger.info("policy announced by %s", user_id)
                self._io.write(f"Policy announced: {message}")
            elif choice == "6":
                self._download(self._c.report_service.feedback_table(), "hr_feedback", self.feedback_list)
            elif choice == "7":
                self.audit_menu()
            elif choice == "8":
                return
            else:
                self._io.error("Invalid.")

    def org_stats(self) -> None:
        s = self._c.report_service.org_stats()
        self._io.write("--- Org-wide Leave Stats ---")
        self._io.write(f"Employees: {s['employees']}")
        self._io.write(f"Leaves taken this year: {s['leaves_taken']}")
        self._io.write(f"Total requests this year: {s['total_requests']}")
        self._io.write(f"Approved: {s['approved']}, Rejected: {s['rejected']}, Pending: {s['pending']}")

    def feedback_list(self) -> None:
        self._io.write("--- Recent HR Feedback ---")
        items = self._c.feedback_service.list_all()
        if not items:
            self._io.write("No feedback submitted yet.")
        for fb in items:
            self._io.write(f"{fb.employee_name}: {fb.message}")

    def award_board(self) -> None:
        top = self._c.report_service.award_board()
        if not top:
            self._io.info("No users yet.")
            return
        self._io.write(f"🏆 Employee of the Year: {top['name']} (Badges: {top['badges']})")

    # ---------- audit ----------

    def audit_menu(self) -> None:
        while True:
            choice = self._choose(
                "Audit Features",
                ["Show Leave Chain", "Verify Hashes/Integrity", "Audit Trail", "Export Audit Trail (CSV/TXT)", "Back"],
            )
            if choice == "1":
                self._io.write("Leave Chain:")
                for r in self._c.ledger.all():
                    digest = hash_leave(r)
                    self._recorded_hashes[r.request_id] = digest
                    self._io.write(f"Block: ReqID {r.request_id} | Hash: {digest} | Status: {r.status.value}")
            elif choice == "2":
                self.verify_hashes()
            elif choice == "3":
                self._io.write("Audit Trail (Hashes):")
                for row in self._c.report_service.audit_table().rows:
                    self._io.write(f"ReqID:{row['request_id']} | Status:{row['status']} | Hash:{row['hash']}")
            elif choice == "4":
                self._download(self._c.report_service.audit_table(), "audit_trail", None)
            elif choice == "5":
                return
            else:
                self._io.error("Invalid.")

    def verify_hashes(self) -> None:
        """Compare current hashes with the ones seen when the chain was last shown."""
        requests = self._c.ledger.all()
        changed = verify(requests, self._recorded_hashes)
        self._io.write("Verifying hashes for all requests…")
        for r in requests:
            mark = "CHANGED" if r.request_id in changed else "OK"
            self._io.write(f"Request {r.request_id} hash: {hash_leave(r)} [{mark}]")
        if changed:
            self._io.error(f"{len(changed)} request(s) changed since the chain was last shown.")
        else:
            self._io.success("All hashes verified.")
        self._recorded_hashes = {r.request_id: hash_leave(r) for r in requests}

    # ---------- export ----------

    def _download(self, table: Table, prefix: str, show: Optional[Callable[[], None]]) -> None:
        options = ["Export CSV", "Export TXT"] + (["Show on screen"] if show else [])
        choice = self._choose(f"Download {table.title}", options)
        if choice == "1":
            self._export([table], ExportFormat.CSV, prefix)
        elif choice == "2":
            self._export([table], ExportFormat.TXT, prefix)
        elif show:
            show()
        else:
            self._io.info("Cancelled.")

    def _export(self, tables: list[Table], fmt: ExportFormat, prefix: str) -> None:
        try:
            path = self._c.export_service.export(tables, fmt, prefix=prefix)
        except ExportError as e:
            self._io.error(str(e))
            return
        self._io.success(f"Saved: {path}")
