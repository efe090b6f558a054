from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_LEAVES_PER_YEAR, REQUEST_ID_BASE
from .database.bootstrap import ensure_demo_requests, ensure_demo_users
from .feedback.repository import InMemoryFeedbackRepository
from .feedback.service import FeedbackService
from .reports.export_service import ExportService
from .reports.service import ReportService
from .requests.memory_request_repository import InMemoryLeaveRepository
from .requests.service import LeaveLedger
from .users.memory_directory import InMemoryDirectory
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    directory: InMemoryDirectory
    requests_repo: InMemoryLeaveRepository
    feedback_repo: InMemoryFeedbackRepository

    auth_service: AuthService
    user_service: UserService
    ledger: LeaveLedger
    feedback_service: FeedbackService
    report_service: ReportService
    export_service: ExportService


def build_container(*, app_config: dict) -> Container:
    leaves_per_year = int(app_config.get("leaves_per_year", DEFAULT_LEAVES_PER_YEAR))
    request_id_base = int(app_config.get("request_id_base", REQUEST_ID_BASE))

    directory = InMemoryDirectory()
    requests_repo = InMemoryLeaveRepository(id_base=request_id_base)
    feedback_repo = InMemoryFeedbackRepository()

    if bool(app_config.get("seed_demo_data", False)):
        ensure_demo_users(directory, leaves_per_year=leaves_per_year)
        ensure_demo_requests(requests_repo, request_id_base=request_id_base)

    return Container(
        directory=directory,
        requests_repo=requests_repo,
        feedback_repo=feedback_repo,
        auth_service=AuthService(directory),
        user_service=UserService(directory, leaves_per_year=leaves_per_year),
        ledger=LeaveLedger(requests_repo, directory),
        feedback_service=FeedbackService(feedback_repo, directory),
        report_service=ReportService(directory, requests_repo, feedback_repo),
        export_service=ExportService(app_config.get("export_dir", "exports")),
    )
