from __future__ import annotations

from dataclasses import dataclass

from .leave.json_leave_repository import JsonLeaveRepository
from .leave.service import LeaveService
from .matrices.json_matrix_repository import JsonMatrixRepository
from .matrices.service import MatrixService
from .projects.json_project_repository import JsonProjectRepository
from .projects.service import ProjectService
from .settings.json_settings_repository import JsonSettingsRepository
from .settings.service import SettingsService
from .storage.store import DocumentStore
from .timesheets.json_timesheet_repository import JsonTimesheetRepository
from .timesheets.service import TimesheetService
from .users.json_user_repository import JsonUserRepository
from .users.service import AuthService, UserService


@dataclass(frozen=True)
class Container:
    store: DocumentStore

    users_repo: JsonUserRepository
    projects_repo: JsonProjectRepository
    timesheets_repo: JsonTimesheetRepository
    leave_repo: JsonLeaveRepository
    matrices_repo: JsonMatrixRepository
    settings_repo: JsonSettingsRepository

    auth_service: AuthService
    user_service: UserService
    project_service: ProjectService
    timesheet_service: TimesheetService
    leave_service: LeaveService
    matrix_service: MatrixService
    settings_service: SettingsService


def build_container(*, store: DocumentStore) -> Container:
    users_repo = JsonUserRepository(store)
    projects_repo = JsonProjectRepository(store)
    timesheets_repo = JsonTimesheetRepository(store)
    leave_repo = JsonLeaveRepository(store)
    matrices_repo = JsonMatrixRepository(store)
    settings_repo = JsonSettingsRepository(store)

    return Container(
        store=store,
        users_repo=users_repo,
        projects_repo=projects_repo,
        timesheets_repo=timesheets_repo,
        leave_repo=leave_repo,
        matrices_repo=matrices_repo,
        settings_repo=settings_repo,
        auth_service=AuthService(users_repo),
        user_service=UserService(users_repo),
        project_service=ProjectService(projects_repo),
        timesheet_service=TimesheetService(timesheets_repo),
        leave_service=LeaveService(leave_repo),
        matrix_service=MatrixService(matrices_repo),
        settings_service=SettingsService(settings_repo),
    )
