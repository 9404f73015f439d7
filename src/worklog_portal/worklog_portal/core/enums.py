from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for authorization checks."""

    ADMIN = "admin"
    USER = "user"


class LeaveStatus(str, Enum):
    """Approval state of a leave request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class Rating(str, Enum):
    """Traffic-light rating shared by PM progress, performance and safety checklists."""

    GREEN = "Green"
    YELLOW = "Yellow"
    RED = "Red"


class Collection(str, Enum):
    """Named JSON collections; the value is the file stem under the data directory."""

    USERS = "users"
    PROJECTS = "projects"
    PROJECT_MEMBERS = "project-members"
    TIMESHEETS = "timesheets"
    LEAVE_REQUESTS = "leave-requests"
    LEAVE_DATA = "leave-data"
    MATRICES = "matrices"
    SAFETY = "safety"
    SETTINGS = "settings"
