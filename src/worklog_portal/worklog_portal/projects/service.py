from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence

from ..common.datetime_utils import now_iso
from ..common.validators import require_fields
from ..core.exceptions import NotFoundError, ValidationError
from .model import Project
from .repository import ProjectRepository

logger = logging.getLogger(__name__)

_SEARCH_KEYS = (("projectNumber", "project_number"), ("projectName", "project_name"))


def _member_hours(member: Mapping[str, Any]) -> float:
    # Hand-edited member files may carry blanks or text here; those count as zero.
    try:
        return float(member.get("hours") or 0)
    except (TypeError, ValueError):
        return 0.0


@dataclass(frozen=True)
class ProjectDetails:
    project: Project
    members: Sequence[dict]

    @property
    def total_hours(self) -> float:
        return sum(_member_hours(m) for m in self.members)


class ProjectService:
    def __init__(self, projects: ProjectRepository):
        self._projects = projects

    def list_projects(self) -> List[Project]:
        return list(self._projects.list_all(initialize=True))

    def create_project(self, fields: Mapping[str, Any]) -> Project:
        require_fields(fields, ("projectNumber", "projectName"))
        record = {k: v for k, v in fields.items() if k not in ("id", "createdAt")}
        record.update(id=str(uuid.uuid4()), createdAt=now_iso())

        project = Project.from_record(record)
        self._projects.add(project)
        logger.info("created project %s (%s %s)", project.id, project.project_number, project.project_name)
        return project

    def get_project(self, project_id: str) -> Project:
        project = self._projects.get_by_id(project_id)
        if not project:
            logger.info("project not found for id=%r", project_id)
            raise NotFoundError("Project not found")
        return project

    def update_project(self, project_id: str, partial: Mapping[str, Any]) -> Project:
        project = self.get_project(project_id)
        changes = {k: v for k, v in partial.items() if k != "id"}
        updated = Project.from_record({**project.to_record(), **changes})
        if not self._projects.update(updated):
            raise NotFoundError("Project not found")
        logger.info("updated project %s fields=%s", updated.id, sorted(changes))
        return updated

    def search(self, criteria: Mapping[str, Any]) -> Project:
        """First project matching every supplied key; absent keys match anything."""
        projects = self._projects.list_all()
        for p in projects:
            if all(
                not criteria.get(key) or getattr(p, attr) == str(criteria[key])
                for key, attr in _SEARCH_KEYS
            ):
                return p
        logger.info("no project matches %s", dict(criteria))
        raise NotFoundError("Project not found")

    def delete_project(self, project_number: str, project_name: str) -> int:
        if not project_number or not project_name:
            raise ValidationError("projectNumber and projectName are required")
        removed = self._projects.delete_by_number_and_name(str(project_number), str(project_name))
        if not removed:
            raise NotFoundError("Project not found")
        logger.info("deleted %d project(s) %s %s", removed, project_number, project_name)
        return removed

    def project_details(self, key: str) -> ProjectDetails:
        for p in self._projects.list_all(initialize=True):
            if p.matches_key(key):
                return ProjectDetails(project=p, members=list(self._projects.members_for(p)))
        raise NotFoundError("Project not found")
