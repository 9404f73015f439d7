from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.enums import Collection
from ..storage.collection import JsonCollection
from ..storage.store import DocumentStore
from .model import Project
from .repository import ProjectRepository

MISSING_MESSAGE = "Project database not found"


class JsonProjectRepository(ProjectRepository):
    def __init__(self, store: DocumentStore):
        self._projects = JsonCollection(store, Collection.PROJECTS.value, list)
        self._members = JsonCollection(store, Collection.PROJECT_MEMBERS.value, list)

    def _load(self) -> List[dict]:
        return list(self._projects.require(MISSING_MESSAGE))

    def list_all(self, *, initialize: bool = False) -> Sequence[Project]:
        records = self._projects.load_or_initialize() if initialize else self._load()
        return [Project.from_record(r) for r in records]

    def get_by_id(self, project_id: str) -> Optional[Project]:
        for r in self._load():
            if r.get("id") == project_id:
                return Project.from_record(r)
        return None

    def add(self, project: Project) -> None:
        records = list(self._projects.load_or_initialize())
        records.append(project.to_record())
        self._projects.save(records)

    def update(self, project: Project) -> bool:
        records = self._load()
        for i, r in enumerate(records):
            if r.get("id") == project.id:
                records[i] = project.to_record()
                self._projects.save(records)
                return True
        return False

    def delete_by_number_and_name(self, project_number: str, project_name: str) -> int:
        records = self._load()
        kept = [
            r for r in records
            if r.get("projectNumber") != project_number or r.get("projectName") != project_name
        ]
        removed = len(records) - len(kept)
        if removed:
            self._projects.save(kept)
        return removed

    def members_for(self, project: Project) -> Sequence[dict]:
        members = self._members.load_or_initialize()
        return [
            m for m in members
            if m.get("projectId") == project.id
            or (project.project_number and m.get("projectNumber") == project.project_number)
            or (project.project_name and m.get("projectName") == project.project_name)
        ]
