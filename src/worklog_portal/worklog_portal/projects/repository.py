from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    def list_all(self, *, initialize: bool = False) -> Sequence[Project]:
        """All projects; raises NotFoundError when the collection is missing and ``initialize`` is false."""

        raise NotImplementedError

    def get_by_id(self, project_id: str) -> Optional[Project]:
        raise NotImplementedError

    def add(self, project: Project) -> None:
        raise NotImplementedError

    def update(self, project: Project) -> bool:
        raise NotImplementedError

    def delete_by_number_and_name(self, project_number: str, project_name: str) -> int:
        """Remove every project matching both fields; returns how many were removed."""

        raise NotImplementedError

    def members_for(self, project: Project) -> Sequence[dict]:
        raise NotImplementedError
