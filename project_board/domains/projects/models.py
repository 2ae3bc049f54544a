"""Project record and status."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from project_board.domains.projects.ids import IdGenerator


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    FINISHED = "finished"


@dataclass(frozen=True)
class Project:
    """One submitted project. Read-only once created."""

    id: str
    title: str
    description: str
    people: int
    status: ProjectStatus = ProjectStatus.ACTIVE

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        people: int,
        id_generator: IdGenerator,
    ) -> "Project":
        """
        Build a new ACTIVE project with a fresh id.

        No validation happens here; callers gate input with the validator first.
        """
        return cls(
            id=id_generator(),
            title=title,
            description=description,
            people=people,
            status=ProjectStatus.ACTIVE,
        )
