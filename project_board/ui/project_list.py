"""Project lists: one view per status, fed by ProjectState notifications."""

from __future__ import annotations

from typing import Iterable, Literal

import streamlit as st

from project_board.domains.projects.models import Project, ProjectStatus
from project_board.services.project_state import ProjectState, Snapshot
from project_board.utils.logger import get_logger

logger = get_logger()

ListKind = Literal["active", "finished"]


def filter_projects(projects: Iterable[Project], status: ProjectStatus) -> list[Project]:
    """Projects with the given status, order preserved."""
    return [p for p in projects if p.status == status]


class ProjectList:
    """
    Read-only view of the projects in one status bucket.

    Subscribes to the state once, at construction. Each notification replaces
    `associated_projects` with the filtered snapshot; `render` draws whatever
    the latest notification left there.
    """

    def __init__(self, state: ProjectState, kind: ListKind) -> None:
        if kind not in ("active", "finished"):
            raise ValueError(f"Unknown project list kind: {kind!r}")
        self.kind = kind
        self.status = ProjectStatus(kind)
        self.associated_projects: list[Project] = []
        self.subscription_id = state.add_listener(self._on_projects_changed)

    @property
    def element_id(self) -> str:
        return f"{self.kind}-projects"

    @property
    def list_id(self) -> str:
        return f"{self.kind}-projects-list"

    @property
    def heading(self) -> str:
        return f"{self.kind.upper()} PROJECTS"

    def _on_projects_changed(self, projects: Snapshot) -> None:
        self.associated_projects = filter_projects(projects, self.status)
        logger.debug("%s now holds %d project(s)", self.list_id, len(self.associated_projects))

    def render(self, st=st) -> None:
        st.subheader(self.heading)
        if not self.associated_projects:
            st.caption("No projects yet.")
            return
        for project in self.associated_projects:
            st.markdown(f"- {project.title}")
