"""Project records and identifier generation."""

from project_board.domains.projects.ids import CounterIdGenerator, IdGenerator, RandomIdGenerator
from project_board.domains.projects.models import Project, ProjectStatus

__all__ = ["CounterIdGenerator", "IdGenerator", "Project", "ProjectStatus", "RandomIdGenerator"]
