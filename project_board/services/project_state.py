"""
In-memory project store with synchronous change notification.

`ProjectState` is the single source of truth for submitted projects. It is an
ordinary class: the application creates one instance per process (see
`project_board.ui.board.get_board`) and hands it to whatever needs it.

Every mutation appends one project and then calls each listener, in
subscription order, with the same immutable snapshot of all projects. Append
and notification run under one lock, so no second mutation can interleave
with a notification pass. A listener that calls `add_project` while being
notified gets its project queued; it is appended and announced after the
current pass completes.
"""

from __future__ import annotations

import itertools
import threading
from collections import deque
from typing import Callable, Optional

from project_board.domains.projects.ids import IdGenerator, RandomIdGenerator
from project_board.domains.projects.models import Project
from project_board.utils.logger import get_logger

logger = get_logger()

Snapshot = tuple[Project, ...]
Listener = Callable[[Snapshot], None]


class ListenerError(RuntimeError):
    """One or more listeners raised during notification. The project was still stored."""

    def __init__(self, failures: list[tuple[str, Exception]]) -> None:
        self.failures = failures
        names = ", ".join(sub_id for sub_id, _ in failures)
        super().__init__(f"{len(failures)} listener(s) failed: {names}")


class ProjectState:
    def __init__(self, id_generator: Optional[IdGenerator] = None) -> None:
        self._id_generator: IdGenerator = id_generator or RandomIdGenerator()
        self._projects: list[Project] = []
        self._listeners: dict[str, Listener] = {}
        self._subscription_ids = itertools.count(1)
        self._pending: deque[Project] = deque()
        self._dispatching = False
        self._lock = threading.RLock()

    @property
    def projects(self) -> Snapshot:
        """Snapshot of all projects in insertion order."""
        with self._lock:
            return tuple(self._projects)

    @property
    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def add_listener(self, listener: Listener) -> str:
        """
        Register a listener for future mutations and return its subscription id.

        Past state is not replayed; the listener is first called on the next
        `add_project`.
        """
        with self._lock:
            sub_id = f"listener-{next(self._subscription_ids)}"
            self._listeners[sub_id] = listener
        logger.debug("Registered %s", sub_id)
        return sub_id

    def add_project(self, title: str, description: str, people: int) -> Project:
        """
        Create an ACTIVE project, append it and notify every listener.

        Input is assumed to be validated already. Returns the new project.

        Raises:
            ListenerError: If any listener raised. All listeners were still
                called and the project remains stored.
        """
        project = Project.create(title, description, people, self._id_generator)
        with self._lock:
            self._pending.append(project)
            if self._dispatching:
                logger.debug("Queued project %s until the current notification pass ends", project.id)
                return project

            failures: list[tuple[str, Exception]] = []
            self._dispatching = True
            try:
                while self._pending:
                    item = self._pending.popleft()
                    self._projects.append(item)
                    logger.info(
                        "Added project %s (%r, people=%d); %d total",
                        item.id, item.title, item.people, len(self._projects),
                    )
                    failures.extend(self._notify(tuple(self._projects)))
            finally:
                self._dispatching = False

        if failures:
            raise ListenerError(failures) from failures[0][1]
        return project

    def _notify(self, snapshot: Snapshot) -> list[tuple[str, Exception]]:
        failures: list[tuple[str, Exception]] = []
        # Listeners added during this pass start with the next snapshot.
        for sub_id, listener in list(self._listeners.items()):
            try:
                listener(snapshot)
            except Exception as e:
                logger.exception("Listener %s failed on snapshot of %d projects", sub_id, len(snapshot))
                failures.append((sub_id, e))
        return failures
