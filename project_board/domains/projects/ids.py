"""Identifier generators for project records."""

from __future__ import annotations

import itertools
import secrets
import threading
from typing import Callable

from project_board.utils.config import project_id_strategy

IdGenerator = Callable[[], str]


class RandomIdGenerator:
    """Random hex tokens. Collisions are improbable, not checked."""

    def __init__(self, nbytes: int = 8) -> None:
        self.nbytes = nbytes

    def __call__(self) -> str:
        return secrets.token_hex(self.nbytes)


class CounterIdGenerator:
    """Monotonic ids: p1, p2, ... Deterministic, for tests and demos."""

    def __init__(self, prefix: str = "p", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def __call__(self) -> str:
        with self._lock:
            n = next(self._counter)
        return f"{self.prefix}{n}"


def id_generator_from_config() -> IdGenerator:
    """Return the generator selected by PROJECT_ID_STRATEGY."""
    if project_id_strategy() == "counter":
        return CounterIdGenerator()
    return RandomIdGenerator()
