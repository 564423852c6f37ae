"""A list of tasks kept in order of their run time."""

from __future__ import annotations

import bisect
import threading
from dataclasses import dataclass
from typing import Callable, List


@dataclass
class Task:
    """An action to run at ``run_at`` (UTC microseconds)."""

    run_at: int
    action: Callable[[], None]


class Timer:
    """Holds tasks sorted by ``run_at``; tasks with equal times keep their order."""

    def __init__(self, *tasks: Task) -> None:
        self._tasks: List[Task] = sorted(tasks, key=lambda t: t.run_at)
        self._lock = threading.Lock()
        self.next_time = 0

    @property
    def tasks(self) -> List[Task]:
        """A snapshot of the tasks in run order."""
        with self._lock:
            return list(self._tasks)

    def add_task(self, run_at: int, action: Callable[[], None]) -> None:
        """Insert a task after any others with the same or earlier time."""
        with self._lock:
            task = Task(run_at, action)
            if not self._tasks:
                self.next_time = run_at
                self._tasks = [task]
                return
            index = bisect.bisect_right([t.run_at for t in self._tasks], run_at)
            self._tasks.insert(index, task)