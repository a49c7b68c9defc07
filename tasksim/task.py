"""Task records and the table that holds them."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum, auto
from typing import Protocol

MAX_TASKS = 100
TIME_SLICE_MS = 100


class TaskState(Enum):
    READY = auto()
    RUNNING = auto()
    BLOCKED = auto()
    FINISHED = auto()


class SchedulerType(Enum):
    PRIORITY = auto()
    ROUND_ROBIN = auto()
    FCFS = auto()
    MLFQ = auto()


class _SupportsLog(Protocol):
    def log(self, message: str) -> None: ...


@dataclass
class Task:
    """One simulated unit of work."""

    id: int
    duration_ms: int
    remaining_ms: int
    priority: int
    state: TaskState = TaskState.READY
    arrival_time: float = 0.0
    finish_time: float = 0.0
    queue_level: int = 0

    def turnaround(self) -> float:
        """Seconds from arrival to finish (finish time is zero until finished)."""
        return self.finish_time - self.arrival_time


class TaskTable:
    """An ordered collection of at most ``MAX_TASKS`` tasks."""

    def __init__(
        self, logger: _SupportsLog, clock: Callable[[], float] = time.time
    ) -> None:
        self._logger = logger
        self._clock = clock
        self._tasks: list[Task] = []

    def create(self, task_id: int, duration_ms: int, priority: int) -> Task | None:
        """Add a ready task; return it, or None when the table is full."""
        if len(self._tasks) >= MAX_TASKS:
            self._logger.log("Maximum task limit reached")
            return None
        task = Task(
            id=task_id,
            duration_ms=duration_ms,
            remaining_ms=duration_ms,
            priority=priority,
            state=TaskState.READY,
            arrival_time=self._clock(),
        )
        self._tasks.append(task)
        self._logger.log(
            f"Task {task_id} created: Duration={duration_ms}ms, Priority={priority}"
        )
        return task

    def summary(self) -> str:
        """Return the end-of-run report, one line per task."""
        lines = ["", "=== Task Summary ==="]
        for task in self._tasks:
            status = "Finished" if task.state is TaskState.FINISHED else "Incomplete"
            lines.append(
                f"Task {task.id} | Priority: {task.priority} | "
                f"Turnaround: {task.turnaround():.2f}s | Status: {status}"
            )
        return "\n".join(lines) + "\n"

    def all_finished(self) -> bool:
        """True when every task has finished."""
        return all(task.state is TaskState.FINISHED for task in self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]