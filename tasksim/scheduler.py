"""Simulated CPU scheduling of tasks with random blocking and unblocking."""

from __future__ import annotations

import random
import threading
import time
from collections import deque
from collections.abc import Callable
from typing import Protocol

from tasksim.task import (
    TIME_SLICE_MS,
    SchedulerType,
    Task,
    TaskState,
    TaskTable,
)

NUM_QUEUES = 3
QUEUE_CAPACITY = 100
UNBLOCK_INTERVAL = 0.2


class _SupportsLog(Protocol):
    def log(self, message: str) -> None: ...


class _SupportsRandrange(Protocol):
    def randrange(self, stop: int) -> int: ...


def scheduler_type_from_choice(choice: int) -> SchedulerType:
    """Map a menu choice to a scheduler type; unknown choices mean FCFS."""
    return {
        1: SchedulerType.PRIORITY,
        2: SchedulerType.ROUND_ROBIN,
        4: SchedulerType.MLFQ,
    }.get(choice, SchedulerType.FCFS)


class Scheduler:
    """Runs a task table under one scheduling policy.

    The scheduler and the unblocker share the table under one lock; the lock
    is released while a task's time slice is being slept through.
    """

    def __init__(
        self,
        scheduler_type: SchedulerType,
        logger: _SupportsLog,
        rng: _SupportsRandrange | None = None,
        sleep: Callable[[float], object] = time.sleep,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.scheduler_type = scheduler_type
        self.tasks = TaskTable(logger, clock)
        self._logger = logger
        self._rng = rng if rng is not None else random.Random()
        self._sleep = sleep
        self._clock = clock
        self._lock = threading.Lock()
        self._queues: list[deque[int]] = [deque() for _ in range(NUM_QUEUES)]
        self._rr_index = 0

    def add_task(self, task_id: int, duration_ms: int, priority: int) -> Task | None:
        """Create a ready task; under MLFQ it also joins the top queue."""
        with self._lock:
            task = self.tasks.create(task_id, duration_ms, priority)
            if task is not None and self.scheduler_type is SchedulerType.MLFQ:
                self.enqueue(0, len(self.tasks) - 1)
            return task

    def enqueue(self, level: int, index: int) -> None:
        """Append a task index to a feedback queue; a full queue drops it."""
        queue = self._queues[level]
        if len(queue) < QUEUE_CAPACITY:
            queue.append(index)

    def dequeue(self, level: int) -> int | None:
        """Remove and return the oldest index in a queue, or None if empty."""
        queue = self._queues[level]
        return queue.popleft() if queue else None

    def step(self) -> bool:
        """Run one scheduling decision; return True once there is nothing left."""
        policies = {
            SchedulerType.PRIORITY: self._step_priority,
            SchedulerType.ROUND_ROBIN: self._step_round_robin,
            SchedulerType.FCFS: self._step_fcfs,
            SchedulerType.MLFQ: self._step_mlfq,
        }
        with self._lock:
            selected = policies[self.scheduler_type]()
            return not selected and self.tasks.all_finished()

    def unblock_pass(self) -> bool:
        """Give each blocked task a one-in-three chance to become ready.

        Returns True when every task had already finished.
        """
        with self._lock:
            all_done = self.tasks.all_finished()
            for index, task in enumerate(self.tasks):
                if task.state is TaskState.BLOCKED and self._rng.randrange(3) == 0:
                    task.state = TaskState.READY
                    if self.scheduler_type is SchedulerType.MLFQ:
                        self.enqueue(task.queue_level, index)
                    self._logger.log(f"Task {task.id} unblocked")
            return all_done

    def run_scheduler(self) -> None:
        """Schedule tasks until all of them have finished."""
        if self.scheduler_type is SchedulerType.MLFQ:
            with self._lock:
                for index, task in enumerate(self.tasks):
                    task.queue_level = 0
                    if task.state is TaskState.READY:
                        self.enqueue(0, index)
        while not self.step():
            pass

    def run_unblocker(self, interval: float = UNBLOCK_INTERVAL) -> None:
        """Periodically unblock tasks until all of them have finished."""
        while not self.unblock_pass():
            self._sleep(interval)

    def run(self) -> None:
        """Run the scheduler and the unblocker in two threads until done."""
        workers = [
            threading.Thread(target=self.run_scheduler, name="scheduler"),
            threading.Thread(target=self.run_unblocker, name="unblocker"),
        ]
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()

    def _execute(self, task: Task, exec_ms: int, message: str) -> None:
        task.state = TaskState.RUNNING
        self._logger.log(message)
        self._lock.release()
        try:
            self._sleep(exec_ms / 1000)
        finally:
            self._lock.acquire()
        task.remaining_ms -= exec_ms

    def _settle(self, task: Task) -> bool:
        """Finish, block or ready a task after its slice; True if it is ready."""
        if task.remaining_ms <= 0:
            task.state = TaskState.FINISHED
            task.finish_time = self._clock()
            self._logger.log(f"Task {task.id} finished")
            return False
        if self._rng.randrange(5) == 0:
            task.state = TaskState.BLOCKED
            self._logger.log(f"Task {task.id} blocked")
            return False
        task.state = TaskState.READY
        return True

    def _run_slice(self, task: Task, exec_ms: int) -> None:
        self._execute(
            task,
            exec_ms,
            f"Task {task.id} running for {exec_ms}ms (Priority: {task.priority})",
        )
        self._settle(task)

    def _step_priority(self) -> bool:
        ready = [task for task in self.tasks if task.state is TaskState.READY]
        if not ready:
            return False
        task = min(ready, key=lambda candidate: candidate.priority)
        self._run_slice(task, min(task.remaining_ms, TIME_SLICE_MS))
        return True

    def _step_round_robin(self) -> bool:
        count = len(self.tasks)
        for offset in range(count):
            index = (self._rr_index + offset) % count
            task = self.tasks[index]
            if task.state is TaskState.READY:
                self._rr_index = (index + 1) % count
                self._run_slice(task, min(task.remaining_ms, TIME_SLICE_MS))
                return True
        return False

    def _step_fcfs(self) -> bool:
        task = next(
            (task for task in self.tasks if task.state is TaskState.READY), None
        )
        if task is None:
            return False
        self._run_slice(task, task.remaining_ms)
        return True

    def _step_mlfq(self) -> bool:
        level = next(
            (level for level, queue in enumerate(self._queues) if queue), None
        )
        if level is None:
            return False
        index = self.dequeue(level)
        task = self.tasks[index]
        if task.state is TaskState.READY:
            exec_ms = min(task.remaining_ms, TIME_SLICE_MS)
            self._execute(
                task,
                exec_ms,
                f"Task {task.id} running for {exec_ms}ms at queue level {level}",
            )
            if self._settle(task):
                if level < NUM_QUEUES - 1:
                    task.queue_level = level + 1
                    self.enqueue(level + 1, index)
                else:
                    self.enqueue(level, index)
        return True