from __future__ import annotations

import time
from itertools import count
from typing import Callable, Optional

Clock = Callable[[], float]


class DeferredTask:
    def __init__(self, task_id: int, due: float, callback: Callable[[], None]) -> None:
        self.task_id = task_id
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.done = False

    def __repr__(self) -> str:
        return f"DeferredTask({self.task_id}, due={self.due:.3f})"

    def cancel(self) -> None:
        self.cancelled = True

    def is_pending(self) -> bool:
        return not (self.cancelled or self.done)

    def is_due(self, now: float) -> bool:
        return self.is_pending() and now >= self.due


class Scheduler:
    """
    Runs callbacks after a delay without threads: the owner calls `run_pending()`
    regularly, for example once per frame.
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.clock: Clock = clock or time.monotonic
        self.__tasks: list[DeferredTask] = []
        self.__ids = count(1)

    def schedule(self, delay: float, callback: Callable[[], None]) -> DeferredTask:
        if delay < 0:
            raise ValueError(f"Delay must not be negative, got {delay}")

        task = DeferredTask(next(self.__ids), self.clock() + delay, callback)
        self.__tasks.append(task)
        return task

    def run_pending(self) -> int:
        now = self.clock()

        due_tasks = [task for task in self.__tasks if task.is_due(now)]
        self.__tasks = [
            task for task in self.__tasks if task.is_pending() and task not in due_tasks
        ]

        ran = 0
        for task in sorted(due_tasks, key=lambda task: (task.due, task.task_id)):
            # An earlier callback may have cancelled this one.
            if task.cancelled:
                continue

            task.done = True
            task.callback()
            ran += 1

        return ran

    def has_pending(self) -> bool:
        return any(task.is_pending() for task in self.__tasks)

    def cancel_all(self) -> None:
        for task in self.__tasks:
            task.cancel()
        self.__tasks = []
