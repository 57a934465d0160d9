from dataclasses import replace
from typing import Dict

from .errors import TaskAlreadyExists, TaskNotFound
from .rwlock import RWLock
from .task import Task


class TaskList:
    """
    In-memory task store keyed by title.

    Thread-safety:
    - one reader/writer lock over the whole mapping
    - reads share the lock, add/complete/uncomplete/delete hold it exclusively
    - every task handed out (or taken in) is a copy, so callers never
      share objects with the store
    """

    def __init__(self) -> None:
        self._tasks: Dict[str, Task] = {}
        self._lock = RWLock()

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._tasks)

    def __contains__(self, title: object) -> bool:
        with self._lock.read():
            return title in self._tasks

    def add(self, task: Task) -> None:
        with self._lock.write():
            if task.title in self._tasks:
                raise TaskAlreadyExists(task.title)
            self._tasks[task.title] = replace(task)

    def get(self, title: str) -> Task:
        with self._lock.read():
            task = self._tasks.get(title)
            if task is None:
                raise TaskNotFound(title)
            return replace(task)

    def list_tasks(self) -> Dict[str, Task]:
        with self._lock.read():
            return {title: replace(task) for title, task in self._tasks.items()}

    def list_uncompleted_tasks(self) -> Dict[str, Task]:
        with self._lock.read():
            return {
                title: replace(task)
                for title, task in self._tasks.items()
                if not task.completed
            }

    def complete(self, title: str) -> Task:
        with self._lock.write():
            task = self._tasks.get(title)
            if task is None:
                raise TaskNotFound(title)
            task.mark_complete()
            return replace(task)

    def uncomplete(self, title: str) -> Task:
        with self._lock.write():
            task = self._tasks.get(title)
            if task is None:
                raise TaskNotFound(title)
            task.mark_incomplete()
            return replace(task)

    def delete(self, title: str) -> None:
        with self._lock.write():
            if title not in self._tasks:
                raise TaskNotFound(title)
            del self._tasks[title]
