from .errors import TaskAlreadyExists, TaskError, TaskNotFound
from .rwlock import RWLock
from .task import Task
from .task_list import TaskList

__all__ = ["Task", "TaskList", "RWLock", "TaskError", "TaskAlreadyExists", "TaskNotFound"]
