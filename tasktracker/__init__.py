from tasktracker.todo import Task, TaskAlreadyExists, TaskList, TaskNotFound

__all__ = ["Task", "TaskList", "TaskAlreadyExists", "TaskNotFound"]
