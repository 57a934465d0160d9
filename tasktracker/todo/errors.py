class TaskError(Exception):
    """Base class for task store failures."""


class TaskAlreadyExists(TaskError):
    def __init__(self, title: str):
        super().__init__("task already exists")
        self.title = title


class TaskNotFound(TaskError):
    def __init__(self, title: str):
        super().__init__("task not found")
        self.title = title
