from .ErrorResponse import ErrorResponse
from .TaskCreate import TaskCreate
from .TaskResponse import TaskResponse
from .TaskUpdate import TaskUpdate

__all__ = ["TaskCreate", "TaskUpdate", "TaskResponse", "ErrorResponse"]
