from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from tasktracker.todo import Task


class TaskResponse(BaseModel):
    title: str
    description: str
    completed: bool
    createdAt: datetime
    completedAt: Optional[datetime] = None

    @classmethod
    def from_task(cls, task: Task) -> "TaskResponse":
        return cls(
            title=task.title,
            description=task.description,
            completed=task.completed,
            createdAt=task.created_at,
            completedAt=task.completed_at,
        )
