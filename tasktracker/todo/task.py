from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Task:
    title: str
    description: str
    completed: bool = False
    created_at: datetime = field(default_factory=_now)
    completed_at: Optional[datetime] = None

    @classmethod
    def new(cls, title: str, description: str) -> "Task":
        return cls(title=title, description=description)

    def mark_complete(self) -> None:
        # completing twice refreshes the timestamp
        self.completed = True
        self.completed_at = _now()

    def mark_incomplete(self) -> None:
        self.completed = False
        self.completed_at = None
