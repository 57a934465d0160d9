from datetime import datetime, timezone

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    message: str
    time: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
