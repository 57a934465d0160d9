from pydantic import BaseModel, field_validator


class TaskCreate(BaseModel):
    title: str
    description: str

    @field_validator("title")
    @classmethod
    def title_required(cls, v: str) -> str:
        if v == "":
            raise ValueError("task title is required")
        return v

    @field_validator("description")
    @classmethod
    def description_required(cls, v: str) -> str:
        if v == "":
            raise ValueError("task description is required")
        return v
