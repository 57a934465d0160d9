from pydantic import BaseModel, StrictBool


class TaskUpdate(BaseModel):
    complete: StrictBool = False
