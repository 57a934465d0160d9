import logging
from typing import Dict, Optional

import uvicorn
from fastapi import Depends, FastAPI, Query, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tasktracker.config import Settings, get_settings
from tasktracker.logging_setup import setup_logging
from tasktracker.models import ErrorResponse, TaskCreate, TaskResponse, TaskUpdate
from tasktracker.todo import Task, TaskAlreadyExists, TaskList, TaskNotFound

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    body = ErrorResponse(message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"), headers=headers)


def validation_message(exc: RequestValidationError) -> str:
    messages = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        field = loc[-1] if loc else ""
        if err.get("type") == "value_error":
            messages.append(str(err.get("msg", "")).removeprefix("Value error, "))
        elif err.get("type") == "missing" and field in ("title", "description"):
            messages.append(f"task {field} is required")
        else:
            messages.append(f"{'.'.join(loc)}: {err.get('msg')}")
    return "; ".join(messages) or "invalid request"


def get_task_list(request: Request) -> TaskList:
    return request.app.state.task_list


def create_app(task_list: TaskList, title: str = "tasktracker") -> FastAPI:
    app = FastAPI(title=title)
    app.state.task_list = task_list

    @app.exception_handler(RequestValidationError)
    async def handle_validation(request: Request, exc: RequestValidationError):
        message = validation_message(exc)
        logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
        return error_response(400, message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        logger.warning("%s %s -> %s", request.method, request.url.path, exc.status_code)
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(TaskAlreadyExists)
    async def handle_already_exists(request: Request, exc: TaskAlreadyExists):
        logger.warning("%s %s conflict title=%r", request.method, request.url.path, exc.title)
        return error_response(409, str(exc))

    @app.exception_handler(TaskNotFound)
    async def handle_not_found(request: Request, exc: TaskNotFound):
        logger.warning("%s %s not found title=%r", request.method, request.url.path, exc.title)
        return error_response(404, str(exc))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.exception("%s %s failed", request.method, request.url.path)
        return error_response(500, "internal server error")

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    @app.post(
        "/tasks",
        status_code=201,
        response_model=TaskResponse,
        response_model_exclude_none=True,
    )
    def create_task(task: TaskCreate, tasks: TaskList = Depends(get_task_list)):
        todo_task = Task.new(task.title, task.description)
        tasks.add(todo_task)
        logger.info("created task title=%r", todo_task.title)
        return TaskResponse.from_task(todo_task)

    @app.get(
        "/tasks/{title:path}",
        response_model=TaskResponse,
        response_model_exclude_none=True,
    )
    def get_task(title: str, tasks: TaskList = Depends(get_task_list)):
        return TaskResponse.from_task(tasks.get(title))

    # completed=true lists the tasks that are still open
    @app.get(
        "/tasks",
        response_model=Dict[str, TaskResponse],
        response_model_exclude_none=True,
    )
    def list_tasks(
        completed: Optional[str] = Query(default=None),
        tasks: TaskList = Depends(get_task_list),
    ):
        if completed == "true":
            found = tasks.list_uncompleted_tasks()
        else:
            found = tasks.list_tasks()
        return {title: TaskResponse.from_task(t) for title, t in found.items()}

    @app.patch(
        "/tasks/{title:path}",
        response_model=TaskResponse,
        response_model_exclude_none=True,
    )
    def update_task(title: str, update: TaskUpdate, tasks: TaskList = Depends(get_task_list)):
        if update.complete:
            changed = tasks.complete(title)
            logger.info("completed task title=%r", title)
        else:
            changed = tasks.uncomplete(title)
            logger.info("uncompleted task title=%r", title)
        return TaskResponse.from_task(changed)

    @app.delete("/tasks/{title:path}", status_code=204)
    def delete_task(title: str, tasks: TaskList = Depends(get_task_list)):
        tasks.delete(title)
        logger.info("deleted task title=%r", title)
        return Response(status_code=204)

    return app


def run(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    task_list = TaskList()
    app = create_app(task_list, title=settings.app_name)

    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
