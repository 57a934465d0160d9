import pytest
from fastapi.testclient import TestClient

from tasktracker.main import create_app
from tasktracker.todo import TaskList


@pytest.fixture()
def task_list() -> TaskList:
    return TaskList()


@pytest.fixture()
def client(task_list: TaskList) -> TestClient:
    with TestClient(create_app(task_list)) as c:
        yield c
