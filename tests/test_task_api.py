from fastapi.testclient import TestClient

from tasktracker.main import create_app
from tasktracker.todo import Task, TaskList


def test_create_task(client: TestClient):
    r = client.post("/tasks", json={"title": "buy milk", "description": "2%"})
    assert r.status_code == 201
    body = r.json()
    assert body["title"] == "buy milk"
    assert body["description"] == "2%"
    assert body["completed"] is False
    assert body["createdAt"]
    assert "completedAt" not in body


def test_create_duplicate_is_conflict(client: TestClient, task_list: TaskList):
    task_list.add(Task.new("buy milk", "2%"))

    r = client.post("/tasks", json={"title": "buy milk", "description": "skim"})
    assert r.status_code == 409
    assert r.json()["message"] == "task already exists"
    assert r.json()["time"]
    assert task_list.get("buy milk").description == "2%"


def test_create_requires_title_and_description(client: TestClient, task_list: TaskList):
    r = client.post("/tasks", json={"title": "", "description": "x"})
    assert r.status_code == 400
    assert r.json()["message"] == "task title is required"

    r = client.post("/tasks", json={"title": "x", "description": ""})
    assert r.status_code == 400
    assert r.json()["message"] == "task description is required"

    r = client.post("/tasks", json={"description": "x"})
    assert r.status_code == 400
    assert r.json()["message"] == "task title is required"
    assert r.json()["time"]

    assert len(task_list) == 0


def test_create_rejects_malformed_json(client: TestClient):
    r = client.post(
        "/tasks",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json()["message"]


def test_get_task(client: TestClient, task_list: TaskList):
    task_list.add(Task.new("buy milk", "2%"))

    r = client.get("/tasks/buy milk")
    assert r.status_code == 200
    assert r.json()["title"] == "buy milk"

    r = client.get("/tasks/nope")
    assert r.status_code == 404
    assert r.json()["message"] == "task not found"


def test_list_tasks(client: TestClient, task_list: TaskList):
    task_list.add(Task.new("a", "d"))
    task_list.add(Task.new("b", "d"))
    task_list.complete("b")

    r = client.get("/tasks")
    assert r.status_code == 200
    body = r.json()
    assert set(body) == {"a", "b"}
    assert body["b"]["completed"] is True
    assert body["b"]["completedAt"]
    assert "completedAt" not in body["a"]

    r = client.get("/tasks", params={"completed": "true"})
    assert r.status_code == 200
    assert set(r.json()) == {"a"}

    r = client.get("/tasks", params={"completed": "false"})
    assert set(r.json()) == {"a", "b"}


def test_list_tasks_empty(client: TestClient):
    r = client.get("/tasks")
    assert r.status_code == 200
    assert r.json() == {}


def test_patch_completes_and_uncompletes(client: TestClient, task_list: TaskList):
    task_list.add(Task.new("buy milk", "2%"))

    r = client.patch("/tasks/buy milk", json={"complete": True})
    assert r.status_code == 200
    assert r.json()["completed"] is True
    assert r.json()["completedAt"]

    r = client.patch("/tasks/buy milk", json={"complete": False})
    assert r.status_code == 200
    assert r.json()["completed"] is False
    assert "completedAt" not in r.json()
    assert task_list.get("buy milk").completed is False


def test_patch_errors(client: TestClient, task_list: TaskList):
    r = client.patch("/tasks/nope", json={"complete": True})
    assert r.status_code == 404

    task_list.add(Task.new("buy milk", "2%"))
    r = client.patch("/tasks/buy milk", json={"complete": "yes"})
    assert r.status_code == 400

    r = client.patch(
        "/tasks/buy milk",
        content=b"[",
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert task_list.get("buy milk").completed is False


def test_delete_task(client: TestClient, task_list: TaskList):
    task_list.add(Task.new("buy milk", "2%"))

    r = client.delete("/tasks/buy milk")
    assert r.status_code == 204
    assert r.content == b""
    assert "buy milk" not in task_list

    r = client.delete("/tasks/buy milk")
    assert r.status_code == 404
    assert r.json()["message"] == "task not found"


def test_title_with_slash(client: TestClient, task_list: TaskList):
    r = client.post("/tasks", json={"title": "home/kitchen", "description": "clean"})
    assert r.status_code == 201

    r = client.get("/tasks/home/kitchen")
    assert r.status_code == 200
    assert r.json()["title"] == "home/kitchen"

    r = client.patch("/tasks/home/kitchen", json={"complete": True})
    assert r.status_code == 200
    assert r.json()["completed"] is True

    r = client.delete("/tasks/home/kitchen")
    assert r.status_code == 204
    assert "home/kitchen" not in task_list


def test_routing_errors_use_error_body(client: TestClient):
    r = client.put("/tasks/x", json={})
    assert r.status_code == 405
    assert r.json()["message"] == "Method Not Allowed"
    assert r.json()["time"]

    r = client.get("/nowhere")
    assert r.status_code == 404
    assert r.json()["message"] == "Not Found"
    assert r.json()["time"]


class BrokenTaskList(TaskList):
    def list_tasks(self):
        raise RuntimeError("store exploded")


def test_unexpected_error_is_500():
    client = TestClient(create_app(BrokenTaskList()), raise_server_exceptions=False)

    r = client.get("/tasks")
    assert r.status_code == 500
    assert r.json()["message"] == "internal server error"
    assert r.json()["time"]
