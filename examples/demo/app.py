"""Task Manager API -- flask-swagger12 demo application.

Demonstrates:
- Flask CRUD routes documented with the Swagger.document decorator
- Pydantic models and schema nodes as route schemas
- Self-referencing models (task subtasks)
- Resource listing at /api/api-docs, declarations at /api/api-docs/<api>
"""
from __future__ import annotations

from flask import Flask, jsonify, request
from pydantic import BaseModel

from flask_swagger12 import LONG, STRING, ParameterSpec, Swagger


# ---------------------------------------------------------------------------
# Pydantic models
# ---------------------------------------------------------------------------

class TaskCreate(BaseModel):
    title: str
    description: str = ""
    done: bool = False


class Task(BaseModel):
    id: int
    title: str
    description: str
    done: bool
    subtasks: list["Task"] = []


Task.model_rebuild()


# ---------------------------------------------------------------------------
# In-memory store
# ---------------------------------------------------------------------------

_tasks: dict[int, dict] = {
    1: {"id": 1, "title": "Try flask-swagger12", "description": "Run the demo", "done": False},
}
_next_id: int = 2


# ---------------------------------------------------------------------------
# Flask app + config
# ---------------------------------------------------------------------------

app = Flask(__name__)
app.config.update(
    SWAGGER12_API_VERSION="1.0.0",
    SWAGGER12_TITLE="Task Manager",
    SWAGGER12_DESCRIPTION="Demo of flask-swagger12",
    SWAGGER12_UI_ENABLED=True,
    SWAGGER12_UI_PATH="/ui-docs",
)

swagger = Swagger(app)
swagger.api_group(app, "tasks", "Task CRUD")


# ---------------------------------------------------------------------------
# CRUD routes
# ---------------------------------------------------------------------------

@app.route("/tasks", methods=["GET"])
@swagger.document(
    app,
    "tasks",
    "get",
    "/tasks",
    returns=list[Task],
    parameters=[ParameterSpec("query", {"q": STRING})],
)
def list_tasks():
    """List all tasks."""
    q = request.args.get("q", "")
    return jsonify([t for t in _tasks.values() if q in t["title"]])


@app.route("/tasks", methods=["POST"])
@swagger.document(app, "tasks", "post", "/tasks", returns=Task, parameters=[ParameterSpec("body", TaskCreate)])
def create_task():
    """Create a new task."""
    global _next_id
    body = TaskCreate.model_validate(request.get_json(force=True))
    task = {"id": _next_id, **body.model_dump()}
    _tasks[_next_id] = task
    _next_id += 1
    return jsonify(task), 201


@app.route("/tasks/<int:task_id>", methods=["GET"])
@swagger.document(
    app,
    "tasks",
    "get",
    "/tasks/:task-id",
    returns=Task,
    parameters=[ParameterSpec("path", {"task-id": LONG})],
)
def get_task(task_id: int):
    """Get a task by its ID."""
    task = _tasks.get(task_id)
    if task is None:
        return jsonify({"error": "not found"}), 404
    return jsonify(task)


if __name__ == "__main__":
    app.run(debug=True)
