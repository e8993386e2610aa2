import logging
import re

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from ..errors import NotFoundError, TaskError
from ..services.task_service import TaskService

logger = logging.getLogger(__name__)

tasks_bp = Blueprint("tasks", __name__)

# Signed 64-bit range of the id column
_MAX_ID = 2**63 - 1
_ID_PATTERN = re.compile(r"[1-9][0-9]*")


def _service() -> TaskService:
    return current_app.extensions["task_service"]


def _parse_task_id(raw: str) -> int:
    # Anything that is not a plain storable id is reported as "not found".
    if len(raw) > len(str(_MAX_ID)) or not _ID_PATTERN.fullmatch(raw):
        raise NotFoundError()
    task_id = int(raw)
    if task_id > _MAX_ID:
        raise NotFoundError()
    return task_id


@tasks_bp.route("/tasks", methods=["GET"])
def list_tasks():
    """Return up to five pending tasks, newest first."""
    tasks = _service().list_recent_pending()
    return jsonify([task.to_dict() for task in tasks])


@tasks_bp.route("/tasks", methods=["POST"])
def create_task():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    task = _service().create_task(data.get("title"), data.get("description"))
    return jsonify(task.to_dict()), 201


@tasks_bp.route("/tasks/<task_id>/done", methods=["PUT"])
def complete_task(task_id):
    parsed = _parse_task_id(task_id)
    _service().complete_task(parsed)
    return jsonify({"id": parsed, "status": True})


@tasks_bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})


@tasks_bp.errorhandler(TaskError)
def handle_task_error(e: TaskError):
    if e.status_code >= 500:
        logger.error("Task request failed: %s %s", request.method, request.path, exc_info=True)
        return jsonify({"error": "Server error"}), e.status_code
    logger.warning("Task request rejected (%s): %s %s: %s", e.status_code, request.method, request.path, e.message)
    return jsonify({"error": e.message}), e.status_code


@tasks_bp.errorhandler(Exception)
def handle_unexpected(e: Exception):
    if isinstance(e, HTTPException):
        return e
    logger.error("Unexpected error during %s %s", request.method, request.path, exc_info=True)
    return jsonify({"error": "Server error"}), 500
