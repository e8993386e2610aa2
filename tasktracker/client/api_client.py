"""
HTTP client for the task API.
"""

import logging
from typing import Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A task API call failed; status is None when the server was never reached."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class TaskApiClient:
    def __init__(self, base_url: str = "http://localhost:5000", timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _request(self, method: str, path: str, payload: Dict = None):
        url = f"{self.base_url}{path}"
        try:
            response = requests.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise ApiError(f"Could not reach task server: {e}") from e

        if response.status_code >= 400:
            message = self._error_message(response)
            logger.error("%s %s returned %s: %s", method, url, response.status_code, message)
            raise ApiError(message, status=response.status_code)
        return response

    @staticmethod
    def _error_message(response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return f"Request failed with status {response.status_code}"

    @staticmethod
    def _decode(response):
        try:
            return response.json()
        except ValueError as e:
            logger.error("Task server sent a non-JSON body (status %s)", response.status_code)
            raise ApiError("Invalid response from task server", status=response.status_code) from e

    def list_tasks(self) -> List[Dict]:
        """Fetch the recent pending tasks."""
        response = self._request("GET", "/tasks")
        tasks = self._decode(response)
        if not isinstance(tasks, list):
            raise ApiError("Invalid response from task server", status=response.status_code)
        return tasks

    def create_task(self, title: str, description: str) -> Dict:
        payload = {"title": title, "description": description}
        return self._decode(self._request("POST", "/tasks", payload))

    def complete_task(self, task_id: int) -> Dict:
        return self._decode(self._request("PUT", f"/tasks/{task_id}/done"))
