"""
MCP server wrapping the task API (`python -m tasktracker.mcp_server`)
"""

from typing import Dict, List

from mcp.server.fastmcp import FastMCP

from .client.api_client import TaskApiClient
from .config import api_url

# Initialize MCP server
mcp = FastMCP("Recent Tasks MCP Server")

api = TaskApiClient(base_url=api_url())


@mcp.resource("tasks://recent")
def recent_tasks() -> List[Dict]:
    """The five newest pending tasks."""
    return api.list_tasks()


@mcp.tool()
def list_tasks() -> List[Dict]:
    """Fetch the five newest pending tasks from the task API."""
    return api.list_tasks()


@mcp.tool()
def add_task(title: str, description: str) -> Dict:
    """Add a new task via the task API."""
    return api.create_task(title, description)


@mcp.tool()
def complete_task(task_id: int) -> Dict:
    """Mark a task as done; it disappears from the recent list."""
    return api.complete_task(task_id)


def main() -> None:
    # stdio transport for local MCP hosts
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
