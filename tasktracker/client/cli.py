"""
Console front end for the task list.

Commands:
  add            prompt for a title and description, then create the task
  done <id>      mark a task complete
  refresh        reload the list
  quit | exit    leave
"""

import logging
from typing import Callable, Optional

from ..config import api_url
from .api_client import TaskApiClient
from .sync_controller import Phase, TaskForm, TaskListState, TaskSyncController

HELP = "Commands: add | done <id> | refresh | quit"


def render(state: TaskListState, notice: Optional[str] = None) -> str:
    lines = ["Recent Tasks", "------------"]
    if state.phase == Phase.LOADING and not state.tasks:
        lines.append("Loading...")
    elif state.phase == Phase.ERROR:
        lines.append(f"Error loading tasks: {state.error}")
    elif not state.tasks:
        lines.append("No pending tasks.")
    else:
        for task in state.tasks:
            lines.append(f"[{task['id']}] {task['title']}")
            if task.get("description"):
                lines.append(f"     {task['description']}")
    if notice:
        lines.append(f"! {notice}")
    return "\n".join(lines)


def run(
    controller: TaskSyncController,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> None:
    form = TaskForm()
    controller.mount()
    output(render(controller.state, controller.notice))
    output(HELP)

    while True:
        try:
            line = input_fn("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            break
        if not line:
            continue

        command, _, argument = line.partition(" ")
        command = command.lower()
        if command in ("quit", "exit"):
            break

        if command == "add":
            # Fields kept from a failed attempt are offered again.
            form.title = input_fn(f"Title [{form.title}]: ").strip() or form.title
            form.description = input_fn(f"Description [{form.description}]: ").strip() or form.description
            controller.submit(form)
        elif command == "done":
            try:
                task_id = int(argument.strip())
            except ValueError:
                output("Usage: done <id>")
                continue
            controller.complete(task_id)
        elif command == "refresh":
            controller.refresh()
        else:
            output(HELP)
            continue

        output(render(controller.state, controller.notice))

    output("Bye.")


def main() -> None:
    logging.basicConfig(level=logging.WARNING)
    client = TaskApiClient(base_url=api_url())
    run(TaskSyncController(client))


if __name__ == "__main__":
    main()
