import unittest
from unittest.mock import MagicMock

from tasktracker.client.api_client import ApiError
from tasktracker.client.cli import render, run
from tasktracker.client.sync_controller import Phase, TaskListState, TaskSyncController


class RenderTestCase(unittest.TestCase):
    def test_loading(self):
        self.assertIn("Loading...", render(TaskListState()))

    def test_error_differs_from_empty(self):
        error = render(TaskListState(Phase.ERROR, [], "Server error"))
        empty = render(TaskListState(Phase.READY, []))
        self.assertIn("Error loading tasks: Server error", error)
        self.assertIn("No pending tasks.", empty)
        self.assertNotIn("No pending tasks.", error)

    def test_tasks_and_notice(self):
        text = render(
            TaskListState(Phase.READY, [{"id": 4, "title": "Ship it", "description": "today"}]),
            notice="Could not add task: Server error",
        )
        self.assertIn("[4] Ship it", text)
        self.assertIn("today", text)
        self.assertIn("! Could not add task: Server error", text)


class RunTestCase(unittest.TestCase):
    def setUp(self):
        self.api = MagicMock()
        self.api.list_tasks.return_value = []
        self.controller = TaskSyncController(self.api)
        self.output = []

    def run_with(self, *lines):
        answers = iter(lines)

        def fake_input(prompt):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        run(self.controller, input_fn=fake_input, output=self.output.append)

    def test_add_and_done(self):
        self.api.list_tasks.side_effect = [[], [{"id": 1, "title": "T", "description": "D"}], []]

        self.run_with("add", "T", "D", "done 1", "quit")
        self.api.create_task.assert_called_once_with("T", "D")
        self.api.complete_task.assert_called_once_with(1)
        self.assertEqual(self.output[-1], "Bye.")
        self.assertTrue(any("[1] T" in chunk for chunk in self.output))

    def test_failed_add_offers_previous_values(self):
        self.api.create_task.side_effect = [ApiError("Server error", status=500), {"id": 1}]

        # Second attempt accepts the remembered values with empty answers.
        self.run_with("add", "T", "D", "add", "", "")
        self.assertEqual(self.api.create_task.call_count, 2)
        self.api.create_task.assert_called_with("T", "D")

    def test_bad_done_argument(self):
        self.run_with("done x")
        self.assertIn("Usage: done <id>", self.output)
        self.api.complete_task.assert_not_called()

    def test_unknown_command_prints_help(self):
        self.run_with("frobnicate")
        self.assertIn("Commands: add | done <id> | refresh | quit", self.output[2:])


if __name__ == "__main__":
    unittest.main()
