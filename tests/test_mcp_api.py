import unittest
from unittest.mock import patch

from tasktracker.mcp_server import add_task, complete_task, list_tasks


class TestMcpTools(unittest.TestCase):

    @patch("tasktracker.client.api_client.requests.request")
    def test_list_tasks(self, mock_request):
        mock_request.return_value.status_code = 200
        mock_request.return_value.json.return_value = [{"id": 1, "title": "Mock Task"}]

        tasks = list_tasks()
        self.assertIsInstance(tasks, list)
        self.assertEqual(tasks[0]["title"], "Mock Task")

    @patch("tasktracker.client.api_client.requests.request")
    def test_add_task(self, mock_request):
        mock_request.return_value.status_code = 201
        mock_request.return_value.json.return_value = {"id": 2, "title": "New Task", "description": "D"}

        task = add_task("New Task", "D")
        self.assertEqual(task["title"], "New Task")
        self.assertEqual(mock_request.call_args.kwargs["json"], {"title": "New Task", "description": "D"})

    @patch("tasktracker.client.api_client.requests.request")
    def test_complete_task(self, mock_request):
        mock_request.return_value.status_code = 200
        mock_request.return_value.json.return_value = {"id": 3, "status": True}

        result = complete_task(3)
        self.assertTrue(result["status"])
        self.assertTrue(mock_request.call_args.args[1].endswith("/tasks/3/done"))


if __name__ == "__main__":
    unittest.main()
