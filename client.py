"""
Console client for the task API. Point it elsewhere with TASKS_API_URL.
"""

from tasktracker.client.cli import main

if __name__ == "__main__":
    main()
