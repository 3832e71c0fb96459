"""taskbot: in-memory task list core for a personal task-tracking assistant."""

__version__ = "0.1.0"
