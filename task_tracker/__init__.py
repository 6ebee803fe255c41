"""Task Tracker: a personal task-tracking REST API."""

__version__ = "1.0.0"
