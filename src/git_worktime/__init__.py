"""Git Worktime - classify commits by work hours."""

__version__ = "0.1.0"
