"""TodoQueue CLI - multi-user task queues in the terminal."""

__version__ = "0.1.0"
