"""Custom exceptions for TodoQueue CLI.

Each exception carries the message shown to the user when it is reported
at the end of a menu action.
"""


class TodoQueueError(Exception):
    """Base exception for all TodoQueue errors."""

    default_message = "An error occurred"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class UsernameTakenError(TodoQueueError):
    """Raised when registering a username that already exists."""

    default_message = "Username already exists!"


class InvalidCredentialsError(TodoQueueError):
    """Raised on login with an unknown username or a wrong password.

    The two cases share one message on purpose.
    """

    default_message = "Invalid username or password!"


class EmptyQueueError(TodoQueueError):
    """Raised when viewing or completing a task on an empty queue."""

    default_message = "No tasks in the queue!"


class InvalidMenuChoiceError(TodoQueueError):
    """Raised for unrecognised menu input."""

    default_message = "Invalid choice. Please try again."


class InvalidInputError(TodoQueueError):
    """Raised when a prompted value is blank."""

    default_message = "Input cannot be empty!"


class PersistenceError(TodoQueueError):
    """Raised when the snapshot cannot be read or written."""

    default_message = "Snapshot storage failed"


class ConfigError(TodoQueueError):
    """Raised when the configuration file cannot be loaded or saved."""

    default_message = "Configuration storage failed"
