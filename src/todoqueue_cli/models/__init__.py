"""TodoQueue CLI domain models.

Pydantic models for tasks and snapshots, the ``UserAccount`` queue owner,
and the exception hierarchy shared by services and the session controller.
"""

from .config_models import AppConfig
from .exceptions import (
    ConfigError,
    EmptyQueueError,
    InvalidCredentialsError,
    InvalidInputError,
    InvalidMenuChoiceError,
    PersistenceError,
    TodoQueueError,
    UsernameTakenError,
)
from .snapshot import SNAPSHOT_VERSION, DirectorySnapshot, UserRecord
from .task import Task
from .user import UserAccount

__all__ = [
    # Task / user models
    "Task",
    "UserAccount",
    # Snapshot models
    "DirectorySnapshot",
    "UserRecord",
    "SNAPSHOT_VERSION",
    # Config models
    "AppConfig",
    # Errors
    "TodoQueueError",
    "UsernameTakenError",
    "InvalidCredentialsError",
    "EmptyQueueError",
    "InvalidMenuChoiceError",
    "InvalidInputError",
    "PersistenceError",
    "ConfigError",
]
