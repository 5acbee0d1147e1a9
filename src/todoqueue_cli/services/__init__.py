"""Services module for TodoQueue CLI - Business logic layer."""

from .config_service import ConfigService, get_config_service
from .directory_service import Directory
from .session_service import SessionController, SessionState

__all__ = [
    "ConfigService",
    "get_config_service",
    "Directory",
    "SessionController",
    "SessionState",
]
