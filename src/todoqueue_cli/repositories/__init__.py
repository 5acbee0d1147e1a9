"""Repository interfaces for the TodoQueue CLI.

Implementations (Adapters) are in:
- todoqueue_cli.adapters.json_file (local JSON snapshot file)
"""

from .repository import SnapshotRepository

__all__ = ["SnapshotRepository"]
