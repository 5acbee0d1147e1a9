"""Storage adapters implementing the repository interfaces."""

from .json_file import JsonSnapshotRepository

__all__ = ["JsonSnapshotRepository"]
