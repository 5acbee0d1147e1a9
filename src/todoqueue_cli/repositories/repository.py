"""Repository abstraction layer for TodoQueue CLI.

The directory never touches the filesystem itself. It reads and writes whole
``DirectorySnapshot`` objects through a ``SnapshotRepository``, which keeps
load/save testable independent of the storage format.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from todoqueue_cli.models import DirectorySnapshot


class SnapshotRepository(ABC):
    """Abstract base class for snapshot persistence."""

    @abstractmethod
    def exists(self) -> bool:
        """Return True if a stored snapshot is available."""
        raise NotImplementedError(
            "SnapshotRepository.exists() must be implemented by adapter"
        )

    @abstractmethod
    def read(self) -> DirectorySnapshot:
        """Read the stored snapshot.

        Returns:
            The stored DirectorySnapshot

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            PersistenceError: If the snapshot cannot be read or decoded
        """
        raise NotImplementedError(
            "SnapshotRepository.read() must be implemented by adapter"
        )

    @abstractmethod
    def write(self, snapshot: DirectorySnapshot) -> None:
        """Replace the stored snapshot with *snapshot*.

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
            PersistenceError: If the snapshot cannot be written
        """
        raise NotImplementedError(
            "SnapshotRepository.write() must be implemented by adapter"
        )
