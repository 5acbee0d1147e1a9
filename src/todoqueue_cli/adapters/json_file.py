"""JSON file adapter for directory snapshots."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from todoqueue_cli.models import DirectorySnapshot, PersistenceError
from todoqueue_cli.repositories import SnapshotRepository


class JsonSnapshotRepository(SnapshotRepository):
    """Stores the snapshot as a single JSON document.

    Writes go to a temporary file in the same directory which then replaces
    the target, so a failed save never leaves a half-written snapshot.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser()

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> DirectorySnapshot:
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise PersistenceError(f"cannot read {self.path}: {e}") from e
        try:
            return DirectorySnapshot.model_validate_json(raw)
        except (ValidationError, UnicodeDecodeError) as e:
            raise PersistenceError(f"invalid snapshot in {self.path}: {e}") from e

    def write(self, snapshot: DirectorySnapshot) -> None:
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            # Created with mode 0600; the snapshot holds plaintext credentials
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                f.write(snapshot.model_dump_json(indent=2))
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            raise PersistenceError(f"cannot write {self.path}: {e}") from e
        finally:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
