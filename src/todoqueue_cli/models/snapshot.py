"""Snapshot models for persisting the user directory."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from .task import Task

SNAPSHOT_VERSION = 1


class UserRecord(BaseModel):
    """Serialized form of a user account."""

    username: str
    password: str
    tasks: list[Task] = Field(default_factory=list)  # front to back


class DirectorySnapshot(BaseModel):
    """The complete state of the directory at one point in time."""

    version: int = SNAPSHOT_VERSION
    saved_at: datetime = Field(default_factory=datetime.now)
    users: list[UserRecord] = Field(default_factory=list)

    @field_validator("version")
    @classmethod
    def validate_version(cls, v: int) -> int:
        if v != SNAPSHOT_VERSION:
            raise ValueError(f"unsupported snapshot version {v}")
        return v

    @field_validator("users")
    @classmethod
    def validate_unique_usernames(cls, v: list[UserRecord]) -> list[UserRecord]:
        seen: set[str] = set()
        for record in v:
            if record.username in seen:
                raise ValueError(f"duplicate username '{record.username}'")
            seen.add(record.username)
        return v
