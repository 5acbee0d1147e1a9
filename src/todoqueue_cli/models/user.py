"""User account model."""

from __future__ import annotations

from collections import deque

from .credentials import verify_password
from .snapshot import UserRecord
from .task import Task


class UserAccount:
    """A registered user and their task queue.

    The queue is a deque: ``add_task`` appends at the back,
    ``add_priority_task`` inserts at the front, and tasks are always
    completed from the front.
    """

    def __init__(self, username: str, password: str):
        self._username = username
        self._password = password
        self._queue: deque[Task] = deque()

    @property
    def username(self) -> str:
        return self._username

    def check_password(self, candidate: str) -> bool:
        return verify_password(self._password, candidate)

    def add_task(self, task: Task) -> None:
        self._queue.append(task)

    def add_priority_task(self, task: Task) -> None:
        self._queue.appendleft(task)

    def peek_next_task(self) -> Task | None:
        """Return the front task without removing it, or None if empty."""
        return self._queue[0] if self._queue else None

    def complete_next_task(self) -> Task | None:
        """Remove and return the front task, or None if empty."""
        return self._queue.popleft() if self._queue else None

    def all_tasks(self) -> list[Task]:
        """Return a copy of the queue, front to back."""
        return list(self._queue)

    @property
    def task_count(self) -> int:
        return len(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return f"UserAccount(username={self._username!r}, tasks={len(self._queue)})"

    def to_record(self) -> UserRecord:
        return UserRecord(
            username=self._username,
            password=self._password,
            tasks=list(self._queue),
        )

    @classmethod
    def from_record(cls, record: UserRecord) -> UserAccount:
        account = cls(record.username, record.password)
        account._queue.extend(record.tasks)
        return account
