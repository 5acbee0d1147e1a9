"""Unit tests for UserAccount queue operations."""

from datetime import datetime

import pytest

from todoqueue_cli.models import Task, UserAccount
from todoqueue_cli.models.credentials import verify_password


def _task(description: str, priority: bool = False) -> Task:
    return Task(
        description=description,
        created_at=datetime(2026, 10, 19, 12, 0, 0),
        is_priority=priority,
    )


def _descriptions(account: UserAccount) -> list[str]:
    return [t.description for t in account.all_tasks()]


@pytest.fixture()
def account() -> UserAccount:
    return UserAccount("alice", "pw1")


class TestPasswords:
    def test_correct_password(self, account):
        assert account.check_password("pw1") is True

    @pytest.mark.parametrize("candidate", ["pw2", "PW1", "pw1 ", ""])
    def test_wrong_password(self, account, candidate):
        assert account.check_password(candidate) is False

    def test_verify_password_handles_non_ascii(self):
        assert verify_password("pässwörd", "pässwörd") is True
        assert verify_password("pässwörd", "passwort") is False


class TestQueueOrdering:
    def test_plain_adds_are_fifo(self, account):
        for name in ("a", "b", "c"):
            account.add_task(_task(name))
        assert _descriptions(account) == ["a", "b", "c"]

    def test_priority_add_goes_in_front(self, account):
        account.add_task(_task("buy milk"))
        account.add_priority_task(_task("call bank", priority=True))
        assert _descriptions(account) == ["call bank", "buy milk"]

    def test_consecutive_priority_adds_are_reversed(self, account):
        account.add_priority_task(_task("p1", priority=True))
        account.add_priority_task(_task("p2", priority=True))
        account.add_priority_task(_task("p3", priority=True))
        assert _descriptions(account) == ["p3", "p2", "p1"]

    @pytest.mark.parametrize(
        "operations, expected",
        [
            ([("add", "a"), ("prio", "p"), ("add", "b")], ["p", "a", "b"]),
            ([("prio", "p1"), ("add", "a"), ("prio", "p2")], ["p2", "p1", "a"]),
            (
                [("add", "a"), ("add", "b"), ("prio", "p1"), ("add", "c"), ("prio", "p2")],
                ["p2", "p1", "a", "b", "c"],
            ),
        ],
    )
    def test_mixed_sequences(self, account, operations, expected):
        for op, name in operations:
            if op == "add":
                account.add_task(_task(name))
            else:
                account.add_priority_task(_task(name, priority=True))
        assert _descriptions(account) == expected


class TestQueueConsumption:
    def test_peek_does_not_remove(self, account):
        account.add_task(_task("a"))
        assert account.peek_next_task().description == "a"
        assert len(account) == 1

    def test_peek_empty_returns_none(self, account):
        assert account.peek_next_task() is None

    def test_complete_returns_front_and_keeps_order(self, account):
        for name in ("a", "b", "c"):
            account.add_task(_task(name))
        completed = account.complete_next_task()
        assert completed.description == "a"
        assert _descriptions(account) == ["b", "c"]
        assert account.task_count == 2

    def test_complete_empty_is_noop(self, account):
        assert account.complete_next_task() is None
        assert account.complete_next_task() is None
        assert account.all_tasks() == []

    def test_all_tasks_is_a_copy(self, account):
        account.add_task(_task("a"))
        tasks = account.all_tasks()
        tasks.clear()
        assert _descriptions(account) == ["a"]


class TestRecords:
    def test_record_round_trip(self, account):
        account.add_task(_task("buy milk"))
        account.add_priority_task(_task("call bank", priority=True))

        record = account.to_record()
        assert record.username == "alice"
        assert record.password == "pw1"

        restored = UserAccount.from_record(record)
        assert restored.username == "alice"
        assert restored.check_password("pw1")
        assert restored.all_tasks() == account.all_tasks()

    def test_username_is_read_only(self, account):
        with pytest.raises(AttributeError):
            account.username = "bob"
