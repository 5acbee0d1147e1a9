"""Directory service - the in-memory registry of user accounts.

The directory owns the persistence boundary: it is loaded once when a
session starts and persisted once when it ends, always as a whole snapshot
through a ``SnapshotRepository``.
"""

from __future__ import annotations

from todoqueue_cli.models import (
    DirectorySnapshot,
    InvalidCredentialsError,
    PersistenceError,
    UserAccount,
    UsernameTakenError,
)
from todoqueue_cli.repositories import SnapshotRepository
from todoqueue_cli.utils.logger import get_logger


class Directory:
    """Mapping of username to UserAccount.

    Usernames are matched case-sensitively.
    """

    def __init__(self, repository: SnapshotRepository):
        """Initialize an empty directory.

        Args:
            repository: Storage collaborator used by load/persist
        """
        self.repository = repository
        self._accounts: dict[str, UserAccount] = {}
        self.logger = get_logger("directory")

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, username: object) -> bool:
        return username in self._accounts

    def usernames(self) -> list[str]:
        return list(self._accounts)

    def is_registered(self, username: str) -> bool:
        return username in self._accounts

    def register(self, username: str, password: str) -> UserAccount:
        """Create a new account.

        Raises:
            UsernameTakenError: If the username is already registered
        """
        if username in self._accounts:
            raise UsernameTakenError()
        account = UserAccount(username, password)
        self._accounts[username] = account
        return account

    def authenticate(self, username: str, password: str) -> UserAccount:
        """Return the account matching the credentials.

        Raises:
            InvalidCredentialsError: For an unknown username or a wrong password
        """
        account = self._accounts.get(username)
        if account is None or not account.check_password(password):
            raise InvalidCredentialsError()
        return account

    def to_snapshot(self) -> DirectorySnapshot:
        return DirectorySnapshot(
            users=[account.to_record() for account in self._accounts.values()]
        )

    def restore(self, snapshot: DirectorySnapshot) -> None:
        """Replace the current accounts with those in *snapshot*."""
        self._accounts = {
            record.username: UserAccount.from_record(record)
            for record in snapshot.users
        }

    def load_snapshot(self) -> bool:
        """Load the stored snapshot into memory.

        Returns:
            True when no snapshot exists yet (fresh start), False when loaded

        Raises:
            PersistenceError: If the snapshot exists but cannot be read. The
                directory is left empty so the session can continue.
        """
        self._accounts = {}
        if not self.repository.exists():
            self.logger.info("no snapshot found, starting fresh")
            return True

        try:
            snapshot = self.repository.read()
        except PersistenceError:
            self.logger.exception("snapshot load failed")
            raise

        self.restore(snapshot)
        self.logger.info("snapshot loaded: %d user(s)", len(self._accounts))
        return False

    def persist_snapshot(self) -> None:
        """Write the whole directory through the repository.

        Raises:
            PersistenceError: If the snapshot cannot be written
        """
        try:
            self.repository.write(self.to_snapshot())
        except PersistenceError:
            self.logger.exception("snapshot save failed")
            raise
        self.logger.info("snapshot saved: %d user(s)", len(self._accounts))
