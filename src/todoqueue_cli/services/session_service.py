"""Session controller - the interactive menu state machine.

The controller is either logged out or logged in as exactly one account of
the directory. Each menu selection runs one action; any error raised by the
action is reported inline and the loop carries on. Leaving the loop
persists the directory exactly once.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from enum import Enum

from rich.console import Console
from rich.prompt import Prompt

from todoqueue_cli.models import (
    EmptyQueueError,
    InvalidInputError,
    InvalidMenuChoiceError,
    PersistenceError,
    Task,
    TodoQueueError,
    UserAccount,
    UsernameTakenError,
)
from todoqueue_cli.services.directory_service import Directory
from todoqueue_cli.utils.logger import get_logger
from todoqueue_cli.utils.ui.console import get_console
from todoqueue_cli.utils.ui.formatters import (
    format_banner,
    format_error,
    format_info,
    format_menu,
    format_next_task,
    format_success,
    format_task_table,
    format_warning,
)

APP_TITLE = "WELCOME TO MULTI-USER TODO APP"
GOODBYE_MESSAGE = "Thank you for using the Todo App. Goodbye!"

PromptFunc = Callable[..., str]


class SessionState(str, Enum):
    """States of the session state machine."""

    LOGGED_OUT = "logged_out"
    LOGGED_IN = "logged_in"
    TERMINATED = "terminated"


class SessionController:
    """Routes menu selections to Directory and UserAccount operations."""

    def __init__(
        self,
        directory: Directory,
        *,
        console: Console | None = None,
        prompt: PromptFunc | None = None,
    ):
        """Initialize a logged-out session.

        Args:
            directory: The account registry this session works on
            console: Rich console for output (defaults to the shared console)
            prompt: Callable ``prompt(message, password=False) -> str`` used
                for all input (defaults to ``rich.prompt.Prompt.ask``)
        """
        self.directory = directory
        self.console = console if console is not None else get_console()
        self._prompt = prompt if prompt is not None else self._ask
        self.logger = get_logger("session")

        self.state = SessionState.LOGGED_OUT
        self.current_user: UserAccount | None = None
        self._persisted = False

        self._logged_out_actions: dict[str, tuple[str, Callable[[], None]]] = {
            "1": ("Login", self._login_action),
            "2": ("Register", self._register_action),
            "3": ("Exit", self.exit),
        }
        self._logged_in_actions: dict[str, tuple[str, Callable[[], None]]] = {
            "1": ("Add task", self._add_task_action),
            "2": ("View next task", self._view_next_action),
            "3": ("Complete next task", self._complete_next_action),
            "4": ("View all tasks", self._view_all_action),
            "5": ("Add priority task (add to front of queue)", self._add_priority_action),
            "6": ("Logout", self._logout_action),
            "7": ("Exit", self.exit),
        }

    # ------------------------------------------------------------------
    # State machine operations
    # ------------------------------------------------------------------

    @property
    def account(self) -> UserAccount:
        """The logged-in account."""
        if self.current_user is None:
            raise TodoQueueError("Not logged in!")
        return self.current_user

    def login(self, username: str, password: str) -> UserAccount:
        account = self.directory.authenticate(username, password)
        self.current_user = account
        self.state = SessionState.LOGGED_IN
        self.logger.info("user logged in: %s", username)
        return account

    def register(self, username: str, password: str) -> UserAccount:
        account = self.directory.register(self._require_username(username), password)
        self.logger.info("user registered: %s", username)
        return account

    def logout(self) -> None:
        if self.current_user is not None:
            self.logger.info("user logged out: %s", self.current_user.username)
        self.current_user = None
        self.state = SessionState.LOGGED_OUT

    def add_task(self, description: str) -> Task:
        task = Task(description=self._require_description(description))
        self.account.add_task(task)
        return task

    def add_priority_task(self, description: str) -> Task:
        task = Task(description=self._require_description(description), is_priority=True)
        self.account.add_priority_task(task)
        return task

    def peek_next(self) -> Task:
        task = self.account.peek_next_task()
        if task is None:
            raise EmptyQueueError()
        return task

    def complete_next(self) -> Task:
        task = self.account.complete_next_task()
        if task is None:
            raise EmptyQueueError()
        return task

    def list_all(self) -> list[Task]:
        return self.account.all_tasks()

    def exit(self) -> None:
        self.logger.info("session exit requested")
        self.state = SessionState.TERMINATED

    @staticmethod
    def _require_username(username: str) -> str:
        if not username:
            raise InvalidInputError("Username cannot be empty!")
        return username

    @staticmethod
    def _require_description(description: str) -> str:
        if not description:
            raise InvalidInputError("Task description cannot be empty!")
        return description

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Show the banner and load the directory snapshot."""
        format_banner(APP_TITLE, console=self.console)
        try:
            fresh = self.directory.load_snapshot()
        except PersistenceError as e:
            format_error(f"Error loading data: {e}", console=self.console)
            return
        if fresh:
            format_info("No existing data found. Starting fresh.", console=self.console)
        else:
            format_success("Data loaded successfully!", console=self.console)

    def finish(self) -> None:
        """Persist the directory (once per session) and say goodbye."""
        if not self._persisted:
            self._persisted = True
            try:
                self.directory.persist_snapshot()
                format_success("Data saved successfully!", console=self.console)
            except PersistenceError as e:
                format_error(f"Error saving data: {e}", console=self.console)
        self.console.print(GOODBYE_MESSAGE)

    def run(self) -> None:
        """Run the interactive loop until the user exits."""
        try:
            self.start()
            while self.state is not SessionState.TERMINATED:
                try:
                    self.show_menu()
                    choice = self._read("Enter your choice")
                    self.handle_choice(choice)
                except (EOFError, KeyboardInterrupt):
                    self.console.print()
                    self.exit()
        finally:
            self.finish()

    # ------------------------------------------------------------------
    # Menu dispatch
    # ------------------------------------------------------------------

    def _current_actions(self) -> dict[str, tuple[str, Callable[[], None]]]:
        if self.state is SessionState.LOGGED_IN:
            return self._logged_in_actions
        return self._logged_out_actions

    def show_menu(self) -> None:
        if self.state is SessionState.LOGGED_IN:
            title = f"MAIN MENU (Logged in as: {self.account.username})"
        else:
            title = "LOGIN MENU"
        options = [(key, label) for key, (label, _) in self._current_actions().items()]
        format_menu(title, options, console=self.console)

    def handle_choice(self, choice: str) -> None:
        """Run the action selected by *choice* and report its outcome.

        Errors never escape a single action, except end of input which the
        caller treats as exit.
        """
        try:
            entry = self._current_actions().get(choice.strip())
            if entry is None:
                raise InvalidMenuChoiceError()
            label, action = entry
            self.logger.debug("menu action: %s", label)
            action()
        except EOFError:
            raise
        except EmptyQueueError as e:
            format_warning(str(e), console=self.console)
        except TodoQueueError as e:
            format_error(str(e), console=self.console)
        except Exception as e:
            self.logger.error(
                "menu action failed: %s\n%s", str(e), traceback.format_exc()
            )
            format_error(f"Error: {e}", console=self.console)

    # ------------------------------------------------------------------
    # Interactive actions
    # ------------------------------------------------------------------

    def _ask(self, message: str, password: bool = False) -> str:
        return Prompt.ask(message, password=password, console=self.console)

    def _read(self, message: str, password: bool = False) -> str:
        return self._prompt(message, password=password).strip()

    def _login_action(self) -> None:
        username = self._read("Enter username")
        password = self._read("Enter password", password=True)
        self.login(username, password)
        format_success("Login successful!", console=self.console)

    def _register_action(self) -> None:
        username = self._require_username(self._read("Enter new username"))
        if self.directory.is_registered(username):
            raise UsernameTakenError()
        password = self._read("Enter password", password=True)
        self.register(username, password)
        format_success("Registration successful!", console=self.console)

    def _logout_action(self) -> None:
        self.logout()
        format_success("Logged out successfully!", console=self.console)

    def _add_task_action(self) -> None:
        self.add_task(self._read("Enter task description"))
        format_success("Task added successfully!", console=self.console)

    def _add_priority_action(self) -> None:
        self.add_priority_task(self._read("Enter priority task description"))
        format_success("Priority task added successfully!", console=self.console)

    def _view_next_action(self) -> None:
        format_next_task(self.peek_next(), console=self.console)

    def _complete_next_action(self) -> None:
        task = self.complete_next()
        format_success(f"Completed task: {task.description}", console=self.console)

    def _view_all_action(self) -> None:
        tasks = self.list_all()
        if not tasks:
            raise EmptyQueueError()
        format_task_table(tasks, console=self.console)
