"""Task data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


class Task(BaseModel):
    """A single to-do item. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    description: str
    created_at: datetime = Field(default_factory=datetime.now)
    is_priority: bool = False

    def describe(self) -> str:
        """Return the display string used by the console."""
        prefix = "[PRIORITY] " if self.is_priority else ""
        created = self.created_at.strftime(TIMESTAMP_FORMAT)
        return f"{prefix}{self.description} (Created: {created})"

    def __str__(self) -> str:
        return self.describe()
