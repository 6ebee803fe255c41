import enum
import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import Column, DateTime, Enum, String, Text

from task_tracker.config.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TaskStatus(str, enum.Enum):
    """Enum for task statuses."""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"

    @classmethod
    def parse(cls, value: Any) -> "TaskStatus":
        """Parse a status from its value or compact name.

        Accepts "In Progress", "InProgress", "in_progress" and so on.
        Raises ValueError for anything outside the enumeration.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"Invalid status: {value!r}")
        compact = value.replace(" ", "").replace("_", "").lower()
        for member in cls:
            if compact == member.value.replace(" ", "").lower():
                return member
        raise ValueError(f"Invalid status: {value}")


class Task(Base):
    """A unit of work owned by exactly one user."""

    __tablename__ = "tasks"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    owner_id = Column(String, nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    due_date = Column(DateTime(timezone=True), nullable=False)
    status = Column(
        Enum(TaskStatus, name="task_status", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=TaskStatus.PENDING,
    )

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)

    def __repr__(self) -> str:
        return f"<Task id={self.id}, owner={self.owner_id}, status={self.status}>"

