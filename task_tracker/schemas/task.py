from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from task_tracker.models.task import TaskStatus


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TaskPayload(_CamelModel):
    """Body of create and update requests.

    Every field is optional at the schema level so that a missing field is
    reported by the service with the API's own message. Unknown keys such as
    `owner` are ignored.
    """

    title: Optional[str] = Field(None, description="Task title")
    description: Optional[str] = Field(None, description="Task description")
    due_date: Optional[datetime] = Field(None, description="Due date for the task")
    status: Optional[TaskStatus] = Field(None, description="Pending, In Progress or Completed")

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date(cls, v: Any) -> Any:
        # An unfilled date input arrives as ""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("status", mode="before")
    @classmethod
    def parse_status(cls, v: Any) -> Optional[TaskStatus]:
        if v is None or v == "":
            return None
        return TaskStatus.parse(v)


class TaskRead(_CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    id: str
    owner: str = Field(..., validation_alias="owner_id")
    title: str
    description: str
    due_date: datetime
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    @field_validator("due_date", "created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands datetimes back naive; they are stored as UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class TaskEnvelope(BaseModel):
    status: bool = True
    task: TaskRead
    msg: str


class TaskListEnvelope(BaseModel):
    status: bool = True
    tasks: List[TaskRead]
    msg: str


class MessageEnvelope(BaseModel):
    status: bool = True
    msg: str
