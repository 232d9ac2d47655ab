"""Task schemas for the Task Tracker API."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime, timezone
from typing import Any, Optional, List

from app.models.task import TaskStatus

TITLE_MAX_LENGTH = 200


class TaskInput(BaseModel):
    """Request body for creating or updating a task."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None  # accepted for symmetry with TaskResponse, never applied
    title: str
    description: Optional[str] = Field(None, max_length=1000)
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = Field(None, alias="dueDate")

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Title is required")
        if len(value) > TITLE_MAX_LENGTH:
            raise ValueError(f"Title must be at most {TITLE_MAX_LENGTH} characters")
        return value

    @field_validator("due_date")
    @classmethod
    def due_date_in_future(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is None:
            return value
        # Naive timestamps are taken as UTC
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        if value <= datetime.now(timezone.utc):
            raise ValueError("Due date must be in the future")
        return value


class TaskCreate(TaskInput):
    """Request body for creating a task; any status sent is ignored."""
    status: Any = None


class TaskResponse(BaseModel):
    """Task as returned to clients."""
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = None
    title: str
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[datetime] = Field(None, alias="dueDate")


class TaskPage(BaseModel):
    """One page of a user's tasks with page metadata."""
    model_config = ConfigDict(populate_by_name=True)

    content: List[TaskResponse]
    page: int
    size: int
    total_elements: int = Field(..., alias="totalElements")
    total_pages: int = Field(..., alias="totalPages")
