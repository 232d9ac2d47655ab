"""Task model for SQLModel."""
from sqlmodel import SQLModel, Field, Relationship
from sqlalchemy import Column, DateTime, String, ForeignKey
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Optional

from app.models.user import utc_now

if TYPE_CHECKING:
    from app.models.user import User


class TaskStatus(str, Enum):
    """Lifecycle label of a task."""
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class Task(SQLModel, table=True):
    """Task entity owned by exactly one user."""

    id: int | None = Field(default=None, primary_key=True)
    user_id: str = Field(
        sa_column=Column(String, ForeignKey("user.id", ondelete="CASCADE"), index=True, nullable=False)
    )
    title: str = Field(max_length=200, min_length=1)
    description: str | None = Field(default=None, max_length=1000)
    status: TaskStatus = Field(default=TaskStatus.PENDING)
    due_date: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True)
    )
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    # Relationships
    user: "User" = Relationship(back_populates="tasks")
