"""Field-by-field conversion between Task entities and wire schemas."""
from datetime import datetime, timezone
from typing import Optional

from app.models.task import Task, TaskStatus
from app.models.user import User, utc_now
from app.schemas.task import TaskInput, TaskResponse


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # SQLite hands timezone-aware columns back naive
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        status=task.status,
        due_date=_as_utc(task.due_date),
    )


def to_entity(data: TaskInput, owner: User) -> Task:
    """Build a new task for ``owner``; id and status from the input are ignored."""
    return Task(
        user_id=owner.id,
        title=data.title,
        description=data.description,
        status=TaskStatus.PENDING,
        due_date=data.due_date,
    )


def apply_update(data: TaskInput, task: Task) -> Task:
    """
    Merge ``data`` onto ``task`` in place.

    Title is always applied. Description and due date are applied when the
    client sent them, so an explicit null clears them. Status is applied only
    when sent with a value. Id and owner are never touched.
    """
    sent = data.model_fields_set

    task.title = data.title
    if "description" in sent:
        task.description = data.description
    if "due_date" in sent:
        task.due_date = data.due_date
    if "status" in sent and data.status is not None:
        task.status = data.status

    task.updated_at = utc_now()
    return task
