"""Unit tests for TaskService ownership rules and unit-of-work behaviour."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError
from sqlalchemy import func
from sqlmodel import select

from app.exceptions import AccessDeniedError, TaskNotFoundError
from app.models.task import Task, TaskStatus
from app.schemas.pagination import PageRequest
from app.schemas.task import TaskInput
from app.services.task_service import TaskService


def _tomorrow():
    return datetime.now(timezone.utc) + timedelta(days=1)


def _count_tasks(session) -> int:
    return session.exec(select(func.count()).select_from(Task)).one()


@pytest.fixture
def service(session):
    return TaskService(session)


def test_create_forces_pending_status_and_owner(service, alice):
    created = service.create_task(
        alice,
        TaskInput(id=999, title="Write report", status=TaskStatus.COMPLETED, due_date=_tomorrow()),
    )

    assert created.id is not None
    assert created.id != 999
    assert created.status == TaskStatus.PENDING
    stored = service.session.get(Task, created.id)
    assert stored.user_id == alice.id


def test_create_strips_title(service, alice):
    created = service.create_task(alice, TaskInput(title="  Buy milk  "))
    assert created.title == "Buy milk"


def test_blank_title_is_rejected_before_the_store(session):
    with pytest.raises(ValidationError):
        TaskInput(title="   ")
    assert _count_tasks(session) == 0


def test_past_due_date_is_rejected(session):
    with pytest.raises(ValidationError):
        TaskInput(title="Late", due_date=datetime.now(timezone.utc) - timedelta(minutes=1))
    assert _count_tasks(session) == 0


def test_naive_due_date_is_read_as_utc():
    naive = datetime.now(timezone.utc).replace(tzinfo=None) + timedelta(hours=2)
    data = TaskInput(title="Naive", due_date=naive)
    assert data.due_date.tzinfo == timezone.utc


def test_get_task_of_other_user_is_not_found(service, alice, bob):
    created = service.create_task(alice, TaskInput(title="Private"))

    with pytest.raises(TaskNotFoundError):
        service.get_task(bob, created.id)


def test_get_missing_task_is_not_found(service, alice):
    with pytest.raises(TaskNotFoundError):
        service.get_task(alice, 12345)


def test_update_by_other_user_is_access_denied(service, alice, bob):
    created = service.create_task(alice, TaskInput(title="Mine"))

    with pytest.raises(AccessDeniedError):
        service.update_task(bob, created.id, TaskInput(title="Hijacked"))

    assert service.get_task(alice, created.id).title == "Mine"


def test_delete_by_other_user_is_access_denied(service, alice, bob):
    created = service.create_task(alice, TaskInput(title="Mine"))

    with pytest.raises(AccessDeniedError):
        service.delete_task(bob, created.id)

    assert service.get_task(alice, created.id).id == created.id


def test_update_keeps_id_and_owner(service, alice):
    created = service.create_task(alice, TaskInput(title="Draft", description="v1"))

    updated = service.update_task(alice, created.id, TaskInput(id=777, title="Revised"))

    assert updated.id == created.id
    assert updated.title == "Revised"
    assert updated.description == "v1"
    assert service.session.get(Task, created.id).user_id == alice.id


def test_update_merges_sent_fields(service, alice):
    due = _tomorrow()
    created = service.create_task(alice, TaskInput(title="Draft", description="notes", due_date=due))

    updated = service.update_task(
        alice,
        created.id,
        TaskInput.model_validate({"title": "Draft", "description": None, "status": "IN_PROGRESS"}),
    )

    assert updated.description is None
    assert updated.status == TaskStatus.IN_PROGRESS
    assert updated.due_date is not None


def test_update_with_null_status_keeps_stored_status(service, alice):
    created = service.create_task(alice, TaskInput(title="Task"))
    service.update_task(alice, created.id, TaskInput(title="Task", status=TaskStatus.COMPLETED))

    updated = service.update_task(
        alice, created.id, TaskInput.model_validate({"title": "Task", "status": None})
    )

    assert updated.status == TaskStatus.COMPLETED


def test_delete_then_get_is_not_found(service, alice):
    created = service.create_task(alice, TaskInput(title="Temporary"))

    service.delete_task(alice, created.id)

    with pytest.raises(TaskNotFoundError):
        service.get_task(alice, created.id)


def test_list_never_includes_other_users_tasks(service, alice, bob):
    for i in range(5):
        service.create_task(alice, TaskInput(title=f"alice {i}"))
    for i in range(3):
        service.create_task(bob, TaskInput(title=f"bob {i}"))

    for size in range(1, 7):
        for page in range(0, 6):
            result = service.list_tasks(alice, PageRequest(page=page, size=size))
            assert all(task.title.startswith("alice") for task in result.content)
            assert result.total_elements == 5


def test_list_pages_in_insertion_order(service, alice):
    ids = [service.create_task(alice, TaskInput(title=f"t{i}")).id for i in range(5)]

    first = service.list_tasks(alice, PageRequest(page=0, size=2))
    last = service.list_tasks(alice, PageRequest(page=2, size=2))

    assert [t.id for t in first.content] == ids[:2]
    assert [t.id for t in last.content] == ids[4:]
    assert first.total_pages == 3
    assert first.page == 0
    assert first.size == 2


def test_list_sorts_descending(service, alice):
    for title in ("b", "a", "c"):
        service.create_task(alice, TaskInput(title=title))

    result = service.list_tasks(alice, PageRequest.from_query(0, 10, "title,desc"))

    assert [t.title for t in result.content] == ["c", "b", "a"]


def test_list_for_user_without_tasks_is_empty(service, bob):
    result = service.list_tasks(bob, PageRequest())
    assert result.content == []
    assert result.total_elements == 0
    assert result.total_pages == 0


def test_failed_update_rolls_back(service, alice, monkeypatch):
    created = service.create_task(alice, TaskInput(title="Original"))

    def boom(task):
        raise RuntimeError("store unavailable")

    monkeypatch.setattr(service.tasks, "update", boom)

    with pytest.raises(RuntimeError):
        service.update_task(alice, created.id, TaskInput(title="Changed"))

    assert service.get_task(alice, created.id).title == "Original"


def test_title_length_is_checked_after_stripping():
    padded = "  " + "x" * 200 + "  "
    assert TaskInput(title=padded).title == "x" * 200

    with pytest.raises(ValidationError):
        TaskInput(title="x" * 201)


def test_ownership_failure_message_matches_missing_task(service, alice, bob):
    created = service.create_task(alice, TaskInput(title="Private"))

    with pytest.raises(TaskNotFoundError) as missing:
        service.get_task(bob, 99999)
    with pytest.raises(TaskNotFoundError) as foreign_read:
        service.get_task(bob, created.id)
    with pytest.raises(AccessDeniedError) as foreign_write:
        service.delete_task(bob, created.id)

    assert missing.value.message == foreign_read.value.message == foreign_write.value.message
