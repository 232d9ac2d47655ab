"""Task store: queries and writes against the task table."""
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.task import Task
from app.schemas.pagination import PageRequest

# Largest value a 64-bit integer column or OFFSET accepts
MAX_ROW_ID = 2 ** 63 - 1

# Wire sort names mapped to columns
_SORT_COLUMNS = {
    "id": Task.id,
    "title": Task.title,
    "status": Task.status,
    "dueDate": Task.due_date,
    "createdAt": Task.created_at,
}


class TaskRepository:
    """Data access for tasks. Never commits; the caller's unit of work does."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_id(self, task_id: int) -> Optional[Task]:
        if not 1 <= task_id <= MAX_ROW_ID:
            return None
        return self.session.get(Task, task_id)

    def find_by_owner(self, owner_id: str, page_request: PageRequest) -> Tuple[List[Task], int]:
        """Return one page of the owner's tasks and the owner's total task count."""
        total = self.session.exec(
            select(func.count()).select_from(Task).where(Task.user_id == owner_id)
        ).one()
        if page_request.offset > MAX_ROW_ID:
            return [], total

        column = _SORT_COLUMNS[page_request.sort_field]
        order = column.desc() if page_request.descending else column.asc()
        statement = (
            select(Task)
            .where(Task.user_id == owner_id)
            # id breaks ties so pages never overlap
            .order_by(order, Task.id.asc())
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        return list(self.session.exec(statement).all()), total

    def insert(self, task: Task) -> Task:
        self.session.add(task)
        self.session.flush()
        self.session.refresh(task)
        return task

    def update(self, task: Task) -> Task:
        self.session.add(task)
        self.session.flush()
        self.session.refresh(task)
        return task

    def delete(self, task: Task) -> None:
        self.session.delete(task)
        self.session.flush()
