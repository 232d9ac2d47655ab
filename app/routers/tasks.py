"""Task router for the Task Tracker API."""
from fastapi import APIRouter, Depends, Query, Response, status
from typing import Optional

from app.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from app.db.config import get_session
from app.middleware.auth import get_current_user
from app.models.user import User
from app.schemas.error import ErrorResponse
from app.schemas.pagination import PageRequest
from app.schemas.task import TaskCreate, TaskInput, TaskPage, TaskResponse
from app.services.task_service import TaskService
from sqlmodel import Session

router = APIRouter(prefix="/tasks", tags=["Tasks"])  # main.py adds the /api prefix

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def get_task_service(session: Session = Depends(get_session)) -> TaskService:
    """Dependency for getting TaskService instance."""
    return TaskService(session)


@router.post("", response_model=TaskResponse)
def create_task(
    task_data: TaskCreate,
    current_user: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Create a task owned by the caller. Status always starts as PENDING."""
    return service.create_task(current_user, task_data)


@router.get("", response_model=TaskPage)
def list_tasks(
    current_user: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Page size"),
    sort: Optional[str] = Query(None, description="Sort as field[,asc|desc], e.g. dueDate,desc"),
):
    """List the caller's tasks, one page at a time."""
    page_request = PageRequest.from_query(page, size, sort)
    return service.list_tasks(current_user, page_request)


@router.get("/{task_id}", response_model=TaskResponse, responses=NOT_FOUND)
def get_task(
    task_id: int,
    current_user: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    return service.get_task(current_user, task_id)


@router.put("/{task_id}", response_model=TaskResponse, responses=NOT_FOUND)
def update_task(
    task_id: int,
    task_data: TaskInput,
    current_user: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    """Update a task. Fields left out of the body keep their stored values."""
    return service.update_task(current_user, task_id, task_data)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND)
def delete_task(
    task_id: int,
    current_user: User = Depends(get_current_user),
    service: TaskService = Depends(get_task_service),
):
    service.delete_task(current_user, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
