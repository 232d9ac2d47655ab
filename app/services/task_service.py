"""Task service: ownership rules and task CRUD for the authenticated user."""
import math

from sqlmodel import Session

from app.db.unit_of_work import unit_of_work
from app.exceptions import AccessDeniedError, TaskNotFoundError
from app.models.task import Task
from app.models.user import User
from app.repositories.task_repository import TaskRepository
from app.schemas.pagination import PageRequest
from app.schemas.task import TaskInput, TaskPage, TaskResponse
from app.services import task_mapper
from app.utils.logger import get_logger

logger = get_logger(__name__)


class TaskService:
    """Task CRUD scoped to the user passed into every call."""

    def __init__(self, session: Session):
        self.session = session
        self.tasks = TaskRepository(session)

    def _load_owned(self, current_user: User, task_id: int, deny_as_not_found: bool) -> Task:
        """
        Fetch a task and verify ``current_user`` owns it.

        Args:
            current_user: The resolved principal
            task_id: Id of the task to load
            deny_as_not_found: Report an ownership mismatch as TaskNotFoundError
                instead of AccessDeniedError

        Raises:
            TaskNotFoundError: If no such task exists (or, for reads, it is not owned)
            AccessDeniedError: If the task belongs to another user
        """
        task = self.tasks.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError()

        if task.user_id != current_user.id:
            logger.warning(
                "Ownership check failed",
                task_id=task_id,
                user_id=current_user.id,
            )
            if deny_as_not_found:
                raise TaskNotFoundError()
            raise AccessDeniedError()
        return task

    def create_task(self, current_user: User, data: TaskInput) -> TaskResponse:
        """Create a PENDING task owned by ``current_user``."""
        with unit_of_work(self.session):
            task = self.tasks.insert(task_mapper.to_entity(data, current_user))
            response = task_mapper.to_response(task)

        logger.info("Task created", task_id=response.id, user_id=current_user.id)
        return response

    def list_tasks(self, current_user: User, page_request: PageRequest) -> TaskPage:
        """Return one page of the tasks owned by ``current_user``."""
        with unit_of_work(self.session, read_only=True):
            tasks, total = self.tasks.find_by_owner(current_user.id, page_request)
            content = [task_mapper.to_response(task) for task in tasks]

        return TaskPage(
            content=content,
            page=page_request.page,
            size=page_request.size,
            total_elements=total,
            total_pages=math.ceil(total / page_request.size) if total else 0,
        )

    def get_task(self, current_user: User, task_id: int) -> TaskResponse:
        with unit_of_work(self.session, read_only=True):
            task = self._load_owned(current_user, task_id, deny_as_not_found=True)
            return task_mapper.to_response(task)

    def update_task(self, current_user: User, task_id: int, data: TaskInput) -> TaskResponse:
        """Merge ``data`` onto an owned task; id and owner never change."""
        with unit_of_work(self.session):
            task = self._load_owned(current_user, task_id, deny_as_not_found=False)
            task = self.tasks.update(task_mapper.apply_update(data, task))
            response = task_mapper.to_response(task)

        logger.info("Task updated", task_id=task_id, user_id=current_user.id)
        return response

    def delete_task(self, current_user: User, task_id: int) -> None:
        """Permanently remove an owned task."""
        with unit_of_work(self.session):
            task = self._load_owned(current_user, task_id, deny_as_not_found=False)
            self.tasks.delete(task)

        logger.info("Task deleted", task_id=task_id, user_id=current_user.id)
