"""Initialize database tables."""
from sqlmodel import SQLModel

from app.db.config import engine
from app.models.user import User  # noqa: F401  (registers table metadata)
from app.models.task import Task  # noqa: F401
from app.utils.logger import get_logger

logger = get_logger(__name__)


def init_db(target_engine=None):
    """Create all tables in the database."""
    target_engine = target_engine or engine
    logger.info("Creating all tables")
    SQLModel.metadata.create_all(target_engine)
    logger.info("Tables created", tables=sorted(SQLModel.metadata.tables))


if __name__ == "__main__":
    init_db()
