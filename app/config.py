"""Runtime configuration for the Task Tracker API, read from the environment."""
import os
from dotenv import load_dotenv

# Load variables from a local .env file when present
load_dotenv()


def _env_bool(name: str, default: str = "false") -> bool:
    return os.environ.get(name, default).strip().lower() in ("1", "true", "yes", "on")


ENVIRONMENT = os.environ.get("ENVIRONMENT", "development")
DEBUG = _env_bool("DEBUG")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Fallback to SQLite for local development
DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./task_tracker.db")

# JWT settings
JWT_SECRET = os.environ.get("JWT_SECRET", "change-me-in-production")
JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_DAYS = int(os.environ.get("ACCESS_TOKEN_EXPIRE_DAYS", "7"))

# CORS
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:3000")

# Pagination
DEFAULT_PAGE_SIZE = int(os.environ.get("DEFAULT_PAGE_SIZE", "20"))
MAX_PAGE_SIZE = int(os.environ.get("MAX_PAGE_SIZE", "100"))
