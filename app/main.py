"""Main FastAPI application for the Task Tracker API."""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.db.init import init_db
from app.middleware.cors import add_cors_middleware
from app.middleware.error_handlers import register_exception_handlers
from app.routers import auth_router, tasks_router
from app.utils.logger import get_logger

logger = get_logger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables on startup."""
    init_db()
    logger.info("Application startup complete", version=API_VERSION)
    yield


def create_app() -> FastAPI:
    application = FastAPI(
        title="Task Tracker API",
        description="Per-user task tracking with ownership checks on every access",
        version=API_VERSION,
        lifespan=lifespan,
    )

    add_cors_middleware(application)
    register_exception_handlers(application)

    @application.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": API_VERSION}

    @application.get("/")
    async def root():
        """Root endpoint - API welcome message."""
        return {
            "title": "Task Tracker API",
            "version": API_VERSION,
            "docs": "/docs",
            "health": "/health",
        }

    application.include_router(auth_router, prefix="/api")  # /api/auth/register, /api/auth/login
    application.include_router(tasks_router, prefix="/api")  # /api/tasks

    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
