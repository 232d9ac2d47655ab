"""CORS configuration for browser clients of the Task Tracker API."""
from fastapi.middleware.cors import CORSMiddleware

from app.config import ENVIRONMENT, FRONTEND_URL
from app.utils.logger import get_logger

logger = get_logger(__name__)

# Local development origins
ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

if FRONTEND_URL and FRONTEND_URL not in ALLOWED_ORIGINS:
    ALLOWED_ORIGINS.append(FRONTEND_URL)

PRODUCTION_ORIGIN_REGEX = r"https://.*\.vercel\.app"


def add_cors_middleware(app):
    """Add CORS middleware to the FastAPI application."""
    if ENVIRONMENT == "production":
        logger.info("Using production CORS", origin_regex=PRODUCTION_ORIGIN_REGEX, frontend=FRONTEND_URL)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[FRONTEND_URL] if FRONTEND_URL else [],
            allow_origin_regex=PRODUCTION_ORIGIN_REGEX,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    else:
        logger.info("Using development CORS", origins=ALLOWED_ORIGINS)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=ALLOWED_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
