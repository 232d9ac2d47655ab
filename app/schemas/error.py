"""Uniform error body returned by every failing request."""
from datetime import datetime
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    timestamp: datetime
    status: int
    message: str
    path: str
