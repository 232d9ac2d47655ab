"""Authentication schemas for the Task Tracker API."""
from pydantic import BaseModel, ConfigDict, EmailStr, Field

from app.models.user import Role


class RegisterRequest(BaseModel):
    """Registration request body."""
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    name: str | None = Field(None, max_length=255)
    role: Role = Role.USER


class SignInRequest(BaseModel):
    """Sign in request body."""
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    """Response containing a JWT after registration or sign in."""
    model_config = ConfigDict(populate_by_name=True)

    token: str
    user_id: str = Field(..., alias="userId")
    email: str
    role: Role


class Principal(BaseModel):
    """Identity carried by a verified bearer token."""
    email: str
