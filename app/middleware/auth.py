"""Bearer-token authentication dependencies for FastAPI."""
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import ExpiredSignatureError, JWTError
from sqlmodel import Session
from typing import Optional

from app.db.config import get_session
from app.exceptions import AuthenticationError
from app.models.user import User
from app.schemas.auth import Principal
from app.services.user_service import UserService
from app.utils.security import decode_access_token

# auto_error is off so missing credentials go through the uniform error body
security = HTTPBearer(auto_error=False)


async def get_current_principal(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Principal:
    """
    Validate the JWT from the Authorization header and return its principal.

    Args:
        request: Incoming request
        credentials: Parsed ``Authorization: Bearer`` header, if any

    Returns:
        Principal identified by the token's email subject

    Raises:
        AuthenticationError: If the header is missing or the token is invalid or expired
    """
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise AuthenticationError("Missing or invalid Authorization header")

    try:
        payload = decode_access_token(credentials.credentials)
    except ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except JWTError:
        raise AuthenticationError("Invalid token")

    email = payload.get("sub")
    if not email:
        raise AuthenticationError("Invalid token: missing subject")

    return Principal(email=email)


def get_current_user(
    principal: Principal = Depends(get_current_principal),
    session: Session = Depends(get_session),
) -> User:
    """Resolve the authenticated principal to its stored user record."""
    return UserService(session).resolve_principal(principal)
