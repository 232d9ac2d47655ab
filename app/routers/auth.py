"""Authentication router for the Task Tracker API."""
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.db.config import get_session
from app.schemas.auth import RegisterRequest, SignInRequest, TokenResponse
from app.schemas.error import ErrorResponse
from app.services.user_service import UserService

router = APIRouter(prefix="/auth", tags=["Authentication"])


def get_user_service(session: Session = Depends(get_session)) -> UserService:
    return UserService(session)


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_409_CONFLICT: {"model": ErrorResponse}},
)
def register(request: RegisterRequest, service: UserService = Depends(get_user_service)):
    """Create an account and return a token for it."""
    return service.register(request)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse}},
)
def login(request: SignInRequest, service: UserService = Depends(get_user_service)):
    return service.authenticate(request.email.lower(), request.password)
