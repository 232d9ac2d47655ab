"""User directory: registration, sign-in and principal resolution."""
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.db.unit_of_work import unit_of_work
from app.exceptions import AuthenticationError, DuplicateUserError
from app.models.user import User
from app.repositories.user_repository import UserRepository
from app.schemas.auth import Principal, RegisterRequest, TokenResponse
from app.utils.logger import get_logger
from app.utils.security import create_access_token, hash_password, verify_password

logger = get_logger(__name__)


def _token_for(user: User) -> TokenResponse:
    return TokenResponse(
        token=create_access_token(user.email, user.id, user.role.value),
        user_id=user.id,
        email=user.email,
        role=user.role,
    )


class UserService:
    """Account operations backed by the user table."""

    def __init__(self, session: Session):
        self.session = session
        self.users = UserRepository(session)

    def resolve_principal(self, principal: Principal) -> User:
        """
        Look up the stored user behind an authenticated principal.

        Raises:
            AuthenticationError: If no user has the principal's email
        """
        with unit_of_work(self.session, read_only=True):
            user = self.users.find_by_email(principal.email)
            if user is None:
                raise AuthenticationError("User not found")
        return user

    def register(self, request: RegisterRequest) -> TokenResponse:
        email = request.email.lower()
        with unit_of_work(self.session):
            if self.users.exists_by_email(email):
                raise DuplicateUserError(email)
            try:
                user = self.users.insert(User(
                    email=email,
                    password_hash=hash_password(request.password),
                    name=request.name,
                    role=request.role,
                ))
            except IntegrityError:
                # A concurrent registration took the email after the check
                raise DuplicateUserError(email)
            response = _token_for(user)

        logger.info("User registered", user_id=response.user_id)
        return response

    def authenticate(self, email: str, password: str) -> TokenResponse:
        """
        Check credentials and issue a token.

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        with unit_of_work(self.session, read_only=True):
            user = self.users.find_by_email(email)
            if user is None or not verify_password(password, user.password_hash):
                logger.warning("Sign in rejected", email=email)
                raise AuthenticationError("Invalid email or password")
            return _token_for(user)
