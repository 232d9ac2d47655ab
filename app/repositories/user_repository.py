"""User directory store: lookups by email."""
from typing import Optional

from sqlmodel import Session, select

from app.models.user import User


class UserRepository:
    """Data access for users. Never commits."""

    def __init__(self, session: Session):
        self.session = session

    def find_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(User.email == email.lower())
        return self.session.exec(statement).first()

    def exists_by_email(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def insert(self, user: User) -> User:
        self.session.add(user)
        self.session.flush()
        self.session.refresh(user)
        return user
