"""Password hashing and JWT helpers.

Bcrypt truncates inputs at 72 bytes; passwords are SHA-256 pre-hashed so long
passwords are not silently truncated.
"""
import base64
import hashlib
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import bcrypt
from jose import jwt

from app.config import ACCESS_TOKEN_EXPIRE_DAYS, JWT_ALGORITHM, JWT_SECRET


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def hash_password(password: str) -> str:
    """Return the bcrypt hash of ``password``."""
    hashed = bcrypt.hashpw(_prehash(password), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Return True if ``plain_password`` matches ``hashed_password``."""
    try:
        return bool(bcrypt.checkpw(_prehash(plain_password), hashed_password.encode("utf-8")))
    except (ValueError, TypeError):
        return False


def create_access_token(email: str, user_id: str, role: str) -> str:
    """Issue a signed token whose subject is the user's email."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": email,
        "uid": user_id,
        "role": role,
        "iat": now,
        "exp": now + timedelta(days=ACCESS_TOKEN_EXPIRE_DAYS),
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict[str, Any]:
    """
    Verify signature and expiry and return the claims.

    Raises:
        jose.ExpiredSignatureError: If the token has expired
        jose.JWTError: If the token is malformed or the signature is wrong
    """
    return jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM])
