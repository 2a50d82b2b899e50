"""
Password hashing and credential issuance.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from werkzeug.security import generate_password_hash, check_password_hash

from dispatch.core.config import settings


def hash_password(password: str) -> str:
    """One-way salted hash of a plaintext password."""
    return generate_password_hash(password)


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    return check_password_hash(hashed_password, plain_password)


def create_access_token(driver_id: int, email: str, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a credential binding a driver id and email.

    Args:
        driver_id: Driver primary key
        email: Driver email
        expires_delta: Lifetime of the token, ACCESS_TOKEN_EXPIRE_DAYS by default

    Returns:
        Encoded JWT
    """
    if expires_delta is None:
        expires_delta = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    payload = {
        "id": driver_id,
        "email": email,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)
