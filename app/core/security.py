import logging
import secrets
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext

from app.core.config import settings

logger = logging.getLogger(__name__)

# argon2 for new hashes; bcrypt hashes imported from the previous system still verify
pwd_context = CryptContext(schemes=["argon2", "bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return bool(pwd_context.verify(plain_password, hashed_password))
    except ValueError:
        logger.warning("Unrecognized password hash format")
        return False


def get_password_hash(password: str) -> str:
    return str(pwd_context.hash(password))


def constant_time_equals(a: str, b: str) -> bool:
    return secrets.compare_digest(a.encode(), b.encode())


def create_access_token(
    user_id: str, role: str, client_id: str | None = None, expires_delta: timedelta | None = None
) -> str:
    """Issue a signed session token carrying ``{userId, role, clientId}``."""
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(hours=settings.ACCESS_TOKEN_EXPIRE_HOURS))
    to_encode: dict[str, Any] = {
        "userId": user_id,
        "role": role,
        "clientId": client_id,
        "exp": expire,
        "iat": now,
    }
    encoded_jwt: str = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return encoded_jwt


def decode_token(token: str) -> dict[str, Any] | None:
    try:
        payload: dict[str, Any] = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
        return payload
    except JWTError:
        return None
