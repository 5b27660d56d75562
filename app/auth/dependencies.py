import uuid
from typing import cast

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.auth.models.user import User
from app.auth.policy import ADMIN_ONLY, Principal, Role, authorize
from app.core import security
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.db.session import get_db

bearer_scheme = HTTPBearer(auto_error=False)


async def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """Extract the bearer token from the Authorization header"""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Token de acceso requerido")
    return credentials.credentials


async def get_current_user(
    token: str = Depends(get_bearer_token),
    db: Session = Depends(get_db),
) -> User:
    """Get current authenticated user from the bearer token"""
    payload = security.decode_token(token)
    if payload is None:
        raise ForbiddenError("Token inválido o expirado")

    raw_user_id = payload.get("userId")
    try:
        user_id = uuid.UUID(str(raw_user_id))
    except ValueError:
        raise ForbiddenError("Token inválido o expirado") from None

    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise UnauthorizedError("Usuario no encontrado")

    return cast(User, user)


async def get_current_principal(current_user: User = Depends(get_current_user)) -> Principal:
    """Build the request-scoped identity from the stored account.

    Role and brand come from the database, so a role change or brand
    reassignment takes effect without waiting for the token to expire.
    """
    return Principal(
        user_id=current_user.id,
        role=Role(current_user.role),
        client_id=current_user.client_id,
    )


async def require_admin(principal: Principal = Depends(get_current_principal)) -> Principal:
    authorize(principal, ADMIN_ONLY)
    return principal
