import uuid

from pydantic import BaseModel, EmailStr, Field

from app.auth.schemas.user import UserResponse


class LoginRequest(BaseModel):
    """Login request schema"""

    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    """
    Returned after a successful login.
    The token goes in the ``Authorization: Bearer`` header of later requests.
    """

    token: str
    token_type: str = "bearer"
    user: UserResponse


class RegisterRequest(BaseModel):
    """
    Self-registration. The role is not chosen by the caller: internal-domain
    addresses become ADMIN, everyone else is a CLIENT bound to ``client_id``.
    """

    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    name: str = Field(..., min_length=1, max_length=255)
    client_id: uuid.UUID | None = None


class RegisterResponse(BaseModel):
    message: str = "Usuario creado"
    user: UserResponse
