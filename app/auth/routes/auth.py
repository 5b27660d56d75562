from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from app.auth.dependencies import get_current_user
from app.auth.models.user import User
from app.auth.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)
from app.auth.schemas.user import UserResponse
from app.auth.services.auth_service import AuthService
from app.core.config import settings
from app.core.rate_limit import limiter
from app.db.session import get_db

router = APIRouter()


@router.post("/login", response_model=TokenResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    credentials: LoginRequest,
    db: Session = Depends(get_db),
) -> TokenResponse:
    service = AuthService(db)
    user = service.login(credentials.email, credentials.password)

    return TokenResponse(
        token=service.issue_token(user),
        user=UserResponse.model_validate(user),
    )


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def register(
    request: Request,
    data: RegisterRequest,
    db: Session = Depends(get_db),
) -> RegisterResponse:
    user = AuthService(db).register(data)
    return RegisterResponse(user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    return UserResponse.model_validate(current_user)
