from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.auth.dependencies import require_admin
from app.auth.policy import Principal
from app.auth.schemas.user import UserListResponse, UserResponse
from app.auth.services.auth_service import AuthService
from app.db.session import get_db

router = APIRouter()


@router.get("", response_model=UserListResponse)
def list_users(
    db: Session = Depends(get_db),
    _admin: Principal = Depends(require_admin),
) -> UserListResponse:
    """List team members (admin only)."""
    users = AuthService(db).list_users()
    return UserListResponse(
        total=len(users),
        users=[UserResponse.model_validate(u) for u in users],
    )


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: UUID,
    db: Session = Depends(get_db),
    admin: Principal = Depends(require_admin),
) -> None:
    """Delete a team member (admin only)."""
    AuthService(db).delete_user(admin, user_id)
