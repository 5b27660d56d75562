from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.auth.dependencies import require_admin
from app.auth.policy import Principal
from app.db.session import get_db
from app.library.schemas.project import ProjectCreate, ProjectResponse
from app.library.services import project_service

router = APIRouter()


@router.get("", response_model=list[ProjectResponse])
def list_projects(
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> list[ProjectResponse]:
    return [ProjectResponse.model_validate(p) for p in project_service.list_projects(db)]


@router.post("", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    data: ProjectCreate,
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> ProjectResponse:
    return ProjectResponse.model_validate(project_service.create_project(db, data))


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: UUID,
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> None:
    project_service.delete_project(db, project_id)
