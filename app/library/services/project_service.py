from uuid import UUID

import structlog
from sqlalchemy.orm import Session

from app.core.repository import BaseRepository
from app.library.models.project import Project
from app.library.schemas.project import ProjectCreate

logger = structlog.get_logger(__name__)


class ProjectRepository(BaseRepository[Project]):
    not_found_message = "Proyecto no encontrado"

    def __init__(self, db: Session):
        super().__init__(db, Project)


def list_projects(db: Session) -> list[Project]:
    return list(ProjectRepository(db).query().order_by(Project.created_at.desc()))


def create_project(db: Session, data: ProjectCreate) -> Project:
    project = ProjectRepository(db).create(name=data.name.strip())
    logger.info("project_created", project_id=str(project.id))
    return project


def delete_project(db: Session, project_id: UUID) -> None:
    """Delete a project; its saved variations stay in the library without a project."""
    projects = ProjectRepository(db)
    project = projects.get_or_404(project_id)
    projects.delete(project)
    logger.info("project_deleted", project_id=str(project_id))
