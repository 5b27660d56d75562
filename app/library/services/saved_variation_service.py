from uuid import UUID

import structlog
from sqlalchemy.orm import Session, joinedload

from app.ai.schemas.generation import Platform
from app.auth.policy import ANY_ROLE, Principal, authorize, client_scope
from app.clients.models.client import Client
from app.core.exceptions import ConflictError, ForbiddenError, NotFoundError
from app.core.repository import BaseRepository
from app.library.models.project import Project
from app.library.models.saved_variation import SavedVariation
from app.library.schemas.saved_variation import SavedVariationCreate, SavedVariationUpdate

logger = structlog.get_logger(__name__)

# Fields a client user may change on their own brand's variations
CLIENT_EDITABLE_FIELDS = frozenset({"content", "char_count", "segments", "tags", "is_approved"})


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SavedVariationRepository(BaseRepository[SavedVariation]):
    not_found_message = "Contenido no encontrado"

    def __init__(self, db: Session):
        super().__init__(db, SavedVariation)


class SavedVariationService:
    def __init__(self, db: Session):
        self.db = db
        self.variations = SavedVariationRepository(db)

    def list_variations(
        self,
        principal: Principal,
        client_id: UUID | None = None,
        project_id: UUID | None = None,
        platform: Platform | None = None,
        approved: bool | None = None,
        tag: str | None = None,
        search: str | None = None,
    ) -> list[SavedVariation]:
        """Content library, newest first. Client users only get their own brand."""
        scope = client_scope(principal)
        query = self.variations.query().options(joinedload(SavedVariation.project))

        if scope is not None:
            query = query.filter(SavedVariation.client_id == scope)
        if client_id is not None:
            query = query.filter(SavedVariation.client_id == client_id)
        if project_id is not None:
            query = query.filter(SavedVariation.project_id == project_id)
        if platform is not None:
            query = query.filter(SavedVariation.platform == platform.value)
        if approved is not None:
            query = query.filter(SavedVariation.is_approved == approved)
        if search:
            query = query.filter(
                SavedVariation.content.ilike(f"%{_escape_like(search)}%", escape="\\")
            )

        results: list[SavedVariation] = list(query.order_by(SavedVariation.saved_at.desc()))

        # tags is a JSON array; membership is checked here to stay portable across databases
        if tag:
            results = [v for v in results if tag in (v.tags or [])]
        return results

    def _get_scoped(self, principal: Principal, variation_id: UUID) -> SavedVariation:
        """Fetch by id, hiding other brands' records from client users."""
        scope = client_scope(principal)
        query = self.variations.query().filter(SavedVariation.id == variation_id)
        if scope is not None:
            query = query.filter(SavedVariation.client_id == scope)
        variation: SavedVariation | None = query.first()
        if variation is None:
            raise NotFoundError(self.variations.not_found_message, resource="saved_variation")
        return variation

    def get_variation(self, principal: Principal, variation_id: UUID) -> SavedVariation:
        return self._get_scoped(principal, variation_id)

    def _ensure_project(self, project_id: UUID | None) -> None:
        if project_id is not None and self.db.get(Project, project_id) is None:
            raise NotFoundError("Proyecto no encontrado", resource="project")

    def save_variation(self, data: SavedVariationCreate) -> SavedVariation:
        if self.db.get(Client, data.client_id) is None:
            raise NotFoundError("Marca no encontrada", resource="client")
        self._ensure_project(data.project_id)

        values = data.model_dump()
        values["platform"] = data.platform.value
        values["type"] = data.type.value
        variation = self.variations.create(**values)
        logger.info(
            "variation_saved",
            saved_variation_id=str(variation.id),
            client_id=str(variation.client_id),
            platform=variation.platform,
        )
        return variation

    def update_variation(
        self, principal: Principal, variation_id: UUID, data: SavedVariationUpdate
    ) -> SavedVariation:
        variation = self._get_scoped(principal, variation_id)
        authorize(principal, ANY_ROLE, client_id=variation.client_id)

        updates = data.model_dump(exclude_unset=True)
        if not principal.is_admin and set(updates) - CLIENT_EDITABLE_FIELDS:
            raise ForbiddenError("Solo puedes editar el contenido, las etiquetas o la aprobación")

        # project_id is the only field that accepts an explicit null
        updates = {k: v for k, v in updates.items() if v is not None or k == "project_id"}
        if "project_id" in updates:
            self._ensure_project(updates["project_id"])

        variation = self.variations.update(variation, **updates)
        if "is_approved" in updates:
            logger.info(
                "variation_approval_changed",
                saved_variation_id=str(variation.id),
                approved=variation.is_approved,
                user_id=str(principal.user_id),
            )
        return variation

    def delete_variation(self, principal: Principal, variation_id: UUID) -> None:
        variation = self._get_scoped(principal, variation_id)
        if variation.is_approved:
            raise ConflictError(
                "El contenido aprobado no se puede eliminar; retira la aprobación primero",
                resource="saved_variation",
            )
        self.variations.delete(variation)
        logger.info("variation_deleted", saved_variation_id=str(variation_id))
