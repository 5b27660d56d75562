from typing import Any
from uuid import UUID

import structlog
from sqlalchemy.orm import Session

from app.auth.policy import ANY_ROLE, Principal, authorize, client_scope
from app.clients.models.client import Client
from app.clients.models.dna_profile import ContentDNAProfile
from app.clients.schemas.dna_profile import DNAProfileCreate, DNAProfileUpdate
from app.core.exceptions import NotFoundError
from app.core.repository import BaseRepository

logger = structlog.get_logger(__name__)


class DNAProfileRepository(BaseRepository[ContentDNAProfile]):
    not_found_message = "Perfil de ADN no encontrado"

    def __init__(self, db: Session):
        super().__init__(db, ContentDNAProfile)


class DNAProfileService:
    def __init__(self, db: Session):
        self.db = db
        self.profiles = DNAProfileRepository(db)

    def list_profiles(
        self, principal: Principal, client_id: UUID | None = None
    ) -> list[ContentDNAProfile]:
        scope = client_scope(principal)
        query = self.profiles.query()
        if scope is not None:
            query = query.filter(ContentDNAProfile.client_id == scope)
        if client_id is not None:
            query = query.filter(ContentDNAProfile.client_id == client_id)
        return list(query.order_by(ContentDNAProfile.created_at))

    def get_profile(self, principal: Principal, profile_id: UUID) -> ContentDNAProfile:
        profile = self.profiles.get_or_404(profile_id)
        authorize(principal, ANY_ROLE, client_id=profile.client_id)
        return profile

    def create_profile(self, data: DNAProfileCreate) -> ContentDNAProfile:
        if self.db.get(Client, data.client_id) is None:
            raise NotFoundError("Marca no encontrada", resource="client")

        values = data.model_dump(mode="json", exclude={"client_id"})
        profile = self.profiles.create(client_id=data.client_id, **values)
        logger.info(
            "dna_profile_created", dna_profile_id=str(profile.id), client_id=str(profile.client_id)
        )
        return profile

    def update_profile(self, profile_id: UUID, data: DNAProfileUpdate) -> ContentDNAProfile:
        profile = self.profiles.get_or_404(profile_id)
        updates: dict[str, Any] = data.model_dump(
            mode="json", exclude_unset=True, exclude_none=True
        )
        return self.profiles.update(profile, **updates)

    def delete_profile(self, profile_id: UUID) -> None:
        profile = self.profiles.get_or_404(profile_id)
        self.profiles.delete(profile)
        logger.info("dna_profile_deleted", dna_profile_id=str(profile_id))
