from uuid import UUID

import structlog
from sqlalchemy.orm import Session, selectinload

from app.auth.models.user import User
from app.auth.policy import ANY_ROLE, Principal, Role, authorize, client_scope
from app.clients.models.client import Client
from app.clients.schemas.client import ClientCreate, ClientUpdate
from app.core.exceptions import ConflictError
from app.core.repository import BaseRepository

logger = structlog.get_logger(__name__)

_NON_NULLABLE_FIELDS = {"name", "industry", "brand_voice_guidelines", "value_proposition"}


class ClientRepository(BaseRepository[Client]):
    not_found_message = "Marca no encontrada"

    def __init__(self, db: Session):
        super().__init__(db, Client)


class ClientService:
    def __init__(self, db: Session):
        self.db = db
        self.clients = ClientRepository(db)

    def list_clients(self, principal: Principal) -> list[Client]:
        """All brands for admins; only the bound brand for client users."""
        scope = client_scope(principal)
        query = self.clients.query().options(selectinload(Client.dna_profiles))
        if scope is not None:
            query = query.filter(Client.id == scope)
        return list(query.order_by(Client.name))

    def get_client(self, principal: Principal, client_id: UUID) -> Client:
        authorize(principal, ANY_ROLE, client_id=client_id)
        return self.clients.get_or_404(client_id)

    def create_client(self, data: ClientCreate) -> Client:
        client = self.clients.create(**data.model_dump())
        logger.info("client_created", client_id=str(client.id), name=client.name)
        return client

    def update_client(self, client_id: UUID, data: ClientUpdate) -> Client:
        client = self.clients.get_or_404(client_id)
        updates = {
            key: value
            for key, value in data.model_dump(exclude_unset=True).items()
            if value is not None or key not in _NON_NULLABLE_FIELDS
        }
        return self.clients.update(client, **updates)

    def delete_client(self, client_id: UUID) -> None:
        """Delete a brand together with its DNA profiles and saved variations.

        Refused while client-role accounts are still bound to the brand.
        """
        client = self.clients.get_or_404(client_id)

        bound_users = (
            self.db.query(User)
            .filter(User.client_id == client_id, User.role == Role.CLIENT.value)
            .count()
        )
        if bound_users:
            raise ConflictError(
                "La marca tiene usuarios asociados; elimínalos o reasígnalos primero",
                resource="client",
            )

        self.clients.delete(client)
        logger.info("client_deleted", client_id=str(client_id))
