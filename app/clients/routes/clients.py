from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.auth.dependencies import get_current_principal, require_admin
from app.auth.policy import Principal
from app.clients.schemas.client import (
    ClientCreate,
    ClientResponse,
    ClientUpdate,
    ClientWithProfilesResponse,
)
from app.clients.services.client_service import ClientService
from app.db.session import get_db

router = APIRouter()


@router.get("", response_model=list[ClientWithProfilesResponse])
def list_clients(
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> list[ClientWithProfilesResponse]:
    """List brands with their DNA profiles; client users only see their own."""
    clients = ClientService(db).list_clients(principal)
    return [ClientWithProfilesResponse.model_validate(c) for c in clients]


@router.get("/{client_id}", response_model=ClientWithProfilesResponse)
def get_client(
    client_id: UUID,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> ClientWithProfilesResponse:
    client = ClientService(db).get_client(principal, client_id)
    return ClientWithProfilesResponse.model_validate(client)


@router.post("", response_model=ClientResponse, status_code=status.HTTP_201_CREATED)
def create_client(
    data: ClientCreate,
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> ClientResponse:
    """Create a brand - Admin only."""
    return ClientResponse.model_validate(ClientService(db).create_client(data))


@router.put("/{client_id}", response_model=ClientResponse)
def update_client(
    client_id: UUID,
    data: ClientUpdate,
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> ClientResponse:
    """Update a brand - Admin only."""
    return ClientResponse.model_validate(ClientService(db).update_client(client_id, data))


@router.delete("/{client_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_client(
    client_id: UUID,
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> None:
    """Delete a brand and everything that belongs to it - Admin only."""
    ClientService(db).delete_client(client_id)
