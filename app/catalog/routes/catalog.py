from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.auth.dependencies import get_current_principal, require_admin
from app.auth.policy import Principal
from app.catalog.schemas import (
    CatalogEntryCreate,
    CatalogEntryResponse,
    CatalogEntryUpdate,
    CatalogKind,
    CatalogResponse,
)
from app.catalog.services.catalog_service import CatalogService
from app.db.session import get_db

router = APIRouter()


def _entries(service: CatalogService, kind: CatalogKind) -> list[CatalogEntryResponse]:
    return [CatalogEntryResponse.model_validate(e) for e in service.list_entries(kind)]


def _catalog(service: CatalogService) -> CatalogResponse:
    return CatalogResponse(
        voices=_entries(service, CatalogKind.VOICE),
        goals=_entries(service, CatalogKind.GOAL),
    )


@router.get("", response_model=CatalogResponse)
def get_catalog(
    _principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> CatalogResponse:
    """Voices and goals offered when writing a DNA brief."""
    return _catalog(CatalogService(db))


@router.post("/reset", response_model=CatalogResponse)
def reset_catalog(
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> CatalogResponse:
    """Restore the default voices and goals - Admin only."""
    service = CatalogService(db)
    service.reset_defaults()
    return _catalog(service)


@router.get("/{kind}", response_model=list[CatalogEntryResponse])
def list_catalog_entries(
    kind: CatalogKind,
    _principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> list[CatalogEntryResponse]:
    return _entries(CatalogService(db), kind)


@router.post("/{kind}", response_model=CatalogEntryResponse, status_code=status.HTTP_201_CREATED)
def add_catalog_entry(
    kind: CatalogKind,
    data: CatalogEntryCreate,
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> CatalogEntryResponse:
    return CatalogEntryResponse.model_validate(CatalogService(db).add_entry(kind, data))


@router.put("/{kind}/{entry_id}", response_model=CatalogEntryResponse)
def update_catalog_entry(
    kind: CatalogKind,
    entry_id: UUID,
    data: CatalogEntryUpdate,
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> CatalogEntryResponse:
    entry = CatalogService(db).update_entry(kind, entry_id, data)
    return CatalogEntryResponse.model_validate(entry)


@router.delete("/{kind}/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_catalog_entry(
    kind: CatalogKind,
    entry_id: UUID,
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> None:
    CatalogService(db).delete_entry(kind, entry_id)
