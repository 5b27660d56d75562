from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.ai.schemas.generation import Platform
from app.auth.dependencies import get_current_principal, require_admin
from app.auth.policy import Principal
from app.db.session import get_db
from app.library.schemas.saved_variation import (
    SavedVariationCreate,
    SavedVariationResponse,
    SavedVariationUpdate,
)
from app.library.services.saved_variation_service import SavedVariationService

router = APIRouter()


@router.get("", response_model=list[SavedVariationResponse])
def list_saved_variations(
    client_id: UUID | None = Query(None, description="Filter by brand"),
    project_id: UUID | None = Query(None, description="Filter by project"),
    platform: Platform | None = Query(None, description="Filter by platform"),
    approved: bool | None = Query(None, description="Filter by approval status"),
    tag: str | None = Query(None, description="Only variations carrying this tag"),
    search: str | None = Query(None, description="Search in content"),
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> list[SavedVariationResponse]:
    variations = SavedVariationService(db).list_variations(
        principal,
        client_id=client_id,
        project_id=project_id,
        platform=platform,
        approved=approved,
        tag=tag,
        search=search,
    )
    return [SavedVariationResponse.model_validate(v) for v in variations]


@router.get("/{variation_id}", response_model=SavedVariationResponse)
def get_saved_variation(
    variation_id: UUID,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> SavedVariationResponse:
    variation = SavedVariationService(db).get_variation(principal, variation_id)
    return SavedVariationResponse.model_validate(variation)


@router.post("", response_model=SavedVariationResponse, status_code=status.HTTP_201_CREATED)
def save_variation(
    data: SavedVariationCreate,
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> SavedVariationResponse:
    """Keep a generated variation in the library - Admin only."""
    return SavedVariationResponse.model_validate(SavedVariationService(db).save_variation(data))


@router.put("/{variation_id}", response_model=SavedVariationResponse)
def update_saved_variation(
    variation_id: UUID,
    data: SavedVariationUpdate,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> SavedVariationResponse:
    """Edit or approve a variation; client users are limited to their own brand."""
    variation = SavedVariationService(db).update_variation(principal, variation_id, data)
    return SavedVariationResponse.model_validate(variation)


@router.delete("/{variation_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_saved_variation(
    variation_id: UUID,
    admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> None:
    """Remove a variation - Admin only. Approved variations cannot be removed."""
    SavedVariationService(db).delete_variation(admin, variation_id)
