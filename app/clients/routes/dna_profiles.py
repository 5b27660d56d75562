from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.auth.dependencies import get_current_principal, require_admin
from app.auth.policy import Principal
from app.clients.schemas.dna_profile import (
    DNAProfileCreate,
    DNAProfileResponse,
    DNAProfileUpdate,
)
from app.clients.services.dna_profile_service import DNAProfileService
from app.db.session import get_db

router = APIRouter()


@router.get("", response_model=list[DNAProfileResponse])
def list_dna_profiles(
    client_id: UUID | None = Query(None, description="Filter by brand"),
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> list[DNAProfileResponse]:
    profiles = DNAProfileService(db).list_profiles(principal, client_id=client_id)
    return [DNAProfileResponse.model_validate(p) for p in profiles]


@router.get("/{profile_id}", response_model=DNAProfileResponse)
def get_dna_profile(
    profile_id: UUID,
    principal: Principal = Depends(get_current_principal),
    db: Session = Depends(get_db),
) -> DNAProfileResponse:
    profile = DNAProfileService(db).get_profile(principal, profile_id)
    return DNAProfileResponse.model_validate(profile)


@router.post("", response_model=DNAProfileResponse, status_code=status.HTTP_201_CREATED)
def create_dna_profile(
    data: DNAProfileCreate,
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> DNAProfileResponse:
    """Create a DNA brief for a brand - Admin only."""
    return DNAProfileResponse.model_validate(DNAProfileService(db).create_profile(data))


@router.put("/{profile_id}", response_model=DNAProfileResponse)
def update_dna_profile(
    profile_id: UUID,
    data: DNAProfileUpdate,
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> DNAProfileResponse:
    """Update a DNA brief - Admin only."""
    return DNAProfileResponse.model_validate(DNAProfileService(db).update_profile(profile_id, data))


@router.delete("/{profile_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_dna_profile(
    profile_id: UUID,
    _admin: Principal = Depends(require_admin),
    db: Session = Depends(get_db),
) -> None:
    """Delete a DNA brief - Admin only."""
    DNAProfileService(db).delete_profile(profile_id)
