"""AI copy generation endpoint."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.ai.schemas.generation import GenerateRequest, GenerationResponse
from app.ai.services.copy_generator import generate_copy
from app.auth.dependencies import require_admin
from app.auth.policy import Principal
from app.db.session import get_db

router = APIRouter()


@router.post("/generate", response_model=GenerationResponse)
def generate(
    request: GenerateRequest,
    db: Session = Depends(get_db),
    _admin: Principal = Depends(require_admin),
) -> GenerationResponse:
    """Generate copy variations for a DNA profile (admin only).

    Runs synchronously in the threadpool; the provider call may take seconds.
    """
    return generate_copy(db, request)
