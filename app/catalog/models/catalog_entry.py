import uuid
from datetime import datetime
from enum import StrEnum

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.core.datetime_utils import utcnow
from app.db.session import Base


class CatalogKind(StrEnum):
    VOICE = "voice"
    GOAL = "goal"


DEFAULT_CATALOG: dict[CatalogKind, list[str]] = {
    CatalogKind.VOICE: [
        "Cercana y Amigable",
        "Profesional y Experta",
        "Inspiradora y Aspiracional",
        "Directa y Enérgica",
        "Divertida y Juvenil",
    ],
    CatalogKind.GOAL: [
        "Conversión (Venta)",
        "Fidelización (Retención)",
        "Información (Noticias)",
        "Brand Awareness (Marca)",
    ],
}


class CatalogEntry(Base):
    """Selectable option (tone of voice or campaign goal) offered when writing a DNA brief."""

    __tablename__ = "catalog_entries"
    __table_args__ = (UniqueConstraint("kind", "name", name="uq_catalog_entries_kind_name"),)

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    kind: Mapped[str] = mapped_column(String(20), index=True)
    name: Mapped[str] = mapped_column(String(255))
    sort_order: Mapped[int] = mapped_column(default=0)
    created_at: Mapped[datetime] = mapped_column(default=utcnow)

    def __repr__(self) -> str:
        return f"<CatalogEntry(kind={self.kind}, name={self.name})>"
