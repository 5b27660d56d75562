from uuid import UUID

import structlog
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.catalog.models.catalog_entry import DEFAULT_CATALOG, CatalogEntry, CatalogKind
from app.catalog.schemas import CatalogEntryCreate, CatalogEntryUpdate
from app.core.exceptions import ConflictError, NotFoundError

logger = structlog.get_logger(__name__)


class CatalogService:
    """Server-owned lists of tones of voice and campaign goals."""

    def __init__(self, db: Session):
        self.db = db

    def list_entries(self, kind: CatalogKind) -> list[CatalogEntry]:
        return list(
            self.db.query(CatalogEntry)
            .filter(CatalogEntry.kind == kind.value)
            .order_by(CatalogEntry.sort_order, CatalogEntry.name)
        )

    def _get(self, kind: CatalogKind, entry_id: UUID) -> CatalogEntry:
        entry: CatalogEntry | None = (
            self.db.query(CatalogEntry)
            .filter(CatalogEntry.id == entry_id, CatalogEntry.kind == kind.value)
            .first()
        )
        if entry is None:
            raise NotFoundError("Opción no encontrada", resource="catalog_entry")
        return entry

    def _ensure_unique(self, kind: CatalogKind, name: str, exclude_id: UUID | None = None) -> None:
        query = self.db.query(CatalogEntry).filter(
            CatalogEntry.kind == kind.value, CatalogEntry.name == name
        )
        if exclude_id is not None:
            query = query.filter(CatalogEntry.id != exclude_id)
        if query.first() is not None:
            raise ConflictError("La opción ya existe", resource="catalog_entry")

    def add_entry(self, kind: CatalogKind, data: CatalogEntryCreate) -> CatalogEntry:
        name = data.name.strip()
        self._ensure_unique(kind, name)

        sort_order = data.sort_order
        if sort_order is None:
            current_max = (
                self.db.query(func.max(CatalogEntry.sort_order))
                .filter(CatalogEntry.kind == kind.value)
                .scalar()
            )
            sort_order = (current_max + 1) if current_max is not None else 0

        entry = CatalogEntry(kind=kind.value, name=name, sort_order=sort_order)
        self.db.add(entry)
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def update_entry(
        self, kind: CatalogKind, entry_id: UUID, data: CatalogEntryUpdate
    ) -> CatalogEntry:
        entry = self._get(kind, entry_id)
        if data.name is not None:
            name = data.name.strip()
            self._ensure_unique(kind, name, exclude_id=entry_id)
            entry.name = name
        if data.sort_order is not None:
            entry.sort_order = data.sort_order
        self.db.commit()
        self.db.refresh(entry)
        return entry

    def delete_entry(self, kind: CatalogKind, entry_id: UUID) -> None:
        entry = self._get(kind, entry_id)
        self.db.delete(entry)
        self.db.commit()

    def reset_defaults(self) -> None:
        """Replace both lists with the built-in defaults."""
        self.db.query(CatalogEntry).delete()
        for kind, names in DEFAULT_CATALOG.items():
            for i, name in enumerate(names):
                self.db.add(CatalogEntry(kind=kind.value, name=name, sort_order=i))
        self.db.commit()
        logger.info("catalog_reset")
