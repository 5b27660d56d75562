from app.catalog.models.catalog_entry import CatalogKind
from app.catalog.schemas.catalog_entry import (
    CatalogEntryCreate,
    CatalogEntryResponse,
    CatalogEntryUpdate,
    CatalogResponse,
)

__all__ = [
    "CatalogKind",
    "CatalogEntryCreate",
    "CatalogEntryResponse",
    "CatalogEntryUpdate",
    "CatalogResponse",
]
