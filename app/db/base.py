"""
Database base module - imports all models so they register on ``Base.metadata``.

``Base.metadata.create_all`` (used by the seed script and the test suite) only
creates tables for models that have been imported.
"""

from app.auth.models.user import User
from app.catalog.models.catalog_entry import CatalogEntry
from app.clients.models.client import Client
from app.clients.models.dna_profile import ContentDNAProfile
from app.library.models.project import Project
from app.library.models.saved_variation import SavedVariation

__all__ = [
    "CatalogEntry",
    "Client",
    "ContentDNAProfile",
    "Project",
    "SavedVariation",
    "User",
]
