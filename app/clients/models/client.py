import uuid
from datetime import datetime

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.datetime_utils import utcnow
from app.db.session import Base


class Client(Base):
    """A brand managed by the agency."""

    __tablename__ = "clients"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    name: Mapped[str] = mapped_column(String(255))
    industry: Mapped[str] = mapped_column(String(255))
    # Opaque image reference (URL or data URI)
    logo_url: Mapped[str | None] = mapped_column(Text, default=None)

    # Brand-wide defaults, copied into new DNA profiles by the UI
    brand_voice_guidelines: Mapped[str] = mapped_column(Text, default="")
    value_proposition: Mapped[str] = mapped_column(Text, default="")

    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)

    # Relationships
    dna_profiles: Mapped[list["ContentDNAProfile"]] = relationship(
        "ContentDNAProfile",
        back_populates="client",
        cascade="all, delete-orphan",
        order_by="ContentDNAProfile.created_at",
    )
    saved_variations: Mapped[list["SavedVariation"]] = relationship(
        "SavedVariation", back_populates="client", cascade="all, delete-orphan"
    )
    users: Mapped[list["User"]] = relationship("User", back_populates="client")

    def __repr__(self) -> str:
        return f"<Client(id={self.id}, name={self.name})>"


# Import for type hints (avoid circular imports)
from app.auth.models.user import User  # noqa: E402
from app.clients.models.dna_profile import ContentDNAProfile  # noqa: E402
from app.library.models.saved_variation import SavedVariation  # noqa: E402
