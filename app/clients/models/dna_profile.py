import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.datetime_utils import utcnow
from app.db.session import Base


class ContentDNAProfile(Base):
    """Strategic brief for one campaign of a brand.

    Attributes:
        name: Campaign name
        voice: Tone of communication
        goal: Campaign objective
        theme: Central message
        primary_cta: Call to action every variation should lead to
        feedback_examples: Historical successful copy, ``[{"platform", "content"}]``
    """

    __tablename__ = "content_dna_profiles"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    client_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"), index=True
    )
    name: Mapped[str] = mapped_column(String(255))

    voice: Mapped[str] = mapped_column(Text, default="")
    goal: Mapped[str] = mapped_column(Text, default="")
    product: Mapped[str] = mapped_column(Text, default="")
    target_audience: Mapped[str] = mapped_column(Text, default="")
    theme: Mapped[str] = mapped_column(Text, default="")
    keywords: Mapped[str] = mapped_column(Text, default="")
    brand_voice_guidelines: Mapped[str] = mapped_column(Text, default="")
    value_proposition: Mapped[str] = mapped_column(Text, default="")
    primary_cta: Mapped[str] = mapped_column(Text, default="")

    feedback_examples: Mapped[list[dict[str, Any]]] = mapped_column(JSON, default=list)

    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)

    client: Mapped["Client"] = relationship("Client", back_populates="dna_profiles")

    def __repr__(self) -> str:
        return f"<ContentDNAProfile(id={self.id}, name={self.name}, client_id={self.client_id})>"


from app.clients.models.client import Client  # noqa: E402
