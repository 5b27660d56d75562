import uuid
from datetime import datetime

from sqlalchemy import JSON, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.datetime_utils import utcnow
from app.db.session import Base


class SavedVariation(Base):
    """A generated variation kept in the content library.

    ``char_count`` is whatever the caller reported when saving or editing; it is
    never recomputed from ``content``.
    """

    __tablename__ = "saved_variations"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    client_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("clients.id", ondelete="CASCADE"), index=True
    )
    project_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("projects.id", ondelete="SET NULL"), default=None, index=True
    )

    platform: Mapped[str] = mapped_column(String(32), index=True)
    type: Mapped[str] = mapped_column(String(32))
    content: Mapped[str] = mapped_column(Text)
    char_count: Mapped[int] = mapped_column(default=0)
    segments: Mapped[dict[str, str]] = mapped_column(JSON, default=dict)
    tags: Mapped[list[str]] = mapped_column(JSON, default=list)
    is_approved: Mapped[bool] = mapped_column(default=False, index=True)

    saved_at: Mapped[datetime] = mapped_column(default=utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)

    client: Mapped["Client"] = relationship("Client", back_populates="saved_variations")
    project: Mapped["Project | None"] = relationship("Project", back_populates="saved_variations")

    def __repr__(self) -> str:
        return (
            f"<SavedVariation(id={self.id}, platform={self.platform}, "
            f"approved={self.is_approved})>"
        )


from app.clients.models.client import Client  # noqa: E402
from app.library.models.project import Project  # noqa: E402
