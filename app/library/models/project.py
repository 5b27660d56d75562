import uuid
from datetime import datetime

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.datetime_utils import utcnow
from app.db.session import Base


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    name: Mapped[str] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(default=utcnow)

    # Deleting a project detaches its variations instead of removing them
    saved_variations: Mapped[list["SavedVariation"]] = relationship(
        "SavedVariation", back_populates="project"
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, name={self.name})>"


from app.library.models.saved_variation import SavedVariation  # noqa: E402
