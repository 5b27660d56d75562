import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.datetime_utils import utcnow
from app.db.session import Base


class User(Base):
    """
    User model for authentication and authorization.

    Attributes:
        id: Unique UUID primary key
        email: Unique email address (indexed for fast lookups)
        hashed_password: Argon2 hashed password (legacy bcrypt hashes also verify)
        name: User's display name
        role: "ADMIN" or "CLIENT"
        client_id: Brand a CLIENT user is bound to; required for that role
        created_at: Account creation timestamp
        updated_at: Last update timestamp
    """

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint(
            "role <> 'CLIENT' OR client_id IS NOT NULL",
            name="ck_users_client_role_requires_client",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255))
    name: Mapped[str] = mapped_column(String(255))

    role: Mapped[str] = mapped_column(String(20), default="CLIENT")
    client_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("clients.id", ondelete="RESTRICT"), default=None, index=True
    )

    created_at: Mapped[datetime] = mapped_column(default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(default=utcnow, onupdate=utcnow)

    client: Mapped["Client | None"] = relationship("Client", back_populates="users")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"


from app.clients.models.client import Client  # noqa: E402
