import secrets
import uuid

import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.auth.models.user import User
from app.auth.policy import Principal, Role
from app.auth.schemas.auth import RegisterRequest
from app.auth.services.internal_access import evaluate_internal_access
from app.clients.models.client import Client
from app.core import security
from app.core.exceptions import (
    ConflictError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from app.core.repository import BaseRepository

logger = structlog.get_logger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserRepository(BaseRepository[User]):
    not_found_message = "Usuario no encontrado"

    def __init__(self, db: Session):
        super().__init__(db, User)

    def find_by_email(self, email: str) -> User | None:
        result: User | None = (
            self.query()
            .options(joinedload(User.client))
            .filter(User.email == normalize_email(email))
            .first()
        )
        return result

    def list_all(self) -> list[User]:
        return list(self.query().options(joinedload(User.client)).order_by(User.created_at.desc()))


class AuthService:
    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)

    def issue_token(self, user: User) -> str:
        return security.create_access_token(
            user_id=str(user.id),
            role=user.role,
            client_id=str(user.client_id) if user.client_id else None,
        )

    def login(self, email: str, password: str) -> User:
        """Authenticate by stored password or, for internal domains, the master password."""
        email = normalize_email(email)
        user = self.users.find_by_email(email)
        decision = evaluate_internal_access(email, password)

        if decision.master_password_used:
            if user is None:
                user = self._create_internal_admin(email)
        elif user is None or not security.verify_password(password, user.hashed_password):
            raise UnauthorizedError("Credenciales inválidas")

        if decision.is_internal and user.role != Role.ADMIN:
            logger.info("internal_user_promoted", user_id=str(user.id), email=email)
            user = self.users.update(user, role=Role.ADMIN.value)

        logger.info("user_logged_in", user_id=str(user.id), role=user.role)
        return user

    def _create_internal_admin(self, email: str) -> User:
        # Unusable password: access ends once the master password is disabled or rotated
        try:
            user = self.users.create(
                email=email,
                name=email.split("@", 1)[0],
                hashed_password=security.get_password_hash(secrets.token_urlsafe(32)),
                role=Role.ADMIN.value,
            )
        except IntegrityError:
            # Concurrent first login for the same address already created it
            self.db.rollback()
            existing = self.users.find_by_email(email)
            if existing is None:
                raise
            return existing

        logger.warning("internal_admin_created", user_id=str(user.id), email=email)
        return user

    def register(self, data: RegisterRequest) -> User:
        email = normalize_email(data.email)
        if self.users.find_by_email(email) is not None:
            raise ConflictError("El usuario ya existe", resource="user")

        decision = evaluate_internal_access(email)
        role = Role.ADMIN if decision.is_internal else Role.CLIENT

        if role == Role.CLIENT and data.client_id is None:
            raise ValidationError(
                "Las cuentas de cliente deben estar asociadas a una marca", field="client_id"
            )
        if data.client_id is not None and self.db.get(Client, data.client_id) is None:
            raise NotFoundError("Marca no encontrada", resource="client")

        user = self.users.create(
            email=email,
            name=data.name,
            hashed_password=security.get_password_hash(data.password),
            role=role.value,
            client_id=data.client_id,
        )
        logger.info("user_registered", user_id=str(user.id), role=user.role)
        return user

    def list_users(self) -> list[User]:
        return self.users.list_all()

    def delete_user(self, principal: Principal, user_id: uuid.UUID) -> None:
        if principal.user_id == user_id:
            raise ValidationError("No puedes eliminar tu propia cuenta")
        user = self.users.get_or_404(user_id)
        self.users.delete(user)
        logger.info("user_deleted", user_id=str(user_id), deleted_by=str(principal.user_id))
