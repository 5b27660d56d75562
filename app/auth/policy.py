"""Roles and the single authorization check consulted by every handler."""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from app.core.exceptions import ForbiddenError


class Role(StrEnum):
    ADMIN = "ADMIN"
    CLIENT = "CLIENT"


@dataclass(frozen=True)
class Principal:
    """Authenticated identity of the current request."""

    user_id: uuid.UUID
    role: Role
    client_id: uuid.UUID | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


ADMIN_ONLY: frozenset[Role] = frozenset({Role.ADMIN})
ANY_ROLE: frozenset[Role] = frozenset(Role)


def authorize(
    principal: Principal,
    roles: Iterable[Role] = ADMIN_ONLY,
    client_id: uuid.UUID | None = None,
) -> None:
    """Raise ForbiddenError unless ``principal`` may act on a resource.

    Args:
        principal: The authenticated caller.
        roles: Roles allowed to perform the operation.
        client_id: Brand owning the resource, if any. CLIENT principals may only
            touch resources of their own brand.
    """
    if principal.role not in set(roles):
        raise ForbiddenError("Acceso denegado: permiso insuficiente")

    if principal.role == Role.CLIENT:
        if principal.client_id is None:
            raise ForbiddenError("La cuenta no tiene una marca asociada")
        if client_id is not None and client_id != principal.client_id:
            raise ForbiddenError("No tienes permiso sobre esta marca")


def client_scope(principal: Principal) -> uuid.UUID | None:
    """Brand every query must be filtered on, or None for unrestricted (ADMIN) access."""
    if principal.role == Role.ADMIN:
        return None
    if principal.client_id is None:
        raise ForbiddenError("La cuenta no tiene una marca asociada")
    return principal.client_id
