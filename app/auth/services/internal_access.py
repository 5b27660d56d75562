"""Internal-staff access policy.

Two operational shortcuts live here and nowhere else:

* accounts on an internal email domain are promoted to ADMIN when they log in
  or register;
* the configured master password authenticates any internal-domain account,
  creating it on first use.

Both are controlled by ``INTERNAL_ACCESS_POLICY_ENABLED``. The master password
is a shared credential; disabling it only requires leaving ``MASTER_PASSWORD``
empty.
"""

from dataclasses import dataclass

import structlog

from app.core.config import settings
from app.core.security import constant_time_equals

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class InternalAccessDecision:
    is_internal: bool = False
    master_password_used: bool = False


def email_domain(email: str) -> str:
    return email.rsplit("@", 1)[-1].strip().lower()


def evaluate_internal_access(email: str, password: str | None = None) -> InternalAccessDecision:
    """Decide what the internal-domain policy grants for ``email``.

    Args:
        email: Address being authenticated or registered.
        password: Password supplied at login; None at registration.

    Returns:
        InternalAccessDecision. ``is_internal`` means the account must hold the
        ADMIN role; ``master_password_used`` means the password matched the
        master password and replaces the stored-hash check.
    """
    if not settings.INTERNAL_ACCESS_POLICY_ENABLED:
        return InternalAccessDecision()

    if email_domain(email) not in settings.internal_domains:
        return InternalAccessDecision()

    master_ok = bool(
        password is not None
        and settings.MASTER_PASSWORD
        and constant_time_equals(password, settings.MASTER_PASSWORD)
    )
    if master_ok:
        logger.warning("master_password_login", email=email)

    return InternalAccessDecision(is_internal=True, master_password_used=master_ok)
