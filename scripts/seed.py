"""Create the tables and seed the super admin, the default brands and the catalog.

Safe to run more than once: existing rows are left untouched.
"""

import os
import secrets
import string
import sys
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.exc import SQLAlchemyError  # noqa: E402
from sqlalchemy.orm import Session  # noqa: E402

from app.auth.models.user import User  # noqa: E402
from app.catalog.models.catalog_entry import DEFAULT_CATALOG, CatalogEntry  # noqa: E402
from app.clients.models.client import Client  # noqa: E402
from app.core.security import get_password_hash  # noqa: E402
from app.db import base  # noqa: E402, F401
from app.db.session import Base, SessionLocal, engine  # noqa: E402

DEFAULT_BRANDS = [
    {"name": "Terpel", "industry": "Energía y Combustibles"},
    {"name": "Huggies", "industry": "Cuidado Infantil"},
    {"name": "Volkswagen", "industry": "Automotriz"},
    {"name": "Colmédica", "industry": "Salud"},
]


def generate_secure_password(length: int = 24) -> str:
    alphabet = string.ascii_letters + string.digits + "!@#$%&*"
    return "".join(secrets.choice(alphabet) for _ in range(length))


def seed_admin_user(db: Session) -> None:
    admin_email = os.environ.get("ADMIN_EMAIL", "admin@lobueno.co").lower()
    admin_password = os.environ.get("ADMIN_PASSWORD") or generate_secure_password()

    if db.query(User).filter(User.email == admin_email).first():
        print(f"✓ Admin user already exists: {admin_email}")
        return

    db.add(
        User(
            email=admin_email,
            name=os.environ.get("ADMIN_NAME", "Super Admin Lobueno"),
            hashed_password=get_password_hash(admin_password),
            role="ADMIN",
        )
    )
    db.commit()

    print("✓ Admin user created")
    print(f"  Email:    {admin_email}")
    if not os.environ.get("ADMIN_PASSWORD"):
        print(f"  Password: {admin_password}")
        print("  Save this password now, it won't be shown again.")


def seed_brands(db: Session) -> None:
    for brand in DEFAULT_BRANDS:
        if db.query(Client).filter(Client.name == brand["name"]).first():
            print(f"  Brand already exists: {brand['name']}")
            continue
        db.add(Client(**brand))
        db.commit()
        print(f"✓ Brand created: {brand['name']}")


def seed_catalog(db: Session) -> None:
    if db.query(CatalogEntry).first():
        print("  Catalog already populated")
        return

    for kind, names in DEFAULT_CATALOG.items():
        for i, name in enumerate(names):
            db.add(CatalogEntry(kind=kind.value, name=name, sort_order=i))
    db.commit()
    print("✓ Default voices and goals created")


if __name__ == "__main__":
    print("=" * 80)
    print("Seeding database...")
    print("  Tip: ADMIN_EMAIL, ADMIN_PASSWORD and ADMIN_NAME control the admin account.")
    print("=" * 80)

    Base.metadata.create_all(engine)

    session = SessionLocal()
    try:
        seed_admin_user(session)
        seed_brands(session)
        seed_catalog(session)
    except SQLAlchemyError as e:
        session.rollback()
        print(f"✗ Seeding failed: {e}")
        sys.exit(1)
    finally:
        session.close()

    print("=" * 80)
    print("Seeding complete!")
    print("=" * 80)
