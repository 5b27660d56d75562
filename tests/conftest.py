from pathlib import Path

from dotenv import load_dotenv

env_file = Path(__file__).parent.parent / ".env.test"
load_dotenv(env_file)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.core.security import create_access_token  # noqa: E402
from app.db import base  # noqa: E402, F401
from app.db.session import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from tests.utils.factories import (  # noqa: E402
    create_client_factory,
    create_dna_profile_factory,
    create_user_factory,
)


@pytest.fixture
def test_engine():
    """In-memory SQLite shared by every connection of a single test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(test_engine):
    session_factory = sessionmaker(bind=test_engine, autocommit=False, autoflush=False)
    session = session_factory()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
async def test_app(db_session):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def test_client(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as client:
        yield client


@pytest.fixture
def test_brand(db_session):
    return create_client_factory(db_session, name="Terpel", industry="Energía y Combustibles")


@pytest.fixture
def other_brand(db_session):
    return create_client_factory(db_session, name="Huggies", industry="Cuidado Infantil")


@pytest.fixture
def test_admin(db_session):
    return create_user_factory(
        db_session, email="admin@lobueno.co", password="adminpass123", role="ADMIN"
    )


@pytest.fixture
def test_client_user(db_session, test_brand):
    return create_user_factory(
        db_session,
        email="marketing@terpel.com",
        password="clientpass123",
        role="CLIENT",
        client_id=test_brand.id,
    )


@pytest.fixture
def test_profile(db_session, test_brand):
    return create_dna_profile_factory(db_session, client=test_brand)


def _token_for(user) -> str:
    return create_access_token(
        user_id=str(user.id),
        role=user.role,
        client_id=str(user.client_id) if user.client_id else None,
    )


@pytest.fixture
def test_admin_token(test_admin):
    return _token_for(test_admin)


@pytest.fixture
def test_client_token(test_client_user):
    return _token_for(test_client_user)


@pytest.fixture
def admin_headers(test_admin_token):
    return {"Authorization": f"Bearer {test_admin_token}"}


@pytest.fixture
def client_headers(test_client_token):
    return {"Authorization": f"Bearer {test_client_token}"}
