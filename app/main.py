from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.ai.routes import generate
from app.auth.routes import auth, users
from app.catalog.routes import catalog
from app.clients.routes import clients, dna_profiles
from app.core.config import settings
from app.core.exceptions import register_exception_handlers
from app.core.log_config import RequestLoggingMiddleware, setup_logging
from app.core.rate_limit import limiter
from app.db.session import SessionLocal
from app.library.routes import projects, saved

setup_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "app_starting",
        internal_access_policy=settings.INTERNAL_ACCESS_POLICY_ENABLED,
        llm_configured=bool(settings.ANTHROPIC_API_KEY),
    )
    yield
    logger.info("app_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    lifespan=lifespan,
    description="Brand-voice copy generation backend with JWT authentication",
    version="1.0.0",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]
register_exception_handlers(app, debug=settings.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

app.include_router(auth.router, prefix=f"{settings.API_PREFIX}/auth", tags=["authentication"])
app.include_router(users.router, prefix=f"{settings.API_PREFIX}/users", tags=["users"])

app.include_router(clients.router, prefix=f"{settings.API_PREFIX}/clients", tags=["clients"])
app.include_router(
    dna_profiles.router, prefix=f"{settings.API_PREFIX}/dna-profiles", tags=["dna-profiles"]
)

app.include_router(generate.router, prefix=settings.API_PREFIX, tags=["generation"])

app.include_router(saved.router, prefix=f"{settings.API_PREFIX}/saved", tags=["library"])
app.include_router(projects.router, prefix=f"{settings.API_PREFIX}/projects", tags=["projects"])

app.include_router(catalog.router, prefix=f"{settings.API_PREFIX}/catalog", tags=["catalog"])


@app.get("/")
async def root() -> dict[str, str]:
    return {"message": "My Voice API", "version": "1.0.0", "status": "running"}


@app.get("/health")
def health_check() -> dict[str, str]:
    db_status = "unknown"
    try:
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
            db_status = "healthy"
        finally:
            db.close()
    except SQLAlchemyError:
        db_status = "unhealthy"

    overall = "healthy" if db_status == "healthy" else "degraded"
    return {"status": overall, "database": db_status}
