import json

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASE_URL: str

    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_HOURS: int = 24

    # Internal staff access: domain-based promotion to ADMIN and master password
    INTERNAL_ACCESS_POLICY_ENABLED: bool = True
    INTERNAL_DOMAINS: str = '["lobueno.co","grupolobueno.com"]'
    MASTER_PASSWORD: str = ""

    BACKEND_CORS_ORIGINS: str = (
        '["http://localhost:5173","http://localhost:3000","http://localhost:3001"]'
    )

    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "My Voice API"
    DEBUG: bool = False

    RATE_LIMIT_ENABLED: bool = True
    LOGIN_RATE_LIMIT: str = "5/minute"

    ANTHROPIC_API_KEY: str = ""
    ANTHROPIC_MODEL: str = "claude-sonnet-4-20250514"
    ANTHROPIC_MAX_TOKENS: int = 8192
    ANTHROPIC_TEMPERATURE: float = 0.7

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        if isinstance(self.BACKEND_CORS_ORIGINS, str):
            try:
                parsed: list[str] = json.loads(self.BACKEND_CORS_ORIGINS)
                return parsed
            except json.JSONDecodeError:
                return ["http://localhost:5173", "http://localhost:3000"]
        return self.BACKEND_CORS_ORIGINS

    @property
    def internal_domains(self) -> list[str]:
        try:
            parsed: list[str] = json.loads(self.INTERNAL_DOMAINS)
        except json.JSONDecodeError:
            parsed = [d for d in self.INTERNAL_DOMAINS.split(",")]
        return [d.strip().lower().lstrip("@") for d in parsed if d.strip()]


settings = Settings()
