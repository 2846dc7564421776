import json
from typing import Annotated, List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_SESSION_SECRET = "lawdesk-insecure-dev-secret"
DEFAULT_ADMIN_PASSWORD = "admin1983"


class Settings(BaseSettings):
    PROJECT_NAME: str = "Lawdesk"
    VERSION: str = "1.0.0"
    DESCRIPTION: str = "Practice management API for law firms: CRM, clients, cases, tasks and finances."
    API_PREFIX: str = "/api"

    # CORS
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = [
        "http://localhost:3000",  # React app development
        "http://localhost:5173",  # Vite dev server
        "http://localhost:8000",  # Backend development
    ]

    # Sessions
    SESSION_SECRET: str = DEFAULT_SESSION_SECRET
    SESSION_COOKIE_NAME: str = "lawdesk_session"
    SESSION_MAX_AGE_SECONDS: int = 86400  # 24 hours
    SESSION_SWEEP_INTERVAL_SECONDS: int = 86400
    SESSION_HTTPS_ONLY: bool = False

    # Seeded administrator
    FIRST_ADMIN_USERNAME: str = "admin"
    FIRST_ADMIN_PASSWORD: str = DEFAULT_ADMIN_PASSWORD
    FIRST_ADMIN_NAME: str = "Administrador"
    FIRST_ADMIN_EMAIL: Optional[str] = "admin@example.com"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None

    # Performance
    ENABLE_RESPONSE_COMPRESSION: bool = True

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str):
            return json.loads(v)
        elif isinstance(v, list):
            return v
        raise ValueError(v)

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @property
    def uses_default_session_secret(self) -> bool:
        return self.SESSION_SECRET == DEFAULT_SESSION_SECRET


settings = Settings()
