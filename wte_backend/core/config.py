from pydantic_settings import BaseSettings, NoDecode
from pydantic import field_validator
from typing import List, Optional, Union
from typing_extensions import Annotated
import json

class Settings(BaseSettings):
    PROJECT_NAME: str = "WTE Waste Tracker API"
    API_V1_STR: str = "/api"

    # "development" exposes exception messages in 500 responses
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database - point at PostgreSQL in production via DATABASE_URL env var
    DATABASE_URL: str = "sqlite:///./wte.db"

    # CORS Configuration
    # BACKEND_CORS_ORIGINS=https://dashboard.example.org (single URL)
    # OR: BACKEND_CORS_ORIGINS=https://url1.com,https://url2.com (comma-separated)
    # OR: BACKEND_CORS_ORIGINS=["https://dashboard.example.org"] (JSON array)
    # NoDecode prevents pydantic-settings from JSON-parsing before our validator runs
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = [
        "http://localhost:5173",
        "http://localhost:4000",
    ]

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """Parse CORS origins from various formats: JSON array, comma-separated, or single URL."""
        if isinstance(v, list):
            return v
        if isinstance(v, str):
            if v.startswith("["):
                try:
                    parsed = json.loads(v)
                    if isinstance(parsed, list):
                        return parsed
                except json.JSONDecodeError:
                    pass
            if "," in v:
                return [url.strip() for url in v.split(",") if url.strip()]
            if v.strip():
                return [v.strip()]
        return []

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def expose_error_details(self) -> bool:
        return self.DEBUG or self.ENVIRONMENT.lower() == "development"

    # JWT Authentication - no default, the process must not start without a secret
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7

    # Password hashing work factor
    BCRYPT_ROUNDS: int = 10

    # Optional admin account created by the seeder
    SEED_ADMIN_EMAIL: Optional[str] = None
    SEED_ADMIN_PASSWORD: Optional[str] = None

    class Config:
        case_sensitive = True
        env_file = ".env"

settings = Settings()
