import os
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    port: int = 5000
    environment: str = "development"
    log_level: str = "INFO"

    postgres_user: str = os.getenv("POSTGRES_USER", "user")
    postgres_password: str = os.getenv("POSTGRES_PASSWORD", "password")
    postgres_db: str = os.getenv("POSTGRES_DB", "certification_platform")
    postgres_host: str = os.getenv("POSTGRES_HOST", "localhost")
    postgres_port: int = 5432

    # Full URL wins over the POSTGRES_* parts when set
    database_url_override: Optional[str] = os.getenv("DATABASE_URL")
    db_pool_size: int = 10
    db_max_overflow: int = 20

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"

    # Groq exposes an OpenAI-compatible chat completions API
    groq_api: Optional[str] = ""
    completion_base_url: str = "https://api.groq.com/openai/v1"
    completion_model: str = "llama-3.3-70b-versatile"

    cors_origins_str: str = "*"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins_str.split(",")]

    slow_request_threshold: float = 1.0

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
