import os
from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in {"1", "true", "yes", "on"}


"""CORS allowlist (dev defaults include the dashboard dev server on 5173).
Read from env and split on commas; strip whitespace and any stray quotes per item.
"""
_cors_env = os.getenv(
    "CORS_ALLOW_ORIGINS",
    "http://127.0.0.1:5173,http://localhost:5173",
)
ALLOW_ORIGINS = [
    o.strip().strip('"').strip("'")
    for o in (_cors_env.split(",") if _cors_env else [])
    if o and o.strip().strip('"').strip("'")
]


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./data/financial.db"
    APP_ENV: str = os.getenv("APP_ENV", os.getenv("ENV", "dev"))  # dev | test | prod
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = _env_bool("JSON_LOGS", False)
    CORS_ALLOW_ORIGINS: str = _cors_env
    # Create the schema on startup; prod deployments run alembic instead
    CREATE_TABLES: bool = True
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 500
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
