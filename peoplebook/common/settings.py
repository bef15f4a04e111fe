# peoplebook/common/settings.py
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from peoplebook.common.strings.splitters import csv_to_list


def _to_bool(v: str | bool | int | None, default: bool = False) -> bool:
    if isinstance(v, bool):
        return v
    if v is None:
        return default
    s = str(v).strip().lower()
    return s in {"1", "true", "yes", "y", "on"}


class APIConfig(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)

    @field_validator("cors_allow_credentials", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)


class DBConfig(BaseModel):
    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    name: str = "peoplebook"
    user: str = "peoplebook"
    password: str = "peoplebook"
    # "public" means: no explicit schema on the metadata
    schema_name: str = "public"
    echo: bool = False
    pool_size: int = 10
    max_overflow: int = 20
    pool_pre_ping: bool = True
    pool_recycle: int = 1800

    @computed_field  # type: ignore[misc]
    @property
    def effective_url(self) -> str:
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.name}"


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "peoplebook"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    db: DBConfig = DBConfig()

    # Optional single URL (if set, it takes precedence over db.*)
    database_url_override: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "database_url_override"),
    )

    # Load data.sql into an empty person table when the API starts
    seed_on_startup: bool = False

    # -------- Alembic / migrations --------
    alembic_version_table_schema: str = "public"

    # -------- Testcontainers / CI toggles --------
    use_testcontainers: bool = False
    test_db_image: str = "postgres:15-alpine"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("seed_on_startup", "use_testcontainers", mode="before")
    @classmethod
    def _boolify(cls, v):
        return _to_bool(v)

    # ===== Convenience: DB URL & schema =====
    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        return self.database_url_override or self.db.effective_url

    @computed_field  # type: ignore[misc]
    @property
    def db_schema(self) -> Optional[str]:
        schema = (self.db.schema_name or "").strip()
        if not schema or schema.lower() == "public":
            return None
        return schema


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from peoplebook.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
