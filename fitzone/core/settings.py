"""Typed configuration for the FitZone API.

Values come from the environment (or a local ``.env``). Secrets have no
defaults, so a misconfigured deployment fails at startup rather than
issuing tokens signed with a placeholder.
"""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env_name: str = Field(default="development", alias="ENV_NAME")

    # Store
    database_url: str = Field(default="sqlite:///./fitzone.db", alias="DATABASE_URL")

    # Session tokens and password hashing
    jwt_secret: str = Field(alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    bcrypt_rounds: int = Field(default=12, alias="BCRYPT_ROUNDS", ge=4, le=16)

    # Admin panel (sqladmin)
    session_secret_key: str = Field(alias="SESSION_SECRET_KEY")
    admin_username: str = Field(alias="ADMIN_USERNAME")
    admin_password: str = Field(alias="ADMIN_PASSWORD")

    # Comma-separated list, or "*" for any origin
    cors_origins: str = Field(default="*", alias="CORS_ORIGINS")

    @computed_field
    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
