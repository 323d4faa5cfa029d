"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class PostgreSQLConfig(BaseModel):
    """PostgreSQL database configuration."""

    db: str = Field(default="unitracker", alias="POSTGRES_DB", description="PostgreSQL database name")
    user: str = Field(default="unitracker", alias="POSTGRES_USER", description="PostgreSQL database user")
    password: str = Field(default="changeme", alias="POSTGRES_PASSWORD", description="PostgreSQL database password")
    host: str = Field(default="localhost", alias="POSTGRES_HOST", description="PostgreSQL database host address")
    port: int = Field(default=5432, alias="POSTGRES_PORT", description="PostgreSQL database port number")

    model_config = {"populate_by_name": True}

    @property
    def url(self) -> str:
        """Async connection URL assembled from the individual parts."""
        return f"postgresql+asyncpg://{self.user}:{self.password}@{self.host}:{self.port}/{self.db}"


class CORSConfig(BaseModel):
    """CORS configuration."""

    origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS", description="Allowed CORS origins (use * for all)")
    allow_credentials: bool = Field(
        default=True, alias="CORS_ALLOW_CREDENTIALS", description="Allow credentials in CORS requests"
    )
    allow_methods: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_METHODS", description="Allowed HTTP methods (use * for all)"
    )
    allow_headers: list[str] = Field(
        default=["*"], alias="CORS_ALLOW_HEADERS", description="Allowed HTTP headers (use * for all)"
    )

    model_config = {"populate_by_name": True}


class DemoUserConfig(BaseModel):
    """Identity used for every request while authentication is stubbed out."""

    id: str = Field(default="demo-user", alias="UNITRACKER_DEMO_USER_ID", description="Acting user ID")
    email: str = Field(
        default="demo@unitracker.app", alias="UNITRACKER_DEMO_USER_EMAIL", description="Acting user email"
    )
    first_name: str = Field(default="Demo", alias="UNITRACKER_DEMO_USER_FIRST_NAME")
    last_name: str = Field(default="User", alias="UNITRACKER_DEMO_USER_LAST_NAME")

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # UniTracker Server Configuration
    # =====================================================================
    server_host: str = Field(
        default="0.0.0.0",
        description="UniTracker server host address to bind to",
        alias="UNITRACKER_SERVER_HOST",
    )
    server_port: int = Field(
        default=5000,
        description="UniTracker server port number",
        alias="UNITRACKER_SERVER_PORT",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="UNITRACKER_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="UNITRACKER_LOG_FORMAT",
    )
    log_to_file: bool = Field(
        default=False,
        description="Also write logs to <log_file_dir>/unitracker.log",
        alias="UNITRACKER_LOG_TO_FILE",
    )
    log_file_dir: str = Field(default="logs", alias="UNITRACKER_LOG_FILE_DIR")
    timezone: str = Field(
        default="UTC",
        description="IANA timezone used to decide where a day starts for stats",
        alias="UNITRACKER_TIMEZONE",
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="",
        description="Async connection URL for application database; assembled from POSTGRES_* when empty",
        alias="DATABASE_URL",
    )
    database_auto_create: bool = Field(
        default=True,
        description="Create missing tables on startup (development). Disable when Alembic owns the schema.",
        alias="DATABASE_AUTO_CREATE",
    )

    # =====================================================================
    # Flat fields backing the grouped configurations
    # =====================================================================
    postgres_db: str = Field(default="unitracker", alias="POSTGRES_DB")
    postgres_user: str = Field(default="unitracker", alias="POSTGRES_USER")
    postgres_password: str = Field(default="changeme", alias="POSTGRES_PASSWORD")
    postgres_host: str = Field(default="localhost", alias="POSTGRES_HOST")
    postgres_port: int = Field(default=5432, alias="POSTGRES_PORT")

    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    demo_user_id: str = Field(default="demo-user", alias="UNITRACKER_DEMO_USER_ID")
    demo_user_email: str = Field(default="demo@unitracker.app", alias="UNITRACKER_DEMO_USER_EMAIL")
    demo_user_first_name: str = Field(default="Demo", alias="UNITRACKER_DEMO_USER_FIRST_NAME")
    demo_user_last_name: str = Field(default="User", alias="UNITRACKER_DEMO_USER_LAST_NAME")

    # =====================================================================
    # Validators
    # =====================================================================

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown IANA timezone: {value!r}") from e
        return value

    @model_validator(mode="after")
    def _default_database_url(self) -> "Settings":
        if not self.database_url:
            self.database_url = self.postgres.url
        return self

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def postgres(self) -> PostgreSQLConfig:
        """Get PostgreSQL configuration from environment variables."""
        return PostgreSQLConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def demo_user(self) -> DemoUserConfig:
        """Get the stubbed-auth identity from environment variables."""
        return DemoUserConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
