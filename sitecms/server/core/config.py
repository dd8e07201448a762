"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading. The backend, the proxy and the scripts all read
the same ``settings`` instance.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

INSECURE_DEFAULT_SECRET_KEY = "your-secret-key-change-in-production"

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class AuthConfig(BaseModel):
    """Token signing and admin bootstrap configuration."""

    secret_key: str = Field(
        default=INSECURE_DEFAULT_SECRET_KEY,
        alias="SECRET_KEY",
        description="Secret used to sign JWT access tokens",
    )
    algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM", description="JWT signing algorithm")
    access_token_expire_minutes: int = Field(
        default=1440,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
        description="Lifetime of issued access tokens in minutes (default 24 hours)",
    )
    admin_username: str = Field(default="admin", alias="ADMIN_USERNAME", description="Bootstrap admin username")
    admin_password: str = Field(default="admin123", alias="ADMIN_PASSWORD", description="Bootstrap admin password")
    seed_admin_on_startup: bool = Field(
        default=True,
        alias="SEED_ADMIN_ON_STARTUP",
        description="Create the bootstrap admin user at startup when it does not exist",
    )
    fallback_enabled: bool = Field(
        default=False,
        alias="AUTH_FALLBACK_ENABLED",
        description="Accept the bootstrap admin credentials while the user table is unreachable",
    )

    model_config = {"populate_by_name": True}

    @property
    def uses_insecure_secret(self) -> bool:
        return self.secret_key == INSECURE_DEFAULT_SECRET_KEY


class ProxyConfig(BaseModel):
    """Frontend-to-backend proxy configuration."""

    backend_api_url: str = Field(
        default="http://localhost:3001",
        alias="BACKEND_API_URL",
        description="Base URL of the backend API the proxy forwards to",
    )
    timeout_seconds: float = Field(
        default=60.0,
        alias="BACKEND_TIMEOUT_SECONDS",
        description="Timeout for a proxied backend call in seconds (0 disables the timeout)",
    )
    port: int = Field(default=3000, alias="PROXY_PORT", description="Port the proxy app binds to")

    model_config = {"populate_by_name": True}

    @property
    def timeout(self) -> Optional[float]:
        return self.timeout_seconds if self.timeout_seconds > 0 else None


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
    # Server Configuration
    # =====================================================================
    server_host: str = Field(default="0.0.0.0", description="Backend host address to bind to", alias="HOST")
    server_port: int = Field(default=3001, description="Backend port number", alias="PORT")
    environment: str = Field(
        default="development",
        description="Deployment environment (development, production, test)",
        alias="ENVIRONMENT",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="SITECMS_LOG_LEVEL",
    )
    log_format: str = Field(default="detailed", description="Log format (simple, detailed, json)", alias="LOG_FORMAT")
    log_file_dir: str = Field(default="logs", description="Directory for the log file", alias="LOG_FILE_DIR")
    enable_file_logging: bool = Field(
        default=False, description="Write logs to LOG_FILE_DIR/sitecms.log", alias="ENABLE_FILE_LOGGING"
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_url: str = Field(
        default="sqlite+aiosqlite:///./sitecms.db",
        description="Async database connection URL (SQLite via aiosqlite or PostgreSQL via asyncpg)",
        alias="DATABASE_URL",
    )

    # =====================================================================
    # Uploads and Integrations
    # =====================================================================
    upload_dir: str = Field(default="uploads", description="Root directory for uploaded files", alias="UPLOAD_DIR")
    baidu_map_ak: Optional[str] = Field(
        default=None,
        description="Fallback Baidu Map API key when the site settings do not define one",
        alias="BAIDU_MAP_AK",
    )

    # =====================================================================
    # Flat fields backing the grouped configurations
    # =====================================================================
    secret_key: str = Field(default=INSECURE_DEFAULT_SECRET_KEY, alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(default=1440, alias="ACCESS_TOKEN_EXPIRE_MINUTES")
    admin_username: str = Field(default="admin", alias="ADMIN_USERNAME")
    admin_password: str = Field(default="admin123", alias="ADMIN_PASSWORD")
    seed_admin_on_startup: bool = Field(default=True, alias="SEED_ADMIN_ON_STARTUP")
    auth_fallback_enabled: bool = Field(default=False, alias="AUTH_FALLBACK_ENABLED")

    backend_api_url: str = Field(default="http://localhost:3001", alias="BACKEND_API_URL")
    backend_timeout_seconds: float = Field(default=60.0, alias="BACKEND_TIMEOUT_SECONDS")
    proxy_port: int = Field(default=3000, alias="PROXY_PORT")

    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default=["*"], alias="CORS_ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def auth(self) -> AuthConfig:
        """Get auth configuration from environment variables."""
        return AuthConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def proxy(self) -> ProxyConfig:
        """Get proxy configuration from environment variables."""
        return ProxyConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def cors(self) -> CORSConfig:
        """Get CORS configuration from environment variables."""
        return CORSConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
