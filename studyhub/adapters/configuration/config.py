# studyhub/adapters/configuration/config.py

"""
Application Settings Configuration
"""

from pathlib import Path
from dotenv import load_dotenv

# .env lives at the project root
env_path = Path(__file__).parent.parent.parent.parent / ".env"
load_dotenv(env_path)

from pydantic import SecretStr, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from typing import Annotated, Optional, List, Union
from logging import getLevelName


class Settings(BaseSettings):
    """
    Application Settings for environment configuration, database, auth, logging, and security.
    """
    model_config = SettingsConfigDict(
        env_file=str(env_path),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # General Project Info
    PROJECT_NAME: str = Field(default="StudyHub Auth", description="Name of the project")
    VERSION: str = Field(default="1.0.0", description="Application version")
    ENVIRONMENT: str = Field(default="development", description="Environment: development, production, testing")
    DEBUG: bool = Field(default=False, description="Enable debug mode (detailed error logs)")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")

    # Cookies carrying the token pair
    ACCESS_TOKEN_COOKIE_NAME: str = Field(default="access_token", description="Cookie holding the access token")
    REFRESH_TOKEN_COOKIE_NAME: str = Field(default="refresh_token", description="Cookie holding the refresh token")
    REFRESH_TOKEN_COOKIE_PATH: str = Field(default="/api/v1/auth", description="Path scope of the refresh cookie")
    COOKIE_DOMAIN: Optional[str] = Field(default=None, description="Domain for cookies (e.g. example.com)")
    COOKIE_PATH: str = Field(default="/", description="Path for cookies")
    COOKIE_SAMESITE: str = Field(default="strict", description="SameSite policy for cookies: lax, strict, or none")

    # Database
    DB_DRIVER: str = Field(default="asyncpg", description="Database driver (asyncpg)")
    POSTGRES_USER: str = Field(default="postgres")
    POSTGRES_PASSWORD: str = Field(default="postgres")
    POSTGRES_DB: str = Field(default="studyhub")
    POSTGRES_HOST: str = Field(default="localhost")
    POSTGRES_PORT: int = Field(default=5432)
    DATABASE_URL: Optional[str] = Field(default=None, description="Database connection URL")
    DB_ECHO: bool = Field(default=False, description="Echo SQL statements")
    AUTO_CREATE_TABLES: bool = Field(default=True, description="Create missing tables on startup")

    # Auth Settings
    ACCESS_TOKEN_SECRET: SecretStr = Field(..., description="Signing secret for access tokens")
    REFRESH_TOKEN_SECRET: SecretStr = Field(..., description="Signing secret for refresh tokens")
    ALGORITHM: str = Field(default="HS256", description="JWT algorithm")
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=15, description="Access token expiration time (minutes)")
    REFRESH_TOKEN_EXPIRE_DAYS: int = Field(default=7, description="Refresh token expiration time (days)")
    TOKEN_CLEANUP_INTERVAL_MINUTES: int = Field(
        default=60, description="Interval of the expired token sweep (0 disables it)"
    )

    # Password hashing (scrypt)
    SCRYPT_N: int = Field(default=16384, description="scrypt CPU/memory cost")
    SCRYPT_R: int = Field(default=8, description="scrypt block size")
    SCRYPT_P: int = Field(default=1, description="scrypt parallelization")

    # Rate limiting
    RATE_LIMIT_ENABLED: bool = Field(default=True, description="Enable rate limiting (slowapi)")
    RATE_LIMIT_WINDOW_SECONDS: int = Field(default=15 * 60, description="Rate limit window (seconds)")
    RATE_LIMIT_AUTH_REQUESTS: int = Field(default=5, description="Login/register attempts per window")
    RATE_LIMIT_GENERAL_REQUESTS: int = Field(default=100, description="API requests per window")
    RATE_LIMIT_STORAGE_URI: str = Field(default="memory://", description="slowapi storage (memory:// or redis://...)")
    FORWARDED_ALLOW_IPS: str = Field(
        default="127.0.0.1", description="Proxies trusted for X-Forwarded-For (uvicorn forwarded_allow_ips)"
    )

    # Security (CORS)
    CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default=["http://localhost:5000", "http://127.0.0.1:5000"], description="Allowed CORS origins"
    )

    # API Documentation
    SCHEMA_VISIBILITY: bool = Field(default=True, description="Show API docs (Swagger UI and Redoc)")

    def model_post_init(self, __context) -> None:
        """Build DATABASE_URL from the POSTGRES_* values when it was not given."""
        if not self.DATABASE_URL:
            self.DATABASE_URL = (
                f"postgresql+{self.DB_DRIVER}://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
            )
        elif self.DATABASE_URL.startswith("postgresql://"):
            self.DATABASE_URL = self.DATABASE_URL.replace("postgresql://", f"postgresql+{self.DB_DRIVER}://", 1)

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @field_validator("DEBUG", "SCHEMA_VISIBILITY", "DB_ECHO", "AUTO_CREATE_TABLES", "RATE_LIMIT_ENABLED",
                     mode="before")
    def parse_boolean(cls, v: Union[str, bool]) -> bool:
        """Convert string boolean values to proper boolean."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            return v.lower() in ("true", "1", "yes", "y", "on")
        return bool(v)

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """
        Assemble CORS origins if provided as comma-separated string.
        """
        if isinstance(v, str) and not v.startswith("["):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, list):
            return v
        raise ValueError(f"Invalid CORS_ORIGINS format: {v!r}")

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """
        Validate that the log level is a valid level name.
        """
        lvl = v.upper()
        if getLevelName(lvl) == "Level %s" % lvl:
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return lvl

    @field_validator("COOKIE_SAMESITE", mode="before")
    def validate_cookie_samesite(cls, v: str) -> str:
        """Validate the cookie SameSite policy."""
        if v.lower() not in ["lax", "strict", "none"]:
            raise ValueError(f"COOKIE_SAMESITE must be 'lax', 'strict' or 'none', got: {v}")
        return v.lower()

    @field_validator("ACCESS_TOKEN_EXPIRE_MINUTES", "REFRESH_TOKEN_EXPIRE_DAYS", "SCRYPT_N", "SCRYPT_R",
                     "SCRYPT_P", "RATE_LIMIT_WINDOW_SECONDS")
    def validate_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"Value must be positive, got: {v}")
        return v

    @model_validator(mode="after")
    def validate_distinct_secrets(self) -> "Settings":
        """Access and refresh tokens must be signed with independent secrets."""
        access = self.ACCESS_TOKEN_SECRET.get_secret_value()
        refresh = self.REFRESH_TOKEN_SECRET.get_secret_value()
        if not access or not refresh:
            raise ValueError("ACCESS_TOKEN_SECRET and REFRESH_TOKEN_SECRET must not be empty")
        if access == refresh:
            raise ValueError("ACCESS_TOKEN_SECRET and REFRESH_TOKEN_SECRET must be different")
        return self


# Create settings instance
settings = Settings()
