"""Application configuration using pydantic-settings."""

import warnings
from decimal import Decimal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_JWT_DEFAULT = "change-me-in-production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "FrontDesk"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # JWT Auth
    jwt_secret_key: str = _INSECURE_JWT_DEFAULT
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 12 * 60

    # Front-desk accounts (username "admin" and "staff")
    admin_password: str = "password"
    staff_password: str = "password"

    # Room inventory
    premium_rooms: list[int] = Field(default_factory=lambda: list(range(101, 111)))
    deluxe_rooms: list[int] = Field(default_factory=lambda: list(range(201, 205)))
    premium_rate: Decimal = Decimal("3000")
    deluxe_rate: Decimal = Decimal("2000")

    # Billing
    default_gst_rate: Decimal = Field(Decimal("12"), ge=0, le=100)
    bill_number_prefix: str = "MH"
    reservation_id_prefix: str = "RES"

    # Frontend
    frontend_url: str = "http://localhost:3000"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:8000",
    ]

    @model_validator(mode="after")
    def _ensure_frontend_in_cors(self) -> "Settings":
        """Ensure the configured frontend_url is always in cors_origins."""
        if self.frontend_url and self.frontend_url not in self.cors_origins:
            self.cors_origins.append(self.frontend_url)
        return self

    @model_validator(mode="after")
    def _check_inventory(self) -> "Settings":
        """Room numbers must be unique across room types."""
        overlap = set(self.premium_rooms) & set(self.deluxe_rooms)
        if overlap:
            raise ValueError(f"Room numbers configured twice: {sorted(overlap)}")
        return self

    @model_validator(mode="after")
    def _validate_secrets(self) -> "Settings":
        """Reject insecure JWT secret in production and warn in development."""
        if self.jwt_secret_key == _INSECURE_JWT_DEFAULT:
            if self.environment == "production":
                raise ValueError(
                    "JWT_SECRET_KEY must be set to a strong random value in production. "
                    'Generate one with: python -c "import secrets; print(secrets.token_urlsafe(64))"'
                )
            warnings.warn(
                "Using default JWT secret, which is only acceptable for local development. "
                "Set JWT_SECRET_KEY in your .env file.",
                UserWarning,
                stacklevel=1,
            )
        return self


settings = Settings()
