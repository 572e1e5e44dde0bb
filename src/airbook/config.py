"""Application configuration and settings management."""

from typing import Annotated, Any

import json
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="AIRBOOK_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Airline Booking Simulator API"
    api_prefix: str = "/api"
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    log_level: str = Field(default="WARNING", description="Root logger level for the CLI and server.")

    base_ticket_price: float = Field(default=3000.0, gt=0.0)
    distance_cost_factor: float = Field(default=5.0, ge=0.0)
    return_ticket_multiplier: float = Field(default=1.8, gt=0.0)
    advance_purchase_days: int = Field(
        default=30,
        description="Bookings made more than this many days ahead get the advance multiplier.",
    )
    short_notice_days: int = Field(
        default=7,
        description="Bookings made this many days ahead or fewer get the short-notice multiplier.",
    )
    advance_purchase_multiplier: float = Field(default=1.0, gt=0.0)
    standard_multiplier: float = Field(default=1.2, gt=0.0)
    short_notice_multiplier: float = Field(default=1.5, gt=0.0)

    max_passengers: int = Field(default=180, ge=1)
    ticket_validity_years: int = Field(default=1, ge=1)
    seed_crew: bool = Field(
        default=True,
        description="Register a default pilot and flight attendant when a session starts.",
    )

    frontend_allowed_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> str:
        return str(value).strip().upper()

    @model_validator(mode="after")
    def _check_lead_time_tiers(self) -> "Settings":
        if self.short_notice_days >= self.advance_purchase_days:
            raise ValueError("short_notice_days must be lower than advance_purchase_days")
        return self


settings = Settings()
