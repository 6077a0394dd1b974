"""
Telemetry Simulator Configuration

All settings loaded from environment variables with sensible defaults.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class TelemetrySettings(BaseSettings):
    """Publisher and streaming server configuration."""

    # Server
    host: str = Field(
        default="0.0.0.0",
        description="Bind address for the streaming server"
    )
    port: int = Field(
        default=8080,
        description="Port for the streaming server"
    )

    # Stream intervals (seconds between samples)
    ais_interval_s: float = Field(
        default=2.0,
        description="Interval between AIS samples"
    )
    adsb_interval_s: float = Field(
        default=2.0,
        description="Interval between ADSB samples"
    )
    gps_interval_s: float = Field(
        default=1.0,
        description="Interval between GPS samples"
    )
    lorawan_interval_s: float = Field(
        default=5.0,
        description="Interval between LoRaWAN samples (uplinks are infrequent)"
    )

    # Randomness
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for a repeatable sample sequence (unset = fresh)"
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level"
    )

    class Config:
        env_file = ".env"
        env_prefix = "TELEMETRY_"
        extra = "ignore"

    def interval_for(self, domain: str) -> float:
        """Stream interval for a domain name (ais, adsb, gps, lorawan)."""
        return getattr(self, f"{domain.lower()}_interval_s")


# Global settings instance
settings = TelemetrySettings()


def get_settings() -> TelemetrySettings:
    """Get the process-wide settings."""
    return settings
