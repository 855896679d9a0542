"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, including
the default pricing used when a caller does not pass its own
``PricingConfig``.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Aurauspooli API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file in addition to the console handler.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    # Threshold for the log file; defaults to ``log_level``.
    log_file_level: Optional[str] = os.getenv("LOG_FILE_LEVEL") or None

    # Flat fee per postal area, split between all bookings in the area.
    base_price_per_area: float = float(os.getenv("BASE_PRICE_PER_AREA", "50"))
    # Price of one hour of work.
    hourly_rate: float = float(os.getenv("HOURLY_RATE", "100"))
    # Billing granularity in minutes.  Carried in the pricing config but
    # not applied by ``calculate_price``.
    time_unit_minutes: int = int(os.getenv("TIME_UNIT_MINUTES", "15"))
    currency_suffix: str = os.getenv("CURRENCY_SUFFIX", "€")

    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
