# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration: all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "designflow")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8010"))

    # Assignment load policy: "flat" adds FLAT_ASSIGNMENT_HOURS,
    # "estimated" adds the request's estimated_hours.
    ASSIGNMENT_HOURS_POLICY: str = os.getenv("ASSIGNMENT_HOURS_POLICY", "flat").lower()
    FLAT_ASSIGNMENT_HOURS: float = float(os.getenv("FLAT_ASSIGNMENT_HOURS", "5"))

    TIMELINE_DAYS: int = int(os.getenv("TIMELINE_DAYS", "14"))
    TIMELINE_MIN_WIDTH: float = float(os.getenv("TIMELINE_MIN_WIDTH", "0.02"))

    DEFAULT_ACTIVITY_LIMIT: int = int(os.getenv("DEFAULT_ACTIVITY_LIMIT", "100"))
    MAX_ACTIVITY_SIZE: int = int(os.getenv("MAX_ACTIVITY_SIZE", "10000"))

    ADVISORY_API_KEY: str = os.getenv("ADVISORY_API_KEY", os.getenv("API_KEY", ""))
    ADVISORY_MODEL: str = os.getenv("ADVISORY_MODEL", "gemini-2.5-flash")
    ADVISORY_BASE_URL: str = os.getenv(
        "ADVISORY_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
    )
    ADVISORY_TIMEOUT: float = float(os.getenv("ADVISORY_TIMEOUT", "20.0"))

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    SEED_DEMO_DATA: bool = (
        os.getenv("SEED_DEMO_DATA", "true").lower() == "true"
    )


settings = Settings()
