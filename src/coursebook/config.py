"""Coursebook configuration loaded from environment variables.

Only the calling layer reads this; engine functions take every value as an
explicit argument.
"""

from datetime import date

from pydantic import Field
from pydantic_settings import BaseSettings


class CoursebookConfig(BaseSettings):
    """Course calendar configuration loaded from environment variables.

    Settings are loaded from environment variables with sensible defaults.
    For local development, create a .env file in the project root.
    """

    # Course period (civil dates, both inclusive)
    course_start: date = Field(
        default=date(2025, 11, 1),
        description="First civil date of the course period",
    )
    course_end: date = Field(
        default=date(2026, 4, 30),
        description="Last civil date of the course period",
    )

    # Civil time
    utc_offset_hours: int = Field(
        default=-3,
        ge=-12,
        le=14,
        description="Fixed civil-time offset used for every date/time interpretation",
    )
    timezone_label: str = Field(
        default="America/Sao_Paulo",
        description="Display name of the fixed offset (informational only)",
    )

    # Paths
    templates_path: str = Field(
        default="data/weekly_schedule.json",
        description="JSON file holding the weekly class template",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_config: CoursebookConfig | None = None


def get_config() -> CoursebookConfig:
    """Get the coursebook configuration singleton.

    Returns:
        CoursebookConfig: Coursebook configuration instance
    """
    global _config
    if _config is None:
        _config = CoursebookConfig()
    return _config
