"""Configuration for the date picker."""

import os
from pathlib import Path

from pydantic import BaseModel, Field

from app.constants import DEFAULT_CUSTOM_INTERVAL_DAYS, DEFAULT_RULE_FORMAT

try:
    from dotenv import load_dotenv
except ImportError:
    load_dotenv = None


class PickerConfig(BaseModel):
    """Date picker configuration with Pydantic validation."""

    # Logging
    log_dir: Path = Field(default=Path("logs"))
    log_filename: str = Field(default="date_picker.log")

    # Selection defaults
    default_custom_interval_days: int = Field(
        default=DEFAULT_CUSTOM_INTERVAL_DAYS, ge=1
    )

    # Output
    rule_format: str = Field(default=DEFAULT_RULE_FORMAT)

    @classmethod
    def from_env(cls) -> "PickerConfig":
        """Load configuration from environment variables and .env file."""
        # Load .env file if python-dotenv is available
        if load_dotenv is not None:
            load_dotenv()

        config_dict = {}

        # Logging
        if "LOG_DIR" in os.environ:
            config_dict["log_dir"] = Path(os.environ["LOG_DIR"])
        if "LOG_FILENAME" in os.environ:
            config_dict["log_filename"] = os.environ["LOG_FILENAME"]

        # Selection defaults
        if "DEFAULT_CUSTOM_INTERVAL_DAYS" in os.environ:
            try:
                interval = int(os.environ["DEFAULT_CUSTOM_INTERVAL_DAYS"])
            except ValueError:
                interval = None  # Keep default if invalid
            if interval is not None and interval >= 1:
                config_dict["default_custom_interval_days"] = interval

        # Output
        if "RULE_FORMAT" in os.environ:
            config_dict["rule_format"] = os.environ["RULE_FORMAT"].lower()

        return cls(**config_dict)
