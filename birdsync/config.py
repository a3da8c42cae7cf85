"""
Configuration management
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_BASE_URL = "https://birdsy.com"


@dataclass
class Config:
    """Application configuration"""

    email: str
    password: str
    download_path: str
    base_url: str = DEFAULT_BASE_URL
    log_level: str = "INFO"
    # Seconds; None waits forever on an unresponsive server
    timeout: float | None = 30.0
    # Consecutive failures tolerated on one listing page before the day fails
    page_retries: int = 3
    # Raise catalog errors instead of degrading to empty results
    fail_fast: bool = False
    create_download_dir: bool = False

    @classmethod
    def from_env_and_file(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file and/or environment variables"""
        config_data: dict[str, Any] = {}

        # Load from file if specified
        if config_path and config_path.exists():
            with open(config_path, "r", encoding="utf-8") as f:
                config_data = yaml.safe_load(f) or {}

        # Environment variables take priority
        if os.getenv("BIRDSY_EMAIL"):
            config_data["email"] = os.getenv("BIRDSY_EMAIL")
        if os.getenv("BIRDSY_PASSWORD"):
            config_data["password"] = os.getenv("BIRDSY_PASSWORD")
        if os.getenv("BIRDSY_DOWNLOAD_PATH"):
            config_data["download_path"] = os.getenv("BIRDSY_DOWNLOAD_PATH")
        if os.getenv("BIRDSY_BASE_URL"):
            config_data["base_url"] = os.getenv("BIRDSY_BASE_URL")

        missing = [
            key
            for key in ("email", "password", "download_path")
            if not config_data.get(key)
        ]
        if missing:
            raise ValueError(
                f"Incomplete configuration, missing: {', '.join(missing)}. "
                "Use a config file or environment variables."
            )

        return cls(**config_data)

    def to_file(self, config_path: Path):
        """Save configuration to a YAML file (the password is never written)"""
        data = {
            "email": self.email,
            "download_path": self.download_path,
            "base_url": self.base_url,
            "log_level": self.log_level,
            "timeout": self.timeout,
            "page_retries": self.page_retries,
            "fail_fast": self.fail_fast,
            "create_download_dir": self.create_download_dir,
        }

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
