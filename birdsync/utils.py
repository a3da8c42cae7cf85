"""
Miscellaneous utilities
"""

import logging
from datetime import date as date_type
from pathlib import Path


def setup_logging(log_level: str = "INFO"):
    """Configure logging system"""
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def to_api_date(day: date_type | None) -> str | None:
    """Format a calendar day the way the episodes API expects it"""
    if day is None:
        return None
    return f"{day.strftime('%Y-%m-%d')}T00:00:00"


def format_duration(duration: float | int | str) -> str:
    """Format a duration in seconds, e.g. ``30 s``"""
    if isinstance(duration, float) and duration.is_integer():
        duration = int(duration)
    return f"{duration} s"


def format_favorite(favorite: bool) -> str:
    return "true" if favorite else "false"


def validate_directory(path: str | None, create: bool = False) -> Path | None:
    """Validate that a path is a valid directory"""
    if not path:
        return None

    dir_path = Path(path).expanduser()

    if not dir_path.exists():
        if create:
            dir_path.mkdir(parents=True, exist_ok=True)
            return dir_path
        else:
            raise ValueError(f"Directory does not exist: {path}")

    if not dir_path.is_dir():
        raise ValueError(f"Path is not a directory: {path}")

    return dir_path
