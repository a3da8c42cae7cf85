"""
CLI configuration handler
"""

import sys
from pathlib import Path

from rich.console import Console

from .birdsy import AuthenticationError, BirdsyClient
from .config import Config
from .downloader import Downloader
from .utils import validate_directory

console = Console()


def load_config_from_args(
    config_file: str | None,
    email: str | None,
    password: str | None,
    download_path: str | None,
    log_level: str,
) -> Config:
    """
    Load configuration from CLI arguments and files

    Args:
        config_file: Path to config file
        email: Birdsy account email from CLI
        password: Birdsy account password from CLI
        download_path: Download directory from CLI
        log_level: Log level

    Returns:
        Config object

    Raises:
        SystemExit if configuration is invalid
    """
    try:
        if config_file:
            cfg = Config.from_env_and_file(Path(config_file))
        elif email and password and download_path:
            cfg = Config(
                email=email,
                password=password,
                download_path=download_path,
                log_level=log_level,
            )
        else:
            # Try to load from default file
            default_config = Path("config.yaml")
            if default_config.exists():
                cfg = Config.from_env_and_file(default_config)
            else:
                console.print(
                    "[red]Error:[/red] Missing configuration. Use --config or environment variables."
                )
                console.print("\nExample:")
                console.print(
                    "  birdsync --email me@example.com --password SECRET --download-path ./birdsy list --date 2024-01-01"
                )
                console.print(
                    "\nOr create a config.yaml file with: birdsync init config.yaml"
                )
                sys.exit(1)
    except (OSError, TypeError, ValueError) as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)

    return cfg


def authenticate(config: Config) -> BirdsyClient:
    """
    Log in to Birdsy and return an authenticated client

    Args:
        config: Configuration object

    Returns:
        BirdsyClient instance holding the session token

    Raises:
        SystemExit if authentication fails
    """
    try:
        client = BirdsyClient(config)
        client.authenticate(config.email, config.password)
        return client
    except AuthenticationError as e:
        console.print(f"[red]Birdsy authentication failed:[/red] {e}")
        console.print("\nPlease verify:")
        console.print("  - Email and password are correct")
        console.print(f"  - {config.base_url} is reachable from your machine")
        sys.exit(1)


def setup_context(config: Config, client: BirdsyClient) -> dict:
    """
    Setup CLI context with config, Birdsy client and downloader

    Args:
        config: Configuration object
        client: Authenticated BirdsyClient

    Returns:
        Dictionary with context objects

    Raises:
        SystemExit if the download directory is unusable
    """
    try:
        output_directory = validate_directory(
            config.download_path, create=config.create_download_dir
        )
    except (OSError, ValueError) as e:
        console.print(f"[red]Download directory error:[/red] {e}")
        sys.exit(1)

    return {
        "config": config,
        "client": client,
        "downloader": Downloader(output_directory, timeout=config.timeout),
    }
