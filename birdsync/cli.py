"""
Command Line Interface (CLI) with Click
"""

import logging
import sys
from pathlib import Path

import click
from click.core import ParameterSource
from rich.console import Console
from rich.table import Table

from birdsync.birdsy import BirdsyClient
from birdsync.cli_config import authenticate, load_config_from_args, setup_context
from birdsync.commands import (
    delete_command,
    download_command,
    list_command,
    sync_command,
    test_command,
)
from birdsync.config import Config
from birdsync.downloader import Downloader
from birdsync.models import ActionSummary
from birdsync.utils import setup_logging, to_api_date

logger = logging.getLogger(__name__)
console = Console()

date_option = click.option(
    "--date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    help="Date in YYYY-MM-DD format",
)
dry_run_option = click.option(
    "--dry-run", is_flag=True, help="Simulation mode (don't write or delete anything)"
)


def print_summary(title: str, summary: ActionSummary, dry_run: bool = False):
    """Display the counters of an action"""
    table = Table(title=title)
    table.add_column("Total", style="cyan")
    table.add_column("Success", style="green")
    table.add_column("Failed", style="red")
    table.add_column("Skipped", style="dim")
    table.add_row(
        str(summary.total),
        str(summary.successful),
        str(summary.failed),
        str(summary.skipped),
    )
    console.print()
    console.print(table)

    if dry_run:
        console.print("\n[yellow]DRY RUN mode - Nothing was written or deleted[/yellow]")


@click.group()
@click.option(
    "--config", "-c", type=click.Path(exists=True), help="YAML configuration file"
)
@click.option("--email", envvar="BIRDSY_EMAIL", help="Birdsy account email")
@click.option("--password", envvar="BIRDSY_PASSWORD", help="Birdsy account password")
@click.option(
    "--download-path", envvar="BIRDSY_DOWNLOAD_PATH", help="Download directory"
)
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
)
@click.pass_context
def cli(ctx, config, email, password, download_path, log_level):
    """BirdSync - Archive your favorite Birdsy episodes"""

    # Configuration and login happen when a command first needs them,
    # so `--help` and `init` work without credentials or network
    ctx.ensure_object(dict)
    ctx.obj["options"] = {
        "config_file": config,
        "email": email,
        "password": password,
        "download_path": download_path,
        "log_level": log_level,
        "log_level_given": (
            ctx.get_parameter_source("log_level") is not ParameterSource.DEFAULT
        ),
    }


def get_session(ctx: click.Context) -> dict:
    """Load configuration, log in and build the downloader once per run"""
    if "client" in ctx.obj:
        return ctx.obj

    options = ctx.obj["options"]
    cfg = load_config_from_args(
        options["config_file"],
        options["email"],
        options["password"],
        options["download_path"],
        options["log_level"],
    )
    # --log-level beats the config file
    if options["log_level_given"]:
        cfg.log_level = options["log_level"]
    setup_logging(cfg.log_level)

    client = authenticate(cfg)
    ctx.obj.update(setup_context(cfg, client))
    return ctx.obj


@cli.command()
@dry_run_option
@click.pass_context
def sync(ctx, dry_run):
    """Download every favorite episode not downloaded yet"""

    session = get_session(ctx)
    client: BirdsyClient = session["client"]
    downloader: Downloader = session["downloader"]

    try:
        summary = sync_command(client, downloader, dry_run=dry_run)
        print_summary("Sync Summary", summary, dry_run)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        logger.exception("Error during sync")
        sys.exit(1)


@cli.command("list")
@date_option
@click.pass_context
def list_episodes(ctx, date):
    """List the episodes recorded on a date"""

    session = get_session(ctx)
    client: BirdsyClient = session["client"]

    try:
        list_command(client, to_api_date(date))
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        logger.exception("Error during listing")
        sys.exit(1)


@cli.command()
@date_option
@dry_run_option
@click.pass_context
def delete(ctx, date, dry_run):
    """Delete the non-favorite episodes recorded on a date"""

    session = get_session(ctx)
    client: BirdsyClient = session["client"]

    try:
        summary = delete_command(client, to_api_date(date), dry_run=dry_run)
        print_summary("Delete Summary", summary, dry_run)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        logger.exception("Error during delete")
        sys.exit(1)


@cli.command()
@date_option
@dry_run_option
@click.pass_context
def download(ctx, date, dry_run):
    """Download the favorite episodes recorded on a date"""

    session = get_session(ctx)
    client: BirdsyClient = session["client"]
    downloader: Downloader = session["downloader"]

    try:
        summary = download_command(
            client, downloader, to_api_date(date), dry_run=dry_run
        )
        print_summary("Download Summary", summary, dry_run)
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        logger.exception("Error during download")
        sys.exit(1)


@cli.command()
@click.pass_context
def test(ctx):
    """Test the Birdsy account and the download directory"""
    session = get_session(ctx)
    config: Config = session["config"]
    client: BirdsyClient = session["client"]
    downloader: Downloader = session["downloader"]
    test_command(config, client, downloader)


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option(
    "--email", "account_email", default="you@example.com", help="Account email"
)
@click.option(
    "--download-path", "target_dir", default="./birdsy", help="Download directory"
)
def init(path, account_email, target_dir):
    """Write a template configuration file"""

    config_path = Path(path)
    if config_path.exists():
        console.print(f"[red]Error:[/red] {config_path} already exists")
        sys.exit(1)

    template = Config(
        email=account_email,
        password="",
        download_path=target_dir,
        create_download_dir=True,
    )
    template.to_file(config_path)
    console.print(f"[green]✓ Configuration written to {config_path}[/green]")
    console.print(
        "Set BIRDSY_PASSWORD in your environment or add a password entry to the file."
    )


def main():
    """Main entry point"""
    cli(obj={})


if __name__ == "__main__":
    main()
