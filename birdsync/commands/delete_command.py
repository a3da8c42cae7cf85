"""
Delete command - Remove the non-favorite episodes of one date from Birdsy
"""

from rich.console import Console

from birdsync.birdsy import BirdsyClient
from birdsync.models import ActionSummary

from .list_command import fetch_episodes_for_date, print_episode

console = Console()


def delete_command(
    client: BirdsyClient, date: str | None, dry_run: bool = False
) -> ActionSummary:
    """
    Delete every non-favorite episode recorded on a date

    Favorites are never deleted. Each other episode gets exactly one
    delete request; a failed request is reported and the next episode
    is processed.

    Args:
        client: Authenticated Birdsy client
        date: Date in API format (``YYYY-MM-DDT00:00:00``)
        dry_run: If True, report what would be deleted

    Returns:
        ActionSummary with favorites counted as skipped
    """
    summary = ActionSummary()

    for episode in fetch_episodes_for_date(client, date):
        print_episode(episode)

        if episode.favorite:
            summary.skipped += 1
            console.print(f"\n[dim]Not deleting {episode.id}.[/dim]")
            continue

        summary.total += 1
        if dry_run:
            console.print(f"\n[yellow]DRY RUN:[/yellow] Would delete {episode.id}")
            summary.successful += 1
            continue

        console.print(f"\nDeleting {episode.id}...")
        if client.delete_episode(episode.id):
            summary.successful += 1
            console.print("[green]done.[/green]")
        else:
            summary.failed += 1
            console.print("[red]failed.[/red]")

    return summary
