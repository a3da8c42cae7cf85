"""
Sync command - Download every favorite episode not already on disk
"""

import logging

from rich.console import Console

from birdsync.birdsy import BirdsyClient, CatalogError
from birdsync.downloader import Downloader
from birdsync.models import ActionSummary

from .download_command import download_favorite

logger = logging.getLogger(__name__)
console = Console()


def sync_command(
    client: BirdsyClient, downloader: Downloader, dry_run: bool = False
) -> ActionSummary:
    """
    Walk every recorded day and download the missing favorites

    Days are processed in the reverse of the order the server lists them.
    An episode whose metadata file exists is skipped without any request,
    so re-running a sync only fetches what is new.

    Args:
        client: Authenticated Birdsy client
        downloader: Downloader writing to the download directory
        dry_run: If True, don't write any file

    Returns:
        ActionSummary over all days
    """
    summary = ActionSummary()

    days = client.get_day_counts()
    if not days:
        console.print("[yellow]No recorded days found[/yellow]")
        return summary

    for day in reversed(days):
        console.print(
            f"\n[bold cyan]Syncing {day.count} videos for {day.date}.[/bold cyan]"
        )

        try:
            episodes = client.get_videos_for_date(day.date)
        except CatalogError as e:
            console.print(f"  [red]Error:[/red] {e}")
            logger.error(f"Skipping {day.date}: {e}")
            continue

        for episode in episodes:
            paths = downloader.get_artifact_paths(episode)

            if downloader.is_downloaded(episode):
                summary.skipped += 1
                console.print(
                    f"  [dim]{episode.id} already downloaded. "
                    f"(Delete {paths.csv} to re-download.)[/dim]"
                )
                continue

            if not episode.favorite:
                summary.skipped += 1
                console.print(
                    f"  [dim]Not downloading {episode.id} (not marked as favorite).[/dim]"
                )
                continue

            download_favorite(downloader, episode, summary, dry_run)

    return summary
