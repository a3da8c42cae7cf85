"""
Download command - Download the favorite episodes of one date
"""

from rich.console import Console

from birdsync.birdsy import BirdsyClient
from birdsync.downloader import Downloader
from birdsync.models import ActionSummary, Episode

from .list_command import fetch_episodes_for_date, print_episode

console = Console()


def download_favorite(
    downloader: Downloader,
    episode: Episode,
    summary: ActionSummary,
    dry_run: bool = False,
) -> None:
    """Write the artifact triple of one favorite episode and count the outcome"""
    summary.total += 1
    paths = downloader.get_artifact_paths(episode)

    if dry_run:
        console.print(f"  [yellow]DRY RUN:[/yellow] Would download {episode.id}")
        console.print(f"    [dim]{paths.csv}, {paths.thumbnail}, {paths.video}[/dim]")
        summary.successful += 1
        return

    console.print(f"  [blue]Downloading:[/blue] {episode.id}")
    result = downloader.download_episode(episode)

    if result.success:
        summary.successful += 1
        console.print(f"    [green]✓ Metadata:[/green]  {paths.csv}")
        console.print(f"    [green]✓ Thumbnail:[/green] {paths.thumbnail}")
        console.print(f"    [green]✓ Video:[/green]     {paths.video}")
    else:
        summary.failed += 1
        console.print(f"    [red]✗ Failed:[/red] {result.error}")


def download_command(
    client: BirdsyClient,
    downloader: Downloader,
    date: str | None,
    dry_run: bool = False,
) -> ActionSummary:
    """
    Download every favorite episode recorded on a date

    Unlike sync, an existing metadata file does not prevent a favorite
    from being downloaded again.

    Args:
        client: Authenticated Birdsy client
        downloader: Downloader writing to the download directory
        date: Date in API format (``YYYY-MM-DDT00:00:00``)
        dry_run: If True, don't write any file

    Returns:
        ActionSummary with non-favorites counted as skipped
    """
    summary = ActionSummary()

    for episode in fetch_episodes_for_date(client, date):
        print_episode(episode)

        if not episode.favorite:
            summary.skipped += 1
            console.print(f"\n[dim]Not downloading {episode.id}.[/dim]")
            continue

        console.print()
        download_favorite(downloader, episode, summary, dry_run)

    return summary
