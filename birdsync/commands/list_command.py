"""
List command - Display the episodes recorded on one date
"""

from typing import List

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from birdsync.birdsy import BirdsyClient
from birdsync.models import Episode
from birdsync.utils import format_duration, format_favorite

console = Console()


def fetch_episodes_for_date(client: BirdsyClient, date: str | None) -> List[Episode]:
    """
    Resolve the episode count of a date, then its full listing

    Nothing beyond the count is fetched when the date has no episodes.
    """
    count = client.get_count_for_date(date)
    console.print(f"Found {count} videos for {date}.")
    if count == 0:
        return []

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        task = progress.add_task("Loading...", total=None)
        episodes = client.get_videos_for_date(date)
        progress.update(task, completed=True)

    return episodes


def print_episode(episode: Episode) -> None:
    console.print()
    console.print(f"[bold]Title:[/bold]     {escape(episode.title)}")
    console.print(f"[bold]ID:[/bold]        {escape(str(episode.id))}")
    console.print(f"[bold]Favorite:[/bold]  {format_favorite(episode.favorite)}")
    console.print(f"[bold]Uploaded:[/bold]  {escape(episode.recorded_at)}")
    console.print(f"[bold]Duration:[/bold]  {format_duration(episode.duration)}")
    console.print(f"[bold]Thumbnail:[/bold] {escape(episode.image_url)}")
    console.print(f"[bold]Video:[/bold]     {escape(episode.video_url)}")


def list_command(client: BirdsyClient, date: str | None) -> List[Episode]:
    """Print every episode recorded on a date, without touching any file"""
    episodes = fetch_episodes_for_date(client, date)
    for episode in episodes:
        print_episode(episode)
    return episodes
