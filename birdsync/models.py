"""
Data models for BirdSync
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Episode:
    """Represents a recorded video episode on Birdsy"""

    id: str | int
    favorite: bool
    title: str
    recorded_at: str
    duration: float
    image_url: str
    video_url: str

    @classmethod
    def from_api(cls, item: dict) -> "Episode":
        """Build an episode from an item of the /api/v2/episodes listing"""
        attributes = item.get("attributes", {})
        return cls(
            id=item["id"],
            favorite=bool(attributes.get("favorite", False)),
            title=attributes.get("title", ""),
            recorded_at=attributes.get("formatted_recorded_at", ""),
            duration=attributes.get("duration", 0),
            image_url=attributes.get("image_url", ""),
            video_url=attributes.get("video_url", ""),
        )


@dataclass(frozen=True)
class DaySummary:
    """Number of episodes recorded on one calendar day"""

    date: str
    count: int

    @classmethod
    def from_api(cls, item: dict) -> "DaySummary":
        return cls(date=item["date"], count=int(item.get("count", 0)))


@dataclass
class DownloadResult:
    """Download result"""

    episode: Episode
    csv_path: Path | None = None
    thumbnail_ok: bool = False
    video_ok: bool = False
    error: str | None = None

    @property
    def success(self) -> bool:
        return self.csv_path is not None and self.thumbnail_ok and self.video_ok


@dataclass
class ActionSummary:
    """Counters reported at the end of an action"""

    total: int = 0
    successful: int = 0
    failed: int = 0
    skipped: int = 0
