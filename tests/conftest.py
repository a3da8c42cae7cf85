"""Shared fixtures for BirdSync tests."""

from pathlib import Path
from unittest.mock import Mock

import pytest
import requests

from birdsync.birdsy import BirdsyClient
from birdsync.config import Config
from birdsync.downloader import Downloader
from birdsync.models import DaySummary, Episode


def make_response(json_data=None, status_code: int = 200) -> Mock:
    """Build a fake requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.json.return_value = json_data
    response.content = b"{}" if json_data is not None else b""
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


def make_item(episode_id, favorite: bool = True, title: str = "Backyard") -> dict:
    """Build an episode item as returned by the listing endpoint."""
    return {
        "id": episode_id,
        "type": "episode",
        "attributes": {
            "favorite": favorite,
            "title": title,
            "formatted_recorded_at": "2024-01-01 10:00",
            "duration": 30,
            "image_url": f"http://x/{episode_id}.jpg",
            "video_url": f"http://x/{episode_id}.mp4",
        },
    }


def make_episode(episode_id, favorite: bool = True, title: str = "Backyard") -> Episode:
    return Episode.from_api(make_item(episode_id, favorite=favorite, title=title))


@pytest.fixture
def download_dir(tmp_path: Path) -> Path:
    """Create temporary download directory."""
    directory = tmp_path / "downloads"
    directory.mkdir()
    return directory


@pytest.fixture
def config(download_dir: Path) -> Config:
    return Config(
        email="me@example.com",
        password="secret",
        download_path=str(download_dir),
        base_url="https://birdsy.test",
    )


@pytest.fixture
def client(config: Config) -> BirdsyClient:
    """Client with a fake session; tests set session.get / session.post."""
    birdsy = BirdsyClient(config)
    birdsy.session = Mock()
    birdsy.session.headers = {}
    return birdsy


@pytest.fixture
def mock_client() -> Mock:
    """Stand-in for an authenticated client in command tests."""
    mock = Mock(spec=BirdsyClient)
    mock.get_day_counts.return_value = []
    mock.get_count_for_date.return_value = 0
    mock.get_videos_for_date.return_value = []
    mock.delete_episode.return_value = True
    return mock


@pytest.fixture
def downloader(download_dir: Path) -> Downloader:
    """Downloader whose network transfers always succeed and write a stub."""
    instance = Downloader(download_dir)

    def fake_download(url: str, output_path: Path) -> bool:
        output_path.write_bytes(b"data")
        return True

    instance.download_file = Mock(side_effect=fake_download)
    return instance


@pytest.fixture
def days() -> list[DaySummary]:
    return [
        DaySummary(date="2024-01-01T00:00:00", count=2),
        DaySummary(date="2024-01-02T00:00:00", count=1),
    ]
